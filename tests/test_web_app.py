from telekit.web_app import WebApp, WebAppData, WebAppMessage, WriteAccessAllowed


def test_web_app_round_trip():
    app = WebApp(url="https://google.com")
    assert app.to_dict() == {"url": "https://google.com"}
    assert WebApp.from_dict(app.to_dict()) == app


def test_web_app_message_from_dict():
    msg = WebAppMessage.from_dict({"inline_message_id": "abc"})
    assert msg.inline_message_id == "abc"


def test_web_app_data_from_dict():
    d = WebAppData.from_dict({"data": "payload", "button_text": "Open"})
    assert d.data == "payload"
    assert d.text == "Open"


def test_write_access_omits_empty_fields():
    assert WriteAccessAllowed().to_dict() == {}


def test_write_access_round_trip():
    w = WriteAccessAllowed(web_app_name="shop", from_request=True)
    data = w.to_dict()
    assert "from_attachment_menu" not in data
    assert WriteAccessAllowed.from_dict(data) == w