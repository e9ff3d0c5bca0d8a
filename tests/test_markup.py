import pytest

from telekit.markup import (
    Btn,
    InlineButton,
    Login,
    MenuButton,
    MenuButtonType,
    RecipientShared,
    ReplyButton,
    ReplyMarkup,
    ReplyRecipient,
)
from telekit.poll import PollType
from telekit.web_app import WebApp


def test_btn_reply_conversions():
    r = ReplyMarkup()
    assert r.text("T").reply() == ReplyButton(text="T")
    assert r.contact("T").reply() == ReplyButton(text="T", contact=True)
    assert r.location("T").reply() == ReplyButton(text="T", location=True)
    assert r.poll("T", PollType.ANY).reply() == ReplyButton(text="T", poll=PollType.ANY)
    assert r.data("T", "u").reply() is None


def test_btn_inline_conversions():
    r = ReplyMarkup()
    assert r.data("T", "u").inline() == InlineButton(unique="u", text="T")
    assert r.data("T", "u", "1", "2").inline() == InlineButton(
        unique="u", text="T", data="1|2"
    )
    assert r.url("T", "url").inline() == InlineButton(text="T", url="url")
    assert r.query("T", "q").inline() == InlineButton(text="T", inline_query="q")
    assert r.query_chat("T", "q").inline() == InlineButton(
        text="T", inline_query_chat="q"
    )
    assert r.login("T", Login(text="T")).inline() == InlineButton(
        text="T", login=Login(text="T")
    )
    assert r.web_app("T", WebApp(url="url")).inline() == InlineButton(
        text="T", web_app=WebApp(url="url")
    )


def test_options_keyboards():
    r = ReplyMarkup()
    r.reply(r.row(r.text("Menu")), r.row(r.text("Settings")))
    assert r.reply_keyboard == [
        [ReplyButton(text="Menu")],
        [ReplyButton(text="Settings")],
    ]

    i = ReplyMarkup()
    i.inline(i.row(i.data("Previous", "prev"), i.data("Next", "next")))
    assert i.inline_keyboard == [
        [InlineButton(unique="prev", text="Previous"), InlineButton(unique="next", text="Next")]
    ]

    assert r.copy() == r
    assert i.copy() == i


def test_reply_with_unique_button_raises():
    r = ReplyMarkup()
    with pytest.raises(ValueError, match="row 0 column 0"):
        r.reply(r.row(r.data("T", "u")))


def test_copy_is_independent():
    r = ReplyMarkup()
    r.reply(r.row(r.text("A")))
    cp = r.copy()
    cp.reply_keyboard[0][0].text = "B"
    cp.reply_keyboard.append([ReplyButton(text="C")])
    assert r.reply_keyboard == [[ReplyButton(text="A")]]


def test_split():
    r = ReplyMarkup()
    btns = [r.text(str(n)) for n in range(1, 7)]
    rows = r.split(3, btns)
    assert [[b.text for b in row] for row in rows] == [["1", "2", "3"], ["4", "5", "6"]]
    rows = r.split(2, btns)
    assert [[b.text for b in row] for row in rows] == [["1", "2"], ["3", "4"], ["5", "6"]]
    rows = r.split(4, btns)
    assert [len(row) for row in rows] == [4, 2]
    assert r.split(3, []) == []


def test_split_rejects_zero():
    with pytest.raises(ValueError):
        ReplyMarkup().split(0, [Btn(text="x")])


def test_poll_button_serialization():
    assert PollType.QUIZ.to_dict() == {"type": "quiz"}
    assert ReplyButton(text="T", poll=PollType.QUIZ).to_dict() == {
        "text": "T",
        "request_poll": {"type": "quiz"},
    }


def test_inline_button_current_chat_field():
    assert InlineButton(text="T").to_dict() == {
        "text": "T",
        "switch_inline_query_current_chat": "",
    }
    assert InlineButton(text="T", login=Login(url="u")).to_dict() == {
        "text": "T",
        "login_url": {"url": "u"},
    }
    assert InlineButton(text="T", web_app=WebApp(url="u")).to_dict() == {
        "text": "T",
        "web_app": {"url": "u"},
    }


def test_with_data_copies_and_drops_web_app():
    btn = InlineButton(unique="u", text="T", data="old", web_app=WebApp(url="w"))
    new = btn.with_data("new")
    assert new == InlineButton(unique="u", text="T", data="new")
    assert btn.data == "old"


def test_reply_recipient_to_dict():
    rr = ReplyRecipient(id=5, bot=False, quantity=2)
    assert rr.to_dict() == {"request_id": 5, "user_is_bot": False, "max_quantity": 2}
    assert ReplyRecipient(id=1, channel=True).to_dict() == {
        "request_id": 1,
        "chat_is_channel": True,
    }
    btn = ReplyMarkup().user("U", ReplyRecipient(id=3)).reply()
    assert btn.to_dict() == {"text": "U", "request_users": {"request_id": 3}}


def test_recipient_shared_from_dict():
    shared = RecipientShared.from_dict({"request_id": 7, "user_id": 11, "chat_id": 13})
    assert shared == RecipientShared(id=7, user_id=11, chat_id=13)


def test_reply_markup_to_dict():
    r = ReplyMarkup(resize_keyboard=True, placeholder="type")
    r.reply(r.row(r.contact("C")))
    assert r.to_dict() == {
        "keyboard": [[{"text": "C", "request_contact": True}]],
        "resize_keyboard": True,
        "input_field_placeholder": "type",
    }
    assert ReplyMarkup().to_dict() == {}


def test_menu_button_to_dict():
    assert MenuButton().to_dict() == {"type": "default"}
    mb = MenuButton(type=MenuButtonType.WEB_APP, text="Go", web_app=WebApp(url="w"))
    assert mb.to_dict() == {"type": "web_app", "text": "Go", "web_app": {"url": "w"}}