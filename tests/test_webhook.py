import json

from telekit.webhook import Webhook, WebhookEndpoint, WebhookTLS


def test_plain_listener_url():
    hook = Webhook(listen="bot.example.com:8080")
    assert hook.params() == {"url": "http://bot.example.com:8080"}


def test_tls_listener_url():
    hook = Webhook(listen="bot.example.com:8443", tls=WebhookTLS(key="k.pem", cert="c.pem"))
    assert hook.params()["url"] == "https://bot.example.com:8443"


def test_endpoint_overrides_url():
    hook = Webhook(
        listen="0.0.0.0:8443",
        tls=WebhookTLS(key="k.pem", cert="c.pem"),
        endpoint=WebhookEndpoint(public_url="https://example.com/hook"),
    )
    assert hook.params()["url"] == "https://example.com/hook"


def test_optional_params():
    hook = Webhook(
        listen="example.com",
        max_connections=40,
        allowed_updates=["message", "callback_query"],
        ip="192.0.2.1",
        drop_updates=True,
        secret_token="secret",
    )
    params = hook.params()
    assert params["max_connections"] == "40"
    assert json.loads(params["allowed_updates"]) == ["message", "callback_query"]
    assert params["ip_address"] == "192.0.2.1"
    assert params["drop_pending_updates"] == "true"
    assert params["secret_token"] == "secret"


def test_certificate_selection():
    assert Webhook().certificate() is None
    tls = WebhookTLS(key="k.pem", cert="c.pem")
    assert Webhook(tls=tls).certificate() == "c.pem"
    public = WebhookEndpoint(public_url="https://example.com")
    assert Webhook(tls=tls, endpoint=public).certificate() is None
    own = WebhookEndpoint(public_url="https://example.com", cert="public.pem")
    assert Webhook(tls=tls, endpoint=own).certificate() == "public.pem"


def test_from_dict():
    hook = Webhook.from_dict(
        {
            "url": "https://example.com/hook",
            "has_custom_certificate": True,
            "pending_update_count": 2,
            "last_error_message": "timeout",
            "allowed_updates": ["message"],
        }
    )
    assert hook.listen == "https://example.com/hook"
    assert hook.has_custom_cert is True
    assert hook.pending_updates == 2
    assert hook.error_message == "timeout"
    assert hook.allowed_updates == ["message"]
    assert hook.tls is None