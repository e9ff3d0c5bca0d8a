"""Web App related objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class WebApp:
    """A Web App launched from a keyboard or inline button."""

    url: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"url": self.url}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WebApp:
        return cls(url=data.get("url", ""))


@dataclass
class WebAppMessage:
    """An inline message sent by a Web App on behalf of a user."""

    inline_message_id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WebAppMessage:
        return cls(inline_message_id=data.get("inline_message_id", ""))


@dataclass
class WebAppData:
    """Data sent from a Web App to the bot."""

    data: str = ""
    text: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WebAppData:
        return cls(data=data.get("data", ""), text=data.get("button_text", ""))


@dataclass
class WriteAccessAllowed:
    """A user allowed the bot to write messages."""

    web_app_name: str = ""
    from_request: bool = False
    from_attachment_menu: bool = False

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.web_app_name:
            data["web_app_name"] = self.web_app_name
        if self.from_request:
            data["from_request"] = True
        if self.from_attachment_menu:
            data["from_attachment_menu"] = True
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WriteAccessAllowed:
        return cls(
            web_app_name=data.get("web_app_name", ""),
            from_request=data.get("from_request", False),
            from_attachment_menu=data.get("from_attachment_menu", False),
        )