"""Reply and inline keyboards, their buttons and the menu button."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from .poll import PollType
from .web_app import WebApp


def _poll_dict(poll: PollType | str) -> dict[str, str]:
    if isinstance(poll, PollType):
        return poll.to_dict()
    return {"type": poll}


@dataclass
class ReplyRecipient:
    """A request to share a user or a chat with the bot.

    Optional flags use None for "not set", so they stay three-state.
    """

    id: int = 0
    bot: bool | None = None
    premium: bool | None = None
    quantity: int = 0
    channel: bool = False
    forum: bool | None = None
    with_username: bool | None = None
    created: bool | None = None
    user_rights: dict[str, Any] | None = None
    bot_rights: dict[str, Any] | None = None
    bot_member: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"request_id": self.id}
        optional = {
            "user_is_bot": self.bot,
            "user_is_premium": self.premium,
            "chat_is_forum": self.forum,
            "chat_has_username": self.with_username,
            "chat_is_created": self.created,
            "user_administrator_rights": self.user_rights,
            "bot_administrator_rights": self.bot_rights,
            "bot_is_member": self.bot_member,
        }
        if self.quantity:
            data["max_quantity"] = self.quantity
        if self.channel:
            data["chat_is_channel"] = True
        data.update({k: v for k, v in optional.items() if v is not None})
        return data


@dataclass
class RecipientShared:
    """A user or a chat shared with the bot."""

    id: int = 0
    user_id: int = 0
    chat_id: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RecipientShared:
        return cls(
            id=data.get("request_id", 0),
            user_id=data.get("user_id", 0),
            chat_id=data.get("chat_id", 0),
        )


@dataclass
class Login:
    """Login URL parameter of an inline button, used to authorize a user."""

    url: str = ""
    text: str = ""
    username: str = ""
    write_access: bool = False

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"url": self.url}
        if self.text:
            data["forward_text"] = self.text
        if self.username:
            data["bot_username"] = self.username
        if self.write_access:
            data["request_write_access"] = True
        return data


@dataclass
class ReplyButton:
    """A button of a reply keyboard."""

    text: str = ""
    contact: bool = False
    location: bool = False
    poll: PollType | str = ""
    user: ReplyRecipient | None = None
    chat: ReplyRecipient | None = None
    web_app: WebApp | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"text": self.text}
        if self.contact:
            data["request_contact"] = True
        if self.location:
            data["request_location"] = True
        if self.poll:
            data["request_poll"] = _poll_dict(self.poll)
        if self.user is not None:
            data["request_users"] = self.user.to_dict()
        if self.chat is not None:
            data["request_chat"] = self.chat.to_dict()
        if self.web_app is not None:
            data["web_app"] = self.web_app.to_dict()
        return data


@dataclass
class InlineButton:
    """A button displayed in the message; unique names its callback endpoint."""

    unique: str = ""
    text: str = ""
    url: str = ""
    data: str = ""
    inline_query: str = ""
    inline_query_chat: str = ""
    inline_query_chosen_chat: dict[str, Any] | None = None
    login: Login | None = None
    web_app: WebApp | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.unique:
            out["unique"] = self.unique
        out["text"] = self.text
        if self.url:
            out["url"] = self.url
        if self.data:
            out["callback_data"] = self.data
        if self.inline_query:
            out["switch_inline_query"] = self.inline_query
        # With a login or web app the current-chat query must not be sent empty.
        if self.inline_query_chat or (self.login is None and self.web_app is None):
            out["switch_inline_query_current_chat"] = self.inline_query_chat
        if self.inline_query_chosen_chat is not None:
            out["switch_inline_query_chosen_chat"] = self.inline_query_chosen_chat
        if self.login is not None:
            out["login_url"] = self.login.to_dict()
        if self.web_app is not None:
            out["web_app"] = self.web_app.to_dict()
        return out

    def with_data(self, data: str) -> InlineButton:
        """Return a copy of the button carrying the given callback data."""
        return InlineButton(
            unique=self.unique,
            text=self.text,
            url=self.url,
            inline_query=self.inline_query,
            inline_query_chat=self.inline_query_chat,
            login=self.login,
            data=data,
        )


@dataclass
class Btn:
    """A constructor button that later becomes a reply or an inline button."""

    unique: str = ""
    text: str = ""
    url: str = ""
    data: str = ""
    inline_query: str = ""
    inline_query_chat: str = ""
    login: Login | None = None
    web_app: WebApp | None = None
    contact: bool = False
    location: bool = False
    poll: PollType | str = ""
    user: ReplyRecipient | None = None
    chat: ReplyRecipient | None = None

    def reply(self) -> ReplyButton | None:
        """The reply button, or None if this is a callback (unique) button."""
        if self.unique:
            return None
        return ReplyButton(
            text=self.text,
            contact=self.contact,
            location=self.location,
            poll=self.poll,
            user=self.user,
            chat=self.chat,
            web_app=self.web_app,
        )

    def inline(self) -> InlineButton:
        return InlineButton(
            unique=self.unique,
            text=self.text,
            url=self.url,
            data=self.data,
            inline_query=self.inline_query,
            inline_query_chat=self.inline_query_chat,
            login=self.login,
            web_app=self.web_app,
        )


@dataclass
class ReplyMarkup:
    """Reply keyboard or inline keyboard options of a message."""

    inline_keyboard: list[list[InlineButton]] = field(default_factory=list)
    reply_keyboard: list[list[ReplyButton]] = field(default_factory=list)
    force_reply: bool = False
    resize_keyboard: bool = False
    one_time_keyboard: bool = False
    remove_keyboard: bool = False
    selective: bool = False
    placeholder: str = ""
    is_persistent: bool = False

    def copy(self) -> ReplyMarkup:
        """Copy the markup together with its keyboard rows."""
        return replace(
            self,
            inline_keyboard=[
                [replace(b) for b in row] for row in self.inline_keyboard
            ],
            reply_keyboard=[[replace(b) for b in row] for row in self.reply_keyboard],
        )

    def row(self, *args: Btn) -> list[Btn]:
        return list(args)

    def split(self, max_per_row: int, buttons: list[Btn]) -> list[list[Btn]]:
        """Split buttons into rows of at most max_per_row buttons."""
        if max_per_row <= 0:
            raise ValueError("telekit: row size must be positive")
        return [
            list(buttons[start:start + max_per_row])
            for start in range(0, len(buttons), max_per_row)
        ]

    def inline(self, *args: list[Btn]) -> None:
        """Set the inline keyboard from rows of buttons."""
        keyboard = []
        for i, row in enumerate(args):
            keys = []
            for j, btn in enumerate(row):
                key = btn.inline()
                if key is None:
                    raise ValueError(
                        f"telekit: button row {i} column {j} is not an inline button"
                    )
                keys.append(key)
            keyboard.append(keys)
        self.inline_keyboard = keyboard

    def reply(self, *args: list[Btn]) -> None:
        """Set the reply keyboard from rows of buttons."""
        keyboard = []
        for i, row in enumerate(args):
            keys = []
            for j, btn in enumerate(row):
                key = btn.reply()
                if key is None:
                    raise ValueError(
                        f"telekit: button row {i} column {j} is not a reply button"
                    )
                keys.append(key)
            keyboard.append(keys)
        self.reply_keyboard = keyboard

    def text(self, text: str) -> Btn:
        return Btn(text=text)

    def data(self, text: str, unique: str, *args: str) -> Btn:
        return Btn(unique=unique, text=text, data="|".join(args))

    def url(self, text: str, url: str) -> Btn:
        return Btn(text=text, url=url)

    def query(self, text: str, query: str) -> Btn:
        return Btn(text=text, inline_query=query)

    def query_chat(self, text: str, query: str) -> Btn:
        return Btn(text=text, inline_query_chat=query)

    def contact(self, text: str) -> Btn:
        return Btn(text=text, contact=True)

    def location(self, text: str) -> Btn:
        return Btn(text=text, location=True)

    def poll(self, text: str, poll_type: PollType | str) -> Btn:
        return Btn(text=text, poll=poll_type)

    def user(self, text: str, recipient: ReplyRecipient) -> Btn:
        return Btn(text=text, user=recipient)

    def chat(self, text: str, recipient: ReplyRecipient) -> Btn:
        return Btn(text=text, chat=recipient)

    def login(self, text: str, login: Login) -> Btn:
        return Btn(text=text, login=login)

    def web_app(self, text: str, app: WebApp) -> Btn:
        return Btn(text=text, web_app=app)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.inline_keyboard:
            data["inline_keyboard"] = [
                [b.to_dict() for b in row] for row in self.inline_keyboard
            ]
        if self.reply_keyboard:
            data["keyboard"] = [
                [b.to_dict() for b in row] for row in self.reply_keyboard
            ]
        flags = {
            "force_reply": self.force_reply,
            "resize_keyboard": self.resize_keyboard,
            "one_time_keyboard": self.one_time_keyboard,
            "remove_keyboard": self.remove_keyboard,
            "selective": self.selective,
        }
        data.update({k: True for k, v in flags.items() if v})
        if self.placeholder:
            data["input_field_placeholder"] = self.placeholder
        if self.is_persistent:
            data["is_persistent"] = True
        return data


class MenuButtonType(str, Enum):
    DEFAULT = "default"
    COMMANDS = "commands"
    WEB_APP = "web_app"


@dataclass
class MenuButton:
    """The bot's menu button in a private chat."""

    type: MenuButtonType | str = MenuButtonType.DEFAULT
    text: str = ""
    web_app: WebApp | None = None

    def to_dict(self) -> dict[str, Any]:
        kind = self.type.value if isinstance(self.type, Enum) else self.type
        data: dict[str, Any] = {"type": kind}
        if self.text:
            data["text"] = self.text
        if self.web_app is not None:
            data["web_app"] = self.web_app.to_dict()
        return data