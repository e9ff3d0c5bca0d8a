"""Handler middleware: chaining, logging, auto-responding, recovery and restriction."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from contextlib import suppress
from dataclasses import dataclass, field
from typing import Any

Handler = Callable[[Any], Any]
Middleware = Callable[[Handler], Handler]
RecoverFunc = Callable[[Exception, Any], None]


def append_middleware(
    first: Sequence[Middleware], second: Sequence[Middleware]
) -> list[Middleware]:
    """Combine two middleware chains into a new one."""
    return [*first, *second]


def apply_middleware(handler: Handler, *args: Middleware) -> Handler:
    """Wrap a handler so that the first middleware runs outermost."""
    for middleware in reversed(args):
        handler = middleware(handler)
    return handler


def _jsonable(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    return to_dict() if callable(to_dict) else value


def logger(log: logging.Logger | None = None) -> Middleware:
    """Middleware that logs every incoming update as indented JSON."""
    target = log if log is not None else logging.getLogger("telekit")

    def middleware(next_handler: Handler) -> Handler:
        def handler(c: Any) -> Any:
            text = json.dumps(
                _jsonable(c.update()), indent=2, ensure_ascii=False, default=str
            )
            target.info(text)
            return next_handler(c)

        return handler

    return middleware


def auto_respond() -> Middleware:
    """Middleware that answers every callback once the handler is done."""

    def middleware(next_handler: Handler) -> Handler:
        def handler(c: Any) -> Any:
            if c.callback() is None:
                return next_handler(c)
            try:
                return next_handler(c)
            finally:
                with suppress(Exception):
                    c.respond()

        return handler

    return middleware


def ignore_via() -> Middleware:
    """Middleware that skips messages sent via an inline bot."""

    def middleware(next_handler: Handler) -> Handler:
        def handler(c: Any) -> Any:
            msg = c.message()
            if msg is not None and getattr(msg, "via", None) is not None:
                return None
            return next_handler(c)

        return handler

    return middleware


def recover(on_error: RecoverFunc | None = None) -> Middleware:
    """Middleware that catches exceptions raised by the handler and reports them."""

    def middleware(next_handler: Handler) -> Handler:
        def handler(c: Any) -> Any:
            report = on_error
            if report is None:

                def report(err: Exception, ctx: Any) -> None:
                    ctx.bot().on_error(err, ctx)

            try:
                return next_handler(c)
            except Exception as err:
                report(err, c)
                return None

        return handler

    return middleware


@dataclass
class RestrictConfig:
    """Chats to match, with the handlers for matching and non-matching updates.

    A handler left as None falls back to the wrapped handler.
    """

    chats: list[int] = field(default_factory=list)
    in_: Handler | None = None
    out: Handler | None = None


def _sender_id(sender: Any) -> Any:
    if isinstance(sender, Mapping):
        return sender.get("id")
    return getattr(sender, "id", None)


def restrict(config: RestrictConfig) -> Middleware:
    """Middleware routing updates by whether the sender is in config.chats."""

    def middleware(next_handler: Handler) -> Handler:
        inside = config.in_ if config.in_ is not None else next_handler
        outside = config.out if config.out is not None else next_handler
        chats = list(config.chats)

        def handler(c: Any) -> Any:
            if _sender_id(c.sender()) in chats:
                return inside(c)
            return outside(c)

        return handler

    return middleware


def _skip(c: Any) -> None:
    return None


def _chat_list(chats: Iterable[int]) -> list[int]:
    return list(chats)


def blacklist(*args: int) -> Middleware:
    """Middleware that drops updates from the given senders."""

    def middleware(next_handler: Handler) -> Handler:
        return restrict(RestrictConfig(chats=_chat_list(args), in_=_skip, out=next_handler))(
            next_handler
        )

    return middleware


def whitelist(*args: int) -> Middleware:
    """Middleware that drops updates from anyone but the given senders."""

    def middleware(next_handler: Handler) -> Handler:
        return restrict(RestrictConfig(chats=_chat_list(args), in_=next_handler, out=_skip))(
            next_handler
        )

    return middleware