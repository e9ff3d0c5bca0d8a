"""Polls, poll options and poll answers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class PollType(str, Enum):
    """Poll types; ANY is used only for keyboard poll requests."""

    ANY = "any"
    QUIZ = "quiz"
    REGULAR = "regular"

    def to_dict(self) -> dict[str, str]:
        """Return the keyboard poll-type object for this type."""
        return {"type": self.value}


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _poll_type(value: str) -> PollType | str:
    try:
        return PollType(value)
    except ValueError:
        return value


@dataclass
class PollOption:
    """One answer option in a poll."""

    text: str = ""
    voter_count: int = 0


@dataclass
class Poll:
    """A native poll."""

    id: str = ""
    type: PollType | str = ""
    question: str = ""
    options: list[PollOption] = field(default_factory=list)
    voter_count: int = 0
    closed: bool = False
    correct_option: int = 0
    multiple_answers: bool = False
    explanation: str = ""
    parse_mode: str = ""
    entities: list[dict[str, Any]] | None = None
    anonymous: bool = False
    open_period: int = 0
    close_unixdate: int = 0

    def is_regular(self) -> bool:
        return self.type == PollType.REGULAR

    def is_quiz(self) -> bool:
        return self.type == PollType.QUIZ

    def close_date(self) -> datetime:
        """The close date of the poll in local time."""
        return datetime.fromtimestamp(self.close_unixdate)

    def add_options(self, *args: str) -> None:
        """Append text options to the poll."""
        self.options.extend(PollOption(text=text) for text in args)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "type": _plain(self.type),
            "question": self.question,
            "options": [
                {"text": o.text, "voter_count": o.voter_count} for o in self.options
            ],
            "total_voter_count": self.voter_count,
        }
        if self.closed:
            data["is_closed"] = True
        if self.correct_option:
            data["correct_option_id"] = self.correct_option
        if self.multiple_answers:
            data["allows_multiple_answers"] = True
        if self.explanation:
            data["explanation"] = self.explanation
        if _plain(self.parse_mode):
            data["explanation_parse_mode"] = _plain(self.parse_mode)
        data["explanation_entities"] = self.entities
        data["is_anonymous"] = self.anonymous
        if self.open_period:
            data["open_period"] = self.open_period
        if self.close_unixdate:
            data["close_date"] = self.close_unixdate
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Poll:
        return cls(
            id=data.get("id", ""),
            type=_poll_type(data.get("type", "")),
            question=data.get("question", ""),
            options=[
                PollOption(text=o.get("text", ""), voter_count=o.get("voter_count", 0))
                for o in data.get("options") or []
            ],
            voter_count=data.get("total_voter_count", 0),
            closed=data.get("is_closed", False),
            correct_option=data.get("correct_option_id", 0),
            multiple_answers=data.get("allows_multiple_answers", False),
            explanation=data.get("explanation", ""),
            parse_mode=data.get("explanation_parse_mode", ""),
            entities=data.get("explanation_entities"),
            anonymous=data.get("is_anonymous", False),
            open_period=data.get("open_period", 0),
            close_unixdate=data.get("close_date", 0),
        )


@dataclass
class PollAnswer:
    """An answer of a user in a non-anonymous poll."""

    poll_id: str = ""
    sender: dict[str, Any] | None = None
    chat: dict[str, Any] | None = None
    options: list[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PollAnswer:
        return cls(
            poll_id=data.get("poll_id", ""),
            sender=data.get("user"),
            chat=data.get("voter_chat"),
            options=list(data.get("option_ids") or []),
        )