"""Typed access to a nested configuration mapping."""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import timedelta
from decimal import Decimal, InvalidOperation
from typing import Any

_NS_PER_UNIT = {
    "ns": 1,
    "us": 1_000,
    "\u00b5s": 1_000,
    "\u03bcs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60_000_000_000,
    "h": 3_600_000_000_000,
}
_PART = re.compile("(\\d+\\.?\\d*|\\.\\d+)(ns|us|\u00b5s|\u03bcs|ms|s|m|h)")
_UNIT_CHARS = set("nsu\u00b5\u03bcmh")
_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


def _from_ns(ns: int) -> timedelta:
    micros = abs(ns) // 1000
    return timedelta(microseconds=micros if ns >= 0 else -micros)


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as "300ms", "-1.5h" or "2h45m"; raises ValueError."""
    s = text
    sign = 1
    if s[:1] in ("+", "-"):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    if s == "0":
        return timedelta(0)
    if not s:
        raise ValueError(f"telekit: invalid duration {text!r}")

    total = Decimal(0)
    pos = 0
    while pos < len(s):
        match = _PART.match(s, pos)
        if match is None:
            raise ValueError(f"telekit: invalid duration {text!r}")
        total += Decimal(match[1]) * _NS_PER_UNIT[match[2]]
        pos = match.end()
    return _from_ns(sign * int(total))


def _lower_keys(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(k).lower(): _lower_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_lower_keys(v) for v in value]
    return value


def _to_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return ""


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        s = value.strip()
        if "." in s and s.rstrip("0").endswith("."):
            s = s.rstrip("0")[:-1]
        try:
            return int(s, 0)
        except ValueError:
            try:
                return int(s, 10)
            except ValueError:
                return 0
    return 0


def _to_float(value: Any) -> float:
    if isinstance(value, (bool, int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return 0.0
    return 0.0


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        s = value.strip()
        if s in _TRUE:
            return True
    return False


def _to_duration(value: Any) -> timedelta:
    if isinstance(value, timedelta):
        return value
    if isinstance(value, bool) or value is None:
        return timedelta(0)
    if isinstance(value, (int, float)):
        return _from_ns(int(value))
    if isinstance(value, str):
        s = value.strip()
        if not any(ch in _UNIT_CHARS for ch in s):
            s += "ns"
        try:
            return parse_duration(s)
        except ValueError:
            return timedelta(0)
    return timedelta(0)


class Config:
    """A configuration section; keys are case-insensitive and may be dotted paths."""

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = _lower_keys(dict(data or {}))

    def __repr__(self) -> str:
        return f"Config({self._data!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Config) and self._data == other._data

    def _lookup(self, key: str) -> Any:
        node: Any = self._data
        for part in key.lower().split("."):
            if not isinstance(node, Mapping) or part not in node:
                return None
            node = node[part]
        return node

    def get(self, key: str) -> Config | None:
        """The child section, or None if the field is not a mapping."""
        value = self._lookup(key)
        if not isinstance(value, Mapping):
            return None
        return Config(value)

    def slice(self, key: str) -> list[Config] | None:
        """The child list of sections, or None if it is not a list of mappings."""
        value = self._lookup(key)
        if not isinstance(value, list):
            return None
        if not all(isinstance(item, Mapping) for item in value):
            return None
        return [Config(item) for item in value]

    def string(self, key: str) -> str:
        return _to_string(self._lookup(key))

    def integer(self, key: str) -> int:
        return _to_int(self._lookup(key))

    def floating(self, key: str) -> float:
        return _to_float(self._lookup(key))

    def boolean(self, key: str) -> bool:
        return _to_bool(self._lookup(key))

    def duration(self, key: str) -> timedelta:
        """A duration given as nanoseconds or as a string like "10m"."""
        return _to_duration(self._lookup(key))

    def chat_id(self, key: str) -> int:
        """A chat identifier; the value must be an integer."""
        return self.integer(key)

    def strings(self, key: str) -> list[str]:
        value = self._lookup(key)
        if isinstance(value, list):
            return [_to_string(item) for item in value]
        if isinstance(value, str):
            return value.split()
        return []

    def integers(self, key: str) -> list[int]:
        value = self._lookup(key)
        if isinstance(value, list):
            return [_to_int(item) for item in value]
        return []

    def floats(self, key: str) -> list[float]:
        result = []
        for item in self.strings(key):
            try:
                result.append(float(Decimal(item)))
            except (InvalidOperation, ValueError):
                result.append(0.0)
        return result