"""Invoices, payments, shipping and currencies."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from .media import Photo


def _flag(value: bool) -> str:
    return "true" if value else "false"


def _json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


@dataclass
class ShippingAddress:
    """A shipping address."""

    country_code: str = ""
    state: str = ""
    city: str = ""
    street_line1: str = ""
    street_line2: str = ""
    post_code: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ShippingAddress:
        return cls(
            country_code=data.get("country_code", ""),
            state=data.get("state", ""),
            city=data.get("city", ""),
            street_line1=data.get("street_line1", ""),
            street_line2=data.get("street_line2", ""),
            post_code=data.get("post_code", ""),
        )


@dataclass
class ShippingQuery:
    """An incoming shipping query."""

    sender: dict[str, Any] | None = None
    id: str = ""
    payload: str = ""
    address: ShippingAddress = field(default_factory=ShippingAddress)


@dataclass
class Price:
    """A portion of the price for goods or services."""

    label: str = ""
    amount: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "amount": self.amount}


@dataclass
class ShippingOption:
    """One shipping option."""

    id: str = ""
    title: str = ""
    prices: list[Price] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "prices": [p.to_dict() for p in self.prices],
        }


@dataclass
class Order:
    """Information about an order."""

    name: str = ""
    phone_number: str = ""
    email: str = ""
    address: ShippingAddress = field(default_factory=ShippingAddress)


@dataclass
class Payment:
    """Basic information about a successful payment."""

    currency: str = ""
    total: int = 0
    payload: str = ""
    option_id: str = ""
    order: Order = field(default_factory=Order)
    telegram_charge_id: str = ""
    provider_charge_id: str = ""


@dataclass
class PreCheckoutQuery:
    """An incoming pre-checkout query."""

    sender: dict[str, Any] | None = None
    id: str = ""
    currency: str = ""
    payload: str = ""
    total: int = 0
    option_id: str = ""
    order: Order = field(default_factory=Order)


@dataclass
class Invoice:
    """An invoice; total is in the smallest units of the currency."""

    title: str = ""
    description: str = ""
    payload: str = ""
    currency: str = ""
    prices: list[Price] = field(default_factory=list)
    token: str = ""
    data: str = ""
    photo: Photo | None = None
    photo_size: int = 0
    start: str = ""
    total: int = 0
    max_tip_amount: int = 0
    suggested_tip_amounts: list[int] = field(default_factory=list)
    need_name: bool = False
    need_phone_number: bool = False
    need_email: bool = False
    need_shipping_address: bool = False
    send_phone_number: bool = False
    send_email: bool = False
    flexible: bool = False

    def params(self) -> dict[str, str]:
        """Request parameters describing this invoice."""
        params = {
            "title": self.title,
            "description": self.description,
            "start_parameter": self.start,
            "payload": self.payload,
            "provider_token": self.token,
            "provider_data": self.data,
            "currency": self.currency,
            "max_tip_amount": str(self.max_tip_amount),
            "need_name": _flag(self.need_name),
            "need_phone_number": _flag(self.need_phone_number),
            "need_email": _flag(self.need_email),
            "need_shipping_address": _flag(self.need_shipping_address),
            "send_phone_number_to_provider": _flag(self.send_phone_number),
            "send_email_to_provider": _flag(self.send_email),
            "is_flexible": _flag(self.flexible),
        }
        if self.photo is not None:
            if self.photo.file_url:
                params["photo_url"] = self.photo.file_url
            if self.photo_size > 0:
                params["photo_size"] = str(self.photo_size)
            if self.photo.width > 0:
                params["photo_width"] = str(self.photo.width)
            if self.photo.height > 0:
                params["photo_height"] = str(self.photo.height)
        if self.prices:
            params["prices"] = _json([p.to_dict() for p in self.prices])
        if self.suggested_tip_amounts:
            params["suggested_tip_amounts"] = _json(
                [str(n) for n in self.suggested_tip_amounts]
            )
        return params


@dataclass
class Currency:
    """A currency supported for payments; exp is the number of minor digits."""

    code: str = ""
    title: str = ""
    symbol: str = ""
    native: str = ""
    thousands_sep: str = ""
    decimal_sep: str = ""
    symbol_left: bool = False
    space_between: bool = False
    exp: int = 0
    min_amount: Any = None
    max_amount: Any = None

    def from_total(self, total: int) -> float:
        """Convert an amount in minor units to major units."""
        return total / 10**self.exp

    def to_total(self, amount: float) -> int:
        """Convert a major-unit amount to minor units; the fraction is dropped."""
        return int(amount) * int(10**self.exp)