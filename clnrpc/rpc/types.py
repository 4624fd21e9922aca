"""Structures shared by requests and responses."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from ..errors import JsonError

_U64_LIMIT = 2**64
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_DIGITS = re.compile(r"\+?[0-9]+")


def _is_uint(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < _U64_LIMIT


@dataclass(frozen=True, order=True)
class MSat:
    """An amount in millisatoshi."""

    value: int

    @classmethod
    def from_json(cls, value: Any) -> "MSat":
        """Read an amount given as an integer or as a "<n>msat" string."""
        if isinstance(value, str):
            if not value.endswith("msat"):
                raise JsonError("missing msat suffix")
            numpart = value[: -len("msat")]
            if not _DIGITS.fullmatch(numpart):
                raise JsonError("not a number")
            number = int(numpart)
            if number >= _U64_LIMIT:
                raise JsonError("not a number")
            return cls(number)
        if _is_uint(value):
            return cls(value)
        raise JsonError('expected a string ending with "msat" or an unsigned integer')

    def to_json(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"{self.value}msat"


def _required(obj: dict[str, Any], name: str) -> Any:
    if name not in obj:
        raise JsonError(f"missing field `{name}`")
    return obj[name]


def _string(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise JsonError(f"invalid type: `{name}` must be a string")
    return value


@dataclass
class RouteItem:
    """One hop of a payment route."""

    id: str
    channel: str
    direction: int | None
    amount_msat: MSat
    delay: int
    style: str | None = None

    @classmethod
    def from_json(cls, obj: Any) -> "RouteItem":
        if not isinstance(obj, dict):
            raise JsonError("invalid type: expected a route item object")
        direction = obj.get("direction")
        if direction is not None and not _is_uint(direction):
            raise JsonError("invalid type: `direction` must be an unsigned integer")
        delay = _required(obj, "delay")
        if isinstance(delay, bool) or not isinstance(delay, int) or not _I64_MIN <= delay <= _I64_MAX:
            raise JsonError("invalid type: `delay` must be an integer")
        style = obj.get("style")
        if style is not None:
            _string(style, "style")
        return cls(
            id=_string(_required(obj, "id"), "id"),
            channel=_string(_required(obj, "channel"), "channel"),
            direction=direction,
            amount_msat=MSat.from_json(_required(obj, "amount_msat")),
            delay=delay,
            style=style,
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "channel": self.channel,
            "direction": self.direction,
            "amount_msat": self.amount_msat.to_json(),
            "delay": self.delay,
            "style": self.style,
        }