"""Helpers to build JSON payloads."""

from __future__ import annotations

from typing import Any, Iterable

from .client import to_params

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def init_payload() -> dict[str, Any]:
    """Return an empty JSON object."""
    return {}


def init_success_response(id: Any) -> dict[str, Any]:
    """Return the frame of a successful response for ``id``."""
    return {"id": id, "jsonrpc": "2.0"}


def add_number(payload: dict[str, Any], key: str, value: int) -> None:
    """Set ``key`` to a 64-bit signed integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("value must be an integer")
    if not _I64_MIN <= value <= _I64_MAX:
        raise ValueError("value does not fit in a signed 64-bit integer")
    payload[key] = value


def add_str(payload: dict[str, Any], key: str, value: str) -> None:
    """Set ``key`` to a string."""
    if not isinstance(value, str):
        raise TypeError("value must be a string")
    payload[key] = value


def add_bool(payload: dict[str, Any], key: str, value: bool) -> None:
    """Set ``key`` to a boolean."""
    if not isinstance(value, bool):
        raise TypeError("value must be a boolean")
    payload[key] = value


def add_vec(payload: dict[str, Any], key: str, value: Iterable[Any]) -> None:
    """Set ``key`` to a JSON array built from ``value``."""
    payload[key] = [to_params(item) for item in value]