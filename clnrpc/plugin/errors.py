"""JSON-RPC 2.0 error objects returned by plugin methods."""

from __future__ import annotations

from typing import Any


class PluginError(Exception):
    """An error a plugin method reports back to its caller."""

    def __init__(self, code: int, msg: str, data: Any = None) -> None:
        super().__init__(code, msg, data)
        self.code = code
        self.msg = msg
        self.data = data

    def to_json(self) -> dict[str, Any]:
        """Return the JSON-RPC error object."""
        return {"code": self.code, "message": self.msg, "data": self.data}

    def __str__(self) -> str:
        return f"code: {self.code}, msg: {self.msg}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PluginError):
            return NotImplemented
        return (self.code, self.msg, self.data) == (other.code, other.msg, other.data)

    def __hash__(self) -> int:
        return hash((self.code, self.msg))