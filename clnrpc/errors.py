"""Errors raised while talking to a JSON-RPC server."""

from __future__ import annotations

from typing import Any

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class ClientError(Exception):
    """Base class of every error raised by the RPC client."""


class JsonError(ClientError):
    """A value could not be encoded to or decoded from JSON."""

    def __init__(self, detail: Any) -> None:
        super().__init__(f"JSON decode error: {detail}")
        self.detail = detail


class TransportError(ClientError):
    """The socket connection failed, timed out or was cut."""

    def __init__(self, detail: Any) -> None:
        super().__init__(f"IO error response: {detail}")
        self.detail = detail


class MalformedResponseError(ClientError):
    """The response has neither an error nor a result."""

    def __init__(self, message: str = "Malformed RPC response") -> None:
        super().__init__(message)


class NonceMismatchError(ClientError):
    """The response id does not match the request id."""

    def __init__(
        self, message: str = "Nonce of response did not match nonce of request"
    ) -> None:
        super().__init__(message)


class VersionMismatchError(ClientError):
    """The response carries a ``jsonrpc`` field other than "2.0"."""

    def __init__(self, message: str = '`jsonrpc` field set to non-"2.0"') -> None:
        super().__init__(message)


class RpcError(ClientError):
    """A JSON-RPC 2.0 error object returned by the server."""

    def __init__(self, code: int, message: str, data: Any = None) -> None:
        super().__init__(code, message, data)
        self.code = code
        self.message = message
        self.data = data

    @classmethod
    def from_json(cls, obj: Any) -> "RpcError":
        """Build an error from its decoded JSON object."""
        if not isinstance(obj, dict):
            raise JsonError("invalid type: expected an error object")
        if "code" not in obj:
            raise JsonError("missing field `code`")
        if "message" not in obj:
            raise JsonError("missing field `message`")
        code = obj["code"]
        message = obj["message"]
        if isinstance(code, bool) or not isinstance(code, int):
            raise JsonError("invalid type: `code` must be an integer")
        if not _I32_MIN <= code <= _I32_MAX:
            raise JsonError(f"invalid value: `code` {code} out of range")
        if not isinstance(message, str):
            raise JsonError("invalid type: `message` must be a string")
        return cls(code, message, obj.get("data"))

    def to_json(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "data": self.data}

    def __str__(self) -> str:
        return (
            f"RPC error response: {{code: {self.code}, "
            f"message: {self.message!r}, data: {self.data!r}}}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RpcError):
            return NotImplemented
        return (self.code, self.message, self.data) == (
            other.code,
            other.message,
            other.data,
        )

    def __hash__(self) -> int:
        return hash((self.code, self.message))