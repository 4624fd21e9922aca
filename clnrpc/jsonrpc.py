"""JSON-RPC 2.0 request and response objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from .errors import JsonError, MalformedResponseError, RpcError

Id = Union[str, int]

_U16_MAX = 2**16 - 1


def make_id(value: Any) -> str:
    """Turn a string or a non-negative integer into a request id."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"cannot use {type(value).__name__} as a request id")
    if value < 0:
        raise ValueError("request id must not be negative")
    return str(value)


def _decode_id(value: Any) -> Id:
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= _U16_MAX:
        return value
    raise JsonError("data did not match any variant of untagged enum Id")


@dataclass
class Request:
    """A JSON-RPC request."""

    method: str
    params: Any
    id: Id | None = None
    jsonrpc: str = "2.0"

    def to_json(self) -> dict[str, Any]:
        obj: dict[str, Any] = {"method": self.method, "params": self.params}
        if self.id is not None:
            obj["id"] = self.id
        obj["jsonrpc"] = self.jsonrpc
        return obj


@dataclass
class Response:
    """A JSON-RPC response."""

    result: Any
    error: RpcError | None
    id: Id
    jsonrpc: str | None = None

    @classmethod
    def from_json(cls, obj: Any) -> "Response":
        """Build a response from its decoded JSON object."""
        if not isinstance(obj, dict):
            raise JsonError("invalid type: expected a response object")
        if "id" not in obj:
            raise JsonError("missing field `id`")
        response_id = _decode_id(obj["id"])
        raw_error = obj.get("error")
        error = None if raw_error is None else RpcError.from_json(raw_error)
        jsonrpc = obj.get("jsonrpc")
        if jsonrpc is not None and not isinstance(jsonrpc, str):
            raise JsonError("invalid type: `jsonrpc` must be a string")
        return cls(result=obj.get("result"), error=error, id=response_id, jsonrpc=jsonrpc)

    def into_result(self) -> Any:
        """Return the result, or raise the error the server sent."""
        if self.error is not None:
            raise self.error
        if self.result is None:
            raise MalformedResponseError()
        return self.result

    def is_none(self) -> bool:
        return self.result is None