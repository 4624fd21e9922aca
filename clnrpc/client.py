"""Client for JSON-RPC servers listening on a UNIX socket."""

from __future__ import annotations

import codecs
import json
import os
import socket
from pathlib import Path
from typing import Any

from .errors import JsonError, MalformedResponseError, TransportError, VersionMismatchError
from .jsonrpc import Request, Response

_READ_SIZE = 4096
_JSON_WHITESPACE = " \t\n\r"
_DECODER = json.JSONDecoder()


def to_params(params: Any) -> Any:
    """Turn request parameters into plain JSON values."""
    to_json = getattr(params, "to_json", None)
    if callable(to_json):
        return to_json()
    if isinstance(params, dict):
        return {key: to_params(value) for key, value in params.items()}
    if isinstance(params, (list, tuple)):
        return [to_params(value) for value in params]
    return params


def _read_value(sock: socket.socket) -> Any:
    """Read from ``sock`` until one whole JSON value has arrived."""
    decoder = codecs.getincrementaldecoder("utf-8")()
    text = ""
    while True:
        chunk = sock.recv(_READ_SIZE)
        try:
            text += decoder.decode(chunk, final=not chunk)
        except UnicodeDecodeError as exc:
            raise JsonError(exc) from exc
        body = text.lstrip(_JSON_WHITESPACE)
        if body:
            try:
                value, _ = _DECODER.raw_decode(body)
                return value
            except json.JSONDecodeError as exc:
                if not chunk:
                    raise JsonError(exc) from exc
        elif not chunk:
            raise MalformedResponseError()


class Client:
    """A handle to a JSON-RPC server behind a UNIX socket."""

    def __init__(self, sockpath: str | os.PathLike[str], timeout: float | None = None) -> None:
        self.sockpath = Path(sockpath)
        self.timeout = timeout

    def __repr__(self) -> str:
        return f"Client(sockpath={str(self.sockpath)!r}, timeout={self.timeout!r})"

    def send_request(self, method: str, params: Any) -> Response:
        """Send one request on a fresh connection and return the response."""
        # Every request opens its own connection, so a fixed id is enough.
        request = Request(method=method, params=to_params(params), id="0")
        try:
            payload = json.dumps(request.to_json()).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise JsonError(exc) from exc

        try:
            with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
                sock.connect(str(self.sockpath))
                sock.settimeout(self.timeout)
                sock.sendall(payload)
                value = _read_value(sock)
        except OSError as exc:
            raise TransportError(exc) from exc

        response = Response.from_json(value)
        if response.jsonrpc is not None and response.jsonrpc != "2.0":
            raise VersionMismatchError()
        return response