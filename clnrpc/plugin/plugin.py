"""The plugin runtime: registration of callbacks and the request loop."""

from __future__ import annotations

import json
import sys
from typing import Any, Callable, Iterable, Optional, TextIO

from ..json_utils import add_str, init_payload, init_success_response
from ..jsonrpc import Request
from .commands import InitRPC, ManifestRPC, RPCCommand
from .errors import PluginError
from .types import LogLevel, NodeConfiguration, RPCHookInfo, RPCMethodInfo, RpcOption

_METHOD_NOT_FOUND = -32601


def _dumps(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"))


class Plugin:
    """A plugin talking JSON-RPC with the node over stdin and stdout."""

    def __init__(self, state: Any = None, dynamic: bool = False) -> None:
        self.state = state
        self.option: dict[str, RpcOption] = {}
        self.rpc_method: dict[str, RPCCommand] = {}
        self.rpc_info: set[RPCMethodInfo] = set()
        self.rpc_hook: dict[str, RPCCommand] = {}
        self.hook_info: set[RPCHookInfo] = set()
        self.rpc_notification: dict[str, RPCCommand] = {}
        self.dynamic = dynamic
        self.configuration: Optional[NodeConfiguration] = None
        self._on_init: Optional[Callable[[Plugin], Any]] = None
        self._writer: Optional[TextIO] = None

    def _output(self) -> TextIO:
        return sys.stdout if self._writer is None else self._writer

    def _write(self, value: Any) -> None:
        out = self._output()
        out.write(_dumps(value))
        out.flush()

    def on_init(self, callback: Callable[["Plugin"], Any]) -> "Plugin":
        """Set the callback run when the node sends ``init``."""
        self._on_init = callback
        return self

    def log(self, level: LogLevel, msg: str) -> None:
        """Send a log line to the node."""
        payload = init_payload()
        add_str(payload, "level", str(level))
        add_str(payload, "message", msg)
        self._write(Request(method="log", params=payload).to_json())

    def add_opt(
        self,
        name: str,
        opt_type: str,
        def_val: Optional[str] = None,
        description: str = "",
        deprecated: bool = False,
    ) -> "Plugin":
        """Register a command line option."""
        self.option[name] = RpcOption(
            name=name,
            opt_typ=opt_type,
            default=def_val,
            description=description,
            deprecated=deprecated,
        )
        return self

    def get_opt(self, name: str) -> Any:
        """Return the value the node sent for option ``name``."""
        option = self.option.get(name)
        if option is None:
            raise PluginError(-1, f"option `{name}` is not registered")
        if option.value is None:
            raise PluginError(-1, f"option `{name}` has no value")
        return option.value

    def add_rpc_method(
        self, name: str, usage: str, description: str, callback: RPCCommand
    ) -> "Plugin":
        """Register an RPC method."""
        self.rpc_method[name] = callback
        self.rpc_info.add(
            RPCMethodInfo(
                name=name,
                usage=usage,
                description=description,
                long_description=description,
                deprecated=False,
            )
        )
        return self

    def register_hook(
        self,
        hook_name: str,
        before: Optional[Iterable[str]],
        after: Optional[Iterable[str]],
        callback: RPCCommand,
    ) -> "Plugin":
        """Register a hook callback."""
        self.rpc_hook[hook_name] = callback
        self.hook_info.add(RPCHookInfo(name=hook_name, before=before, after=after))
        return self

    def register_notification(self, name: str, callback: RPCCommand) -> "Plugin":
        """Subscribe to a notification."""
        self.rpc_notification[name] = callback
        return self

    def _find_command(self, name: str) -> RPCCommand:
        if name == "getmanifest":
            return ManifestRPC()
        if name == "init":
            return InitRPC(self._on_init)
        command = self.rpc_method.get(name) or self.rpc_hook.get(name)
        if command is None:
            raise PluginError(_METHOD_NOT_FOUND, f"method `{name}` not found")
        return command

    def _handle_notification(self, name: str, params: Any) -> None:
        callback = self.rpc_notification.get(name)
        if callback is None:
            self.log(LogLevel.DEBUG, f"No subscription for notification `{name}`")
            return
        try:
            callback.call_void(self, params)
        except PluginError as err:
            self.log(LogLevel.DEBUG, f"Notification ended with an error: {err}")

    def handle_request(self, request: Any) -> Optional[dict[str, Any]]:
        """Handle one decoded request.

        Returns the response for a request with an id, and None for a
        notification.
        """
        if not isinstance(request, dict):
            raise PluginError(-1, "invalid type: expected a request object")
        method = request.get("method")
        if not isinstance(method, str):
            raise PluginError(-1, "missing field `method`")
        if "params" not in request:
            raise PluginError(-1, "missing field `params`")
        params = request["params"]
        request_id = request.get("id")
        if request_id is None:
            self._handle_notification(method, params)
            return None
        if isinstance(request_id, bool) or not isinstance(request_id, (str, int)):
            raise PluginError(-1, "invalid type: `id` must be a string or an integer")

        response = init_success_response(request_id)
        try:
            response["result"] = self._find_command(method).call(self, params)
        except PluginError as err:
            response["error"] = err.to_json()
        return response

    def start(self, reader: Optional[TextIO] = None, writer: Optional[TextIO] = None) -> None:
        """Serve requests read line by line until the input ends."""
        source = sys.stdin if reader is None else reader
        self._writer = writer
        for line in source:
            if not line.strip():
                continue
            try:
                request = json.loads(line)
            except json.JSONDecodeError as exc:
                raise PluginError(-1, str(exc)) from exc
            response = self.handle_request(request)
            if response is not None:
                self._write(response)