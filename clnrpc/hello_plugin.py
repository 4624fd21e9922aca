"""A small demonstration plugin, declared by hand or with decorators."""

from __future__ import annotations

import argparse
from typing import Any, Optional, Sequence

from .plugin.commands import RPCCommand
from .plugin.decorators import build_plugin, notification, rpc_method
from .plugin.plugin import Plugin
from .plugin.types import LogLevel


class _HelloRPC(RPCCommand):
    def call(self, plugin: Plugin, request: Any) -> Any:
        plugin.log(LogLevel.DEBUG, "call the custom rpc method from python")
        return {"language": "Hello from python"}


class _OnChannelOpened(RPCCommand):
    def call_void(self, plugin: Plugin, request: Any) -> None:
        plugin.log(LogLevel.DEBUG, "A new channel was opened!")


def _on_init(plugin: Plugin) -> Any:
    plugin.log(LogLevel.DEBUG, "Custom init method called")
    return {}


def build_hello_plugin() -> Plugin:
    """Plugin with a ``hello`` method, a ``foo`` flag and a channel subscription."""
    plugin = Plugin(None, True)
    plugin.add_rpc_method("hello", "", "show how is possible add a method", _HelloRPC())
    plugin.add_opt("foo", "flag", None, "An example of command line option", False)
    plugin.register_notification("channel_opened", _OnChannelOpened())
    plugin.on_init(_on_init)
    return plugin


@rpc_method(rpc_name="foo_macro", description="This is a simple and short description")
def _foo_rpc(plugin: Plugin, request: Any) -> Any:
    return {"is_dynamic": plugin.dynamic, "rpc_request": request}


@notification(on="rpc_command")
def _on_rpc(plugin: Plugin, request: Any) -> None:
    plugin.log(LogLevel.INFO, "received an RPC notification")


def build_macro_plugin() -> Plugin:
    """The same kind of plugin, declared with the decorators."""
    return build_plugin(
        state=None,
        dynamic=True,
        notifications=[_on_rpc],
        methods=[_foo_rpc],
        hooks=[],
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="hello-plugin", description="Run the demonstration plugin on stdin/stdout."
    )
    parser.add_argument(
        "--decorated",
        action="store_true",
        help="run the plugin declared with the decorators",
    )
    args = parser.parse_args(argv)
    plugin = build_macro_plugin() if args.decorated else build_hello_plugin()
    plugin.start()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())