"""Decorators and helpers that cut the boilerplate of writing a plugin.

``rpc_method`` and ``notification`` turn a plain function into a factory.
Calling the factory with no arguments gives a fresh command object.
``build_plugin``, ``add_rpc`` and ``register_notification`` take such
factories and register what they build on a plugin.
"""

from __future__ import annotations

import functools
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Callable, Optional

from .commands import RPCCommand
from .errors import PluginError

if TYPE_CHECKING:
    from .plugin import Plugin

MethodFunc = Callable[["Plugin", Any], Any]
NotificationFunc = Callable[["Plugin", Any], None]


class RpcMethodCommand(RPCCommand):
    """An RPC method backed by a plain function."""

    def __init__(self, name: str, description: str, usage: str, func: MethodFunc) -> None:
        self.name = name
        self.description = description
        self.long_description = description
        self.usage = usage
        self.func = func

    def __repr__(self) -> str:
        return f"RpcMethodCommand(name={self.name!r}, description={self.description!r})"

    def call(self, plugin: "Plugin", request: Any) -> Any:
        """Run the wrapped function and return its answer."""
        return self.func(plugin, request)


class NotificationCommand(RPCCommand):
    """A notification subscription backed by a plain function."""

    def __init__(self, on_event: str, func: NotificationFunc) -> None:
        self.on_event = on_event
        self.func = func

    def __repr__(self) -> str:
        return f"NotificationCommand(on_event={self.on_event!r})"

    def call_void(self, plugin: "Plugin", request: Any) -> None:
        """Run the wrapped function; its return value is ignored."""
        self.func(plugin, request)


def rpc_method(
    rpc_name: str, description: str, usage: str = ""
) -> Callable[[MethodFunc], Callable[[], RpcMethodCommand]]:
    """Turn ``func(plugin, request)`` into a factory of an RPC method."""

    def decorate(func: MethodFunc) -> Callable[[], RpcMethodCommand]:
        @functools.wraps(func)
        def factory() -> RpcMethodCommand:
            return RpcMethodCommand(rpc_name, description, usage, func)

        return factory

    return decorate


def notification(on: str) -> Callable[[NotificationFunc], Callable[[], NotificationCommand]]:
    """Turn ``func(plugin, request)`` into a factory of a subscription to ``on``."""

    def decorate(func: NotificationFunc) -> Callable[[], NotificationCommand]:
        @functools.wraps(func)
        def factory() -> NotificationCommand:
            return NotificationCommand(on, func)

        return factory

    return decorate


def _factories(value: Optional[Iterable[Callable[[], Any]]]) -> list[Callable[[], Any]]:
    if value is None:
        return []
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise TypeError("should be an array!")
    return list(value)


def add_rpc(plugin: "Plugin", factory: Callable[[], RpcMethodCommand]) -> "Plugin":
    """Build an RPC method from ``factory`` and register it on ``plugin``."""
    rpc = factory()
    return plugin.add_rpc_method(rpc.name, rpc.usage, rpc.description, rpc)


def register_notification(
    plugin: "Plugin", factory: Callable[[], NotificationCommand]
) -> "Plugin":
    """Build a subscription from ``factory`` and register it on ``plugin``."""
    callback = factory()
    return plugin.register_notification(callback.on_event, callback)


def build_plugin(
    state: Any = None,
    dynamic: bool = False,
    notifications: Optional[Iterable[Callable[[], NotificationCommand]]] = None,
    methods: Optional[Iterable[Callable[[], RpcMethodCommand]]] = None,
    hooks: Optional[Iterable[Callable[[], Any]]] = None,
) -> "Plugin":
    """Declare a plugin with its state, subscriptions and methods.

    ``hooks`` is checked to be a list but its entries are not registered:
    the declaration form carries no hook metadata.
    """
    from .plugin import Plugin

    notification_factories = _factories(notifications)
    method_factories = _factories(methods)
    _factories(hooks)

    plugin = Plugin(state, dynamic)
    for factory in notification_factories:
        register_notification(plugin, factory)
    for factory in method_factories:
        add_rpc(plugin, factory)
    return plugin


def plugin_error(msg: str) -> PluginError:
    """Return a generic plugin error with code -1 and no data."""
    return PluginError(-1, msg, None)