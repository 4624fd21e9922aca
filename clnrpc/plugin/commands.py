"""Callbacks a plugin runs for RPC methods, hooks and notifications."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional

from ..json_utils import add_bool, add_vec, init_payload
from .errors import PluginError
from .types import InitConf

if TYPE_CHECKING:
    from .plugin import Plugin

InitCallback = Callable[["Plugin"], Any]


class RPCCommand:
    """Base class of plugin callbacks.

    Subclasses override ``call`` to answer a request, or ``call_void`` to
    react to a notification.
    """

    def call(self, plugin: "Plugin", request: Any) -> Any:
        """Answer a request; the default answer is an empty object."""
        return {}

    def call_void(self, plugin: "Plugin", request: Any) -> None:
        """React to a notification; the default does nothing."""
        return None


class ManifestRPC(RPCCommand):
    """The ``getmanifest`` method: describes what the plugin offers."""

    def call(self, plugin: "Plugin", request: Any) -> dict[str, Any]:
        response = init_payload()
        add_vec(response, "options", plugin.option.values())
        add_vec(response, "rpcmethods", plugin.rpc_info)
        add_vec(response, "subscriptions", plugin.rpc_notification.keys())
        add_vec(response, "hooks", plugin.hook_info)
        add_bool(response, "dynamic", bool(plugin.dynamic))
        return response


class InitRPC(RPCCommand):
    """The ``init`` method: stores configuration and option values."""

    def __init__(self, on_init: Optional[InitCallback] = None) -> None:
        self.on_init = on_init

    @staticmethod
    def _parse_options(plugin: "Plugin", options: Mapping[str, Any]) -> None:
        for name, value in options.items():
            option = plugin.option.get(name)
            if option is None:
                raise PluginError(-1, f"unknown option `{name}`")
            option.value = value

    def call(self, plugin: "Plugin", request: Any) -> Any:
        init = InitConf.from_json(request)
        plugin.configuration = init.configuration
        self._parse_options(plugin, init.options)
        if self.on_init is not None:
            return self.on_init(plugin)
        return init_payload()