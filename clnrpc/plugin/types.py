"""Types exchanged between a plugin and the node during start-up."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable

from .errors import PluginError

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def _decode_error(message: str) -> PluginError:
    return PluginError(-1, message)


def _object(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise _decode_error(f"invalid type: expected {what} object")
    return value


def _required(obj: dict[str, Any], name: str) -> Any:
    if name not in obj:
        raise _decode_error(f"missing field `{name}`")
    return obj[name]


def _string(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise _decode_error(f"invalid type: `{name}` must be a string")
    return value


def _boolean(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise _decode_error(f"invalid type: `{name}` must be a boolean")
    return value


def _optional_bool(obj: dict[str, Any], name: str) -> bool | None:
    value = obj.get(name)
    return None if value is None else _boolean(value, name)


def _freeze(names: Iterable[str] | None) -> tuple[str, ...] | None:
    return None if names is None else tuple(names)


@dataclass
class RpcOption:
    """A command line option the plugin registers with the node."""

    name: str
    opt_typ: str
    default: str | None
    description: str
    deprecated: bool = False
    value: Any = None

    def to_json(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.opt_typ,
            "default": self.default,
            "description": self.description,
            "deprecated": self.deprecated,
            "value": self.value,
        }


class LogLevel(Enum):
    """Level of a log line sent to the node."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RPCMethodInfo:
    """Description of an RPC method a plugin offers."""

    name: str
    usage: str
    description: str
    long_description: str
    deprecated: bool = False

    def to_json(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "usage": self.usage,
            "description": self.description,
            "long_description": self.long_description,
            "deprecated": self.deprecated,
        }


@dataclass(frozen=True)
class RPCHookInfo:
    """Description of a hook a plugin subscribes to."""

    name: str
    before: tuple[str, ...] | None = None
    after: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "before", _freeze(self.before))
        object.__setattr__(self, "after", _freeze(self.after))

    def to_json(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "before": None if self.before is None else list(self.before),
            "after": None if self.after is None else list(self.after),
        }


@dataclass
class ProxyInfo:
    """Proxy settings of the node."""

    tup: str
    address: str
    port: int

    @classmethod
    def from_json(cls, obj: Any) -> "ProxyInfo":
        obj = _object(obj, "a proxy")
        if "type" in obj:
            tup = obj["type"]
        else:
            tup = _required(obj, "tup")
        port = _required(obj, "port")
        if isinstance(port, bool) or not isinstance(port, int) or not _I64_MIN <= port <= _I64_MAX:
            raise _decode_error("invalid type: `port` must be an integer")
        return cls(
            tup=_string(tup, "type"),
            address=_string(_required(obj, "address"), "address"),
            port=port,
        )


@dataclass
class NodeConfiguration:
    """Node configuration sent to the plugin with the init call."""

    lightning_dir: str
    rpc_file: str
    startup: bool
    network: str
    feature_set: dict[str, str] = field(default_factory=dict)
    proxy: ProxyInfo | None = None
    torv3_enabled: bool | None = None
    always_use_proxy: bool | None = None

    @classmethod
    def from_json(cls, obj: Any) -> "NodeConfiguration":
        obj = _object(obj, "a configuration")
        feature_set = _object(_required(obj, "feature_set"), "a feature set")
        for key, value in feature_set.items():
            _string(value, f"feature_set.{key}")
        raw_proxy = obj.get("proxy")
        return cls(
            lightning_dir=_string(_required(obj, "lightning-dir"), "lightning-dir"),
            rpc_file=_string(_required(obj, "rpc-file"), "rpc-file"),
            startup=_boolean(_required(obj, "startup"), "startup"),
            network=_string(_required(obj, "network"), "network"),
            feature_set=dict(feature_set),
            proxy=None if raw_proxy is None else ProxyInfo.from_json(raw_proxy),
            torv3_enabled=_optional_bool(obj, "torv3-enabled"),
            always_use_proxy=_optional_bool(obj, "always_use_proxy"),
        )


@dataclass
class InitConf:
    """Parameters of the init call: option values and node configuration."""

    options: dict[str, Any]
    configuration: NodeConfiguration

    @classmethod
    def from_json(cls, obj: Any) -> "InitConf":
        obj = _object(obj, "an init request")
        options = _object(_required(obj, "options"), "an options")
        return cls(
            options=dict(options),
            configuration=NodeConfiguration.from_json(_required(obj, "configuration")),
        )