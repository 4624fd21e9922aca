import copy

import pytest

from clnrpc.plugin.errors import PluginError
from clnrpc.plugin.types import (
    InitConf,
    LogLevel,
    NodeConfiguration,
    ProxyInfo,
    RPCHookInfo,
    RPCMethodInfo,
    RpcOption,
)

CONFIGURATION = {
    "lightning-dir": "/tmp/node/regtest",
    "rpc-file": "lightning-rpc",
    "startup": True,
    "network": "regtest",
    "feature_set": {"init": "02aaa2", "node": "8000000002aaa2"},
    "proxy": {"type": "ipv4", "address": "127.0.0.1", "port": 9050},
    "torv3-enabled": True,
    "always_use_proxy": False,
}


def test_log_level_strings():
    names = [LogLevel.__str__(level) for level in LogLevel]
    assert names == ["debug", "info", "warn", "error"]


def test_rpc_option_to_json_renames_type():
    option = RpcOption("foo", "flag", None, "An example of command line option", False)
    assert option.to_json() == {
        "name": "foo",
        "type": "flag",
        "default": None,
        "description": "An example of command line option",
        "deprecated": False,
        "value": None,
    }


def test_rpc_method_info_is_hashable_and_serialises():
    info = RPCMethodInfo("hello", "", "show how is possible add a method", "show how is possible add a method")
    same = RPCMethodInfo("hello", "", "show how is possible add a method", "show how is possible add a method")
    assert len({info, same}) == 1
    assert info.to_json()["name"] == "hello"
    assert info.to_json()["deprecated"] is False


def test_hook_info_accepts_lists_and_stays_hashable():
    hook = RPCHookInfo("htlc_accepted", ["a", "b"], None)
    assert hook.before == ("a", "b")
    assert len({hook, RPCHookInfo("htlc_accepted", ("a", "b"), None)}) == 1
    assert hook.to_json() == {"name": "htlc_accepted", "before": ["a", "b"], "after": None}


def test_proxy_accepts_type_and_field_name():
    by_type = ProxyInfo.from_json({"type": "ipv4", "address": "127.0.0.1", "port": 9050})
    by_name = ProxyInfo.from_json({"tup": "ipv4", "address": "127.0.0.1", "port": 9050})
    assert by_type == by_name
    assert by_type.tup == "ipv4"
    assert by_type.port == 9050


def test_proxy_rejects_non_integer_port():
    with pytest.raises(PluginError) as info:
        ProxyInfo.from_json({"type": "ipv4", "address": "127.0.0.1", "port": "9050"})
    assert info.value.code == -1


def test_node_configuration_from_json():
    conf = NodeConfiguration.from_json(CONFIGURATION)
    assert conf.lightning_dir == "/tmp/node/regtest"
    assert conf.rpc_file == "lightning-rpc"
    assert conf.startup is True
    assert conf.network == "regtest"
    assert conf.feature_set == CONFIGURATION["feature_set"]
    assert conf.proxy == ProxyInfo("ipv4", "127.0.0.1", 9050)
    assert conf.torv3_enabled is True
    assert conf.always_use_proxy is False


def test_node_configuration_optional_fields_default_to_none():
    obj = copy.deepcopy(CONFIGURATION)
    for key in ("proxy", "torv3-enabled", "always_use_proxy"):
        del obj[key]
    conf = NodeConfiguration.from_json(obj)
    assert conf.proxy is None
    assert conf.torv3_enabled is None
    assert conf.always_use_proxy is None


@pytest.mark.parametrize("missing", ["lightning-dir", "rpc-file", "startup", "network", "feature_set"])
def test_node_configuration_missing_field(missing):
    obj = copy.deepcopy(CONFIGURATION)
    del obj[missing]
    with pytest.raises(PluginError) as info:
        NodeConfiguration.from_json(obj)
    assert info.value.code == -1
    assert missing in info.value.msg


def test_node_configuration_wrong_type():
    obj = copy.deepcopy(CONFIGURATION)
    obj["startup"] = "yes"
    with pytest.raises(PluginError):
        NodeConfiguration.from_json(obj)


def test_init_conf_from_json():
    init = InitConf.from_json({"options": {"foo": True}, "configuration": CONFIGURATION})
    assert init.options == {"foo": True}
    assert init.configuration.network == "regtest"


def test_init_conf_requires_object():
    with pytest.raises(PluginError):
        InitConf.from_json([1, 2])
    with pytest.raises(PluginError):
        InitConf.from_json({"options": {}})