import pytest

from clnrpc.plugin.decorators import (
    NotificationCommand,
    RpcMethodCommand,
    add_rpc,
    build_plugin,
    notification,
    plugin_error,
    register_notification,
    rpc_method,
)
from clnrpc.plugin.errors import PluginError
from clnrpc.plugin.plugin import Plugin


@rpc_method(rpc_name="foo_macro", description="This is a simple and short description")
def foo_rpc(plugin, request):
    return {"is_dynamic": plugin.dynamic, "rpc_request": request}


@notification(on="rpc_command")
def on_rpc(plugin, request):
    plugin.state.append(request)


@rpc_method(rpc_name="failing", description="always fails")
def failing_rpc(plugin, request):
    raise plugin_error("boom")


def _foo_handler(plugin, request):
    return {"is_dynamic": plugin.dynamic, "rpc_request": request}


def _empty_handler(plugin, request):
    return {}


def test_rpc_method_factory_builds_command():
    factory = rpc_method(
        rpc_name="foo_macro", description="This is a simple and short description"
    )(_foo_handler)
    command = factory()
    assert isinstance(command, RpcMethodCommand)
    assert command.name == "foo_macro"
    assert command.description == "This is a simple and short description"
    assert command.long_description == command.description
    assert command.usage == ""


def test_factory_returns_fresh_objects():
    factory = rpc_method(rpc_name="foo_macro", description="desc")(_foo_handler)
    first = factory()
    second = factory()
    assert first is not second
    assert first.name == second.name == "foo_macro"


def test_factory_keeps_function_name():
    factory = rpc_method(rpc_name="foo_macro", description="desc")(_foo_handler)
    assert factory.__name__ == "_foo_handler"


def test_rpc_method_usage_is_kept():
    factory = rpc_method("bar", "desc", usage="id")(_empty_handler)
    command = factory()
    assert command.usage == "id"
    assert command.name == "bar"


def test_command_call_runs_function():
    plugin = Plugin(None, True)
    assert foo_rpc().call(plugin, {"a": 1}) == {"is_dynamic": True, "rpc_request": {"a": 1}}


def test_notification_factory_and_call():
    command = on_rpc()
    assert isinstance(command, NotificationCommand)
    assert command.on_event == "rpc_command"
    plugin = Plugin([], False)
    assert command.call_void(plugin, {"x": 1}) is None
    assert plugin.state == [{"x": 1}]


def test_build_plugin_macro_example():
    plugin = build_plugin(
        state=[], dynamic=True, notifications=[on_rpc], methods=[foo_rpc], hooks=[]
    )
    response = plugin.handle_request({"id": 1, "method": "foo_macro", "params": {}})
    assert "is_dynamic" in response["result"]
    assert response["result"]["is_dynamic"] is True
    assert response["result"]["rpc_request"] == {}
    assert response["id"] == 1


def test_build_plugin_manifest_lists_registrations():
    plugin = build_plugin(state=[], dynamic=True, notifications=[on_rpc], methods=[foo_rpc])
    manifest = plugin.handle_request({"id": "a", "method": "getmanifest", "params": {}})["result"]
    assert manifest["subscriptions"] == ["rpc_command"]
    assert [m["name"] for m in manifest["rpcmethods"]] == ["foo_macro"]
    assert manifest["dynamic"] is True


def test_build_plugin_dispatches_notifications():
    plugin = build_plugin(state=[], notifications=[on_rpc])
    assert plugin.handle_request({"method": "rpc_command", "params": {"k": "v"}}) is None
    assert plugin.state == [{"k": "v"}]


def test_build_plugin_defaults():
    plugin = build_plugin()
    assert plugin.state is None
    assert plugin.dynamic is False
    assert plugin.rpc_method == {}
    assert plugin.rpc_notification == {}


@pytest.mark.parametrize("field", ["notifications", "methods", "hooks"])
def test_build_plugin_rejects_non_list(field):
    with pytest.raises(TypeError, match="should be an array!"):
        build_plugin(**{field: "foo_rpc"})


def test_add_rpc_registers_method():
    plugin = Plugin(None, False)
    returned = add_rpc(plugin, foo_rpc)
    assert returned is plugin
    assert set(plugin.rpc_method) == {"foo_macro"}
    info = next(iter(plugin.rpc_info))
    assert info.name == "foo_macro"
    assert info.description == "This is a simple and short description"


def test_register_notification_helper():
    plugin = Plugin([], False)
    register_notification(plugin, on_rpc)
    assert list(plugin.rpc_notification) == ["rpc_command"]


def test_plugin_error_values():
    err = plugin_error("boom")
    assert isinstance(err, PluginError)
    assert err.code == -1
    assert err.data is None
    assert str(err) == "code: -1, msg: boom"


def test_failing_method_reports_error():
    plugin = build_plugin(methods=[failing_rpc])
    response = plugin.handle_request({"id": 7, "method": "failing", "params": {}})
    assert response["error"] == {"code": -1, "message": "boom", "data": None}
    assert "result" not in response