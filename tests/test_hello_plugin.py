import io
import json

from clnrpc.hello_plugin import build_hello_plugin, build_macro_plugin, main

CONFIGURATION = {
    "lightning-dir": "/tmp/lightning/regtest",
    "rpc-file": "lightning-rpc",
    "startup": True,
    "network": "regtest",
    "feature_set": {"init": "08a0"},
}


def _messages(text):
    decoder = json.JSONDecoder()
    out = []
    index = 0
    while index < len(text):
        if text[index].isspace():
            index += 1
            continue
        value, index = decoder.raw_decode(text, index)
        out.append(value)
    return out


def test_plugin_rpc_call(capsys):
    plugin = build_hello_plugin()
    response = plugin.handle_request({"id": 1, "method": "hello", "params": {}})
    assert response["id"] == 1
    assert "error" not in response
    assert "language" in response["result"]
    logs = _messages(capsys.readouterr().out)
    assert logs[0]["method"] == "log"
    assert logs[0]["params"]["level"] == "debug"


def test_plugin_macros_rpc_call():
    plugin = build_macro_plugin()
    response = plugin.handle_request({"id": "7", "method": "foo_macro", "params": {"a": 1}})
    assert response["result"]["is_dynamic"] is True
    assert response["result"]["rpc_request"] == {"a": 1}


def test_hello_manifest():
    plugin = build_hello_plugin()
    manifest = plugin.handle_request({"id": 2, "method": "getmanifest", "params": {}})["result"]
    assert [m["name"] for m in manifest["rpcmethods"]] == ["hello"]
    assert [o["name"] for o in manifest["options"]] == ["foo"]
    assert manifest["options"][0]["type"] == "flag"
    assert manifest["subscriptions"] == ["channel_opened"]
    assert manifest["dynamic"] is True


def test_macro_manifest():
    plugin = build_macro_plugin()
    manifest = plugin.handle_request({"id": 2, "method": "getmanifest", "params": {}})["result"]
    assert [m["name"] for m in manifest["rpcmethods"]] == ["foo_macro"]
    assert manifest["subscriptions"] == ["rpc_command"]


def test_hello_init_sets_option(capsys):
    plugin = build_hello_plugin()
    response = plugin.handle_request(
        {
            "id": 3,
            "method": "init",
            "params": {"options": {"foo": True}, "configuration": CONFIGURATION},
        }
    )
    assert response["result"] == {}
    assert plugin.get_opt("foo") is True
    assert plugin.configuration.network == "regtest"
    logs = _messages(capsys.readouterr().out)
    assert logs[-1]["params"]["message"] == "Custom init method called"


def test_hello_notification_logs(capsys):
    plugin = build_hello_plugin()
    assert plugin.handle_request({"method": "channel_opened", "params": {}}) is None
    logs = _messages(capsys.readouterr().out)
    assert logs[-1]["params"]["message"] == "A new channel was opened!"


def test_macro_notification_logs(capsys):
    plugin = build_macro_plugin()
    assert plugin.handle_request({"method": "rpc_command", "params": {}}) is None
    logs = _messages(capsys.readouterr().out)
    assert logs[-1]["params"] == {"level": "info", "message": "received an RPC notification"}


def test_main_serves_stdin(monkeypatch, capsys):
    lines = json.dumps({"jsonrpc": "2.0", "id": 1, "method": "hello", "params": {}}) + "\n\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(lines))
    assert main([]) == 0
    messages = _messages(capsys.readouterr().out)
    responses = [m for m in messages if m.get("id") == 1]
    assert responses[0]["result"] == {"language": "Hello from python"}


def test_main_decorated(monkeypatch, capsys):
    lines = json.dumps({"jsonrpc": "2.0", "id": 5, "method": "foo_macro", "params": []}) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(lines))
    assert main(["--decorated"]) == 0
    messages = _messages(capsys.readouterr().out)
    assert messages[-1]["result"] == {"is_dynamic": True, "rpc_request": []}