# clnrpc

Tools for talking to a Core Lightning node from Python:

- a JSON-RPC 2.0 client that speaks over the node's UNIX socket,
- parameter objects for the common node commands, and an `MSat` amount type,
- a reader and writer for Core Lightning configuration files,
- building blocks for writing plugins that the node starts and drives
  over standard input and output.

The package has no runtime dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Calling the node

`clnrpc.client.Client` sends requests to the node's RPC socket. By
default `lightningd` creates it at `~/.lightning/lightning-rpc`.

```python
from pathlib import Path

from clnrpc.client import Client
from clnrpc.rpc.requests import FeeRates

client = Client(Path.home() / ".lightning" / "lightning-rpc", timeout=5.0)

response = client.send_request("getinfo", {})
print(response.into_result()["id"])

response = client.send_request("feerates", FeeRates(style="perkw"))
print(response.into_result())
```

Each call to `send_request` opens a fresh connection, sends one request
and reads one `clnrpc.jsonrpc.Response`. Parameters may be plain dicts
and lists, or objects with a `to_json()` method such as the classes in
`clnrpc.rpc.requests`; unset optional fields of those classes are left
out of the request. `Response.into_result()` returns the result, raises
the node's `clnrpc.errors.RpcError` if it sent one, and raises
`MalformedResponseError` if there is neither. Connection and timeout
problems raise `TransportError`, undecodable data raises `JsonError`, and
a `jsonrpc` field other than `"2.0"` raises `VersionMismatchError`; all of
these derive from `ClientError`.

Amounts for `fundchannel` and `withdraw` are given as
`AmountOrAll(n)` or `AmountOrAll.all_funds()`, which is sent as `"all"`.

Amounts in millisatoshi are represented by `clnrpc.rpc.types.MSat`.
`MSat.from_json` accepts both plain integers and strings such as
`"3msat"`; `str(MSat(3))` is `"3msat"`. Route hops are
`clnrpc.rpc.types.RouteItem`.

`clnrpc.json_utils` has small helpers (`init_payload`, `add_str`,
`add_number`, `add_bool`, `add_vec`, `init_success_response`) for building
JSON payloads by hand.

## Configuration files

`clnrpc.conf.CLNConf` reads and writes the `key=value` format used by
Core Lightning, keeping comment lines and following `include` lines.

```python
from clnrpc.conf import CLNConf

conf = CLNConf("/path/to/config", False)
conf.parse()
print(conf.get_confs("plugin"))
print(conf.get_conf("network"))

conf.add_conf("alias", "mynode")
conf.rm_conf("plugin", None)
conf.flush()
```

`get_confs` returns every value of a key, including those in included
files; `get_conf` returns the single value or `None`. Conflicting edits,
such as adding the same value twice, removing one that is not there, or
asking `get_conf` for a key defined more than once, raise
`clnrpc.conf.ParsingError`. With `create_if_missing=True`, parsing a
missing file first creates it with a generated header comment.

## Writing plugins

A plugin registers options, RPC methods, hooks and notification handlers
on a `clnrpc.plugin.plugin.Plugin` and then hands control to `start`,
which answers the node's `getmanifest` and `init` calls and dispatches
everything else. `start` reads one JSON request per line from standard
input (or a given reader) until the input ends, and writes responses and
log lines to standard output (or a given writer).

```python
from clnrpc.plugin.commands import RPCCommand
from clnrpc.plugin.plugin import Plugin


class Hello(RPCCommand):
    def call(self, plugin, request):
        return {"language": "Hello from Python"}


plugin = Plugin(None, True)
plugin.add_rpc_method("hello", "", "say hello", Hello())
plugin.add_opt("foo", "flag", None, "an example option", False)
plugin.start()
```

Raise `clnrpc.plugin.errors.PluginError` from a method to send an error
object back. After `init`, `plugin.get_opt(name)` returns the value the
node sent for an option and `plugin.configuration` holds the node
configuration. `plugin.handle_request(obj)` processes one decoded request
directly and returns the response, or `None` for a notification.

The decorators in `clnrpc.plugin.decorators` remove most of the
boilerplate:

```python
from clnrpc.plugin.decorators import build_plugin, notification, rpc_method


@rpc_method("foo_macro", "A short description", "")
def foo(plugin, request):
    return {"is_dynamic": plugin.dynamic, "rpc_request": request}


@notification("rpc_command")
def on_rpc(plugin, request):
    pass


plugin = build_plugin(None, True, [on_rpc], [foo], [])
plugin.start()
```

`build_plugin` checks that `hooks` is a list but does not register its
entries; use `Plugin.register_hook` for hooks.

A ready-made example plugin is installed as a command. Point the node at
it with `plugin=` in its configuration, or start it by hand and type
requests to see the protocol. `--decorated` runs the variant declared
with the decorators:

```
clnrpc-hello-plugin
clnrpc-hello-plugin --decorated
```

## What this package does not do

- There is no high-level object with one typed method per node command,
  and no typed models for the node's answers: results come back from
  `Response.into_result()` as plain decoded JSON.
- There is no command-line client for querying a node; the only command
  installed is the example plugin.