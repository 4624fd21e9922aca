"""JSON-RPC client, configuration manager and plugin toolkit for Core Lightning."""

__version__ = "0.1.0"