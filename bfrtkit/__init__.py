"""Typed model of BFRuntime pipeline descriptions and P4 compiler configuration files."""

__version__ = "0.1.0"

__all__ = [
    "action",
    "config",
    "convert",
    "data",
    "errors",
    "info",
    "key",
    "learn_filter",
    "table",
    "types",
]