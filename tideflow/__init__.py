"""Reactive values, two-way bindings, observable collections and visual filter records."""

__version__ = "0.1.0"

__all__ = [
    "binding",
    "collection",
    "compute",
    "computed",
    "filter",
    "watcher",
]