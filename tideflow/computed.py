"""Type-erased computations and addition of computed values."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from tideflow.compute import Compute, Constant, Map, Zip, into_compute
from tideflow.watcher import Watcher, WatcherGuard

T = TypeVar("T")


class Computed(Compute[T], Generic[T]):
    """A computation stored behind a uniform interface."""

    def __init__(self, source: Any) -> None:
        if isinstance(source, Computed):
            source = source._source
        self._source: Compute[T] = into_compute(source)

    @classmethod
    def constant(cls, value: T) -> "Computed[T]":
        """Create a Computed that always yields ``value``."""
        return cls(Constant(value))

    def compute(self) -> T:
        return self._source.compute()

    def add_watcher(self, watcher: Watcher[T]) -> WatcherGuard:
        return self._source.add_watcher(watcher)

    def __add__(self, other: Any) -> "Computed":
        """Add another computation or a plain value, yielding a new Computed."""
        if isinstance(other, Compute):
            return Computed(Zip(self, other).flatten_map(lambda left, right: left + right))
        return Computed(Map(self, lambda value: value + other))

    def __repr__(self) -> str:
        return f"Computed({self._source!r})"


def add(first: Any, second: Any) -> Compute:
    """Return a computation yielding the sum of two computations' values."""
    return Map(Zip(first, second), lambda pair: pair[0] + pair[1])


def into_computed(value: Any) -> Computed:
    """Turn a computation or a plain value into a Computed."""
    if isinstance(value, Computed):
        return value
    return Computed(into_compute(value))