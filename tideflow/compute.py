"""Reactive computations: the Compute protocol, constants, mapping and zipping."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from tideflow.watcher import Metadata, Watcher, WatcherGuard, watch

if TYPE_CHECKING:
    from tideflow.computed import Computed

T = TypeVar("T")
U = TypeVar("U")
M = TypeVar("M")

_EMPTY = object()


class Compute(ABC, Generic[T]):
    """A value that can be computed and watched for changes."""

    @abstractmethod
    def compute(self) -> T:
        """Return the current value."""

    @abstractmethod
    def add_watcher(self, watcher: Watcher[T]) -> WatcherGuard:
        """Register ``watcher``; the returned guard unregisters it."""

    def map(self, func: Callable[[T], U]) -> "Map[T, U]":
        """Return a cached computation applying ``func`` to this one's value."""
        return Map(self, func)

    def zip(self, other: Any) -> "Zip":
        """Return a computation producing a pair of this value and ``other``'s."""
        return Zip(self, other)

    def watch(self, watcher: Any) -> WatcherGuard:
        """Register a Watcher or a one-argument callable for changes."""
        return watch(self, watcher)

    def computed(self) -> "Computed[T]":
        """Wrap this computation in a type-erased Computed."""
        from tideflow.computed import Computed

        return Computed(self)

    def with_metadata(self, metadata: Any) -> "WithMetadata[T]":
        """Attach ``metadata`` to every notification from this computation."""
        return WithMetadata(metadata, self)


class WithMetadata(Compute[T]):
    """A computation whose notifications carry an extra metadata value."""

    def __init__(self, metadata: Any, source: Any) -> None:
        self._metadata = metadata
        self._source = into_compute(source)

    def compute(self) -> T:
        return self._source.compute()

    def add_watcher(self, watcher: Watcher[T]) -> WatcherGuard:
        extra = self._metadata

        def forward(value: T, metadata: Metadata) -> None:
            watcher.notify_with_metadata(value, metadata.with_value(extra))

        return self._source.add_watcher(Watcher(forward))

    def __repr__(self) -> str:
        return f"WithMetadata({self._metadata!r}, {self._source!r})"


class Constant(Compute[T]):
    """A computation whose value never changes."""

    def __init__(self, value: T) -> None:
        self._value = value

    def compute(self) -> T:
        return self._value

    def add_watcher(self, watcher: Watcher[T]) -> WatcherGuard:
        return WatcherGuard(lambda: None)

    def __repr__(self) -> str:
        return f"Constant({self._value!r})"


def constant(value: T) -> Constant[T]:
    """Create a constant computation."""
    return Constant(value)


class _MapCache:
    __slots__ = ("value",)

    def __init__(self) -> None:
        self.value: Any = _EMPTY


class Map(Compute[U], Generic[T, U]):
    """A computation transforming a source value, cached until the source changes."""

    def __init__(self, source: Any, func: Callable[[T], U]) -> None:
        self._source: Compute[T] = into_compute(source)
        self._func = func
        cache = _MapCache()
        self._cache = cache

        def invalidate(_value: T, _metadata: Metadata) -> None:
            cache.value = _EMPTY

        self._guard = self._source.add_watcher(Watcher(invalidate))

    def compute(self) -> U:
        if self._cache.value is _EMPTY:
            self._cache.value = self._func(self._source.compute())
        return self._cache.value

    def add_watcher(self, watcher: Watcher[U]) -> WatcherGuard:
        def forward(_value: T, metadata: Metadata) -> None:
            watcher.notify_with_metadata(self.compute(), metadata)

        return self._source.add_watcher(Watcher(forward))

    def __repr__(self) -> str:
        return f"Map({self._source!r})"


def map_compute(source: Any, func: Callable[[Any], U]) -> Map[Any, U]:
    """Create a Map over ``source``."""
    return Map(source, func)


class Zip(Compute[tuple]):
    """A computation producing a pair of two computations' values."""

    def __init__(self, first: Any, second: Any) -> None:
        self._first = into_compute(first)
        self._second = into_compute(second)

    def compute(self) -> tuple:
        return (self._first.compute(), self._second.compute())

    def add_watcher(self, watcher: Watcher[tuple]) -> WatcherGuard:
        first, second = self._first, self._second

        def on_first(value: Any, metadata: Metadata) -> None:
            watcher.notify_with_metadata((value, second.compute()), metadata)

        def on_second(value: Any, metadata: Metadata) -> None:
            watcher.notify_with_metadata((first.compute(), value), metadata)

        guard_first = first.add_watcher(Watcher(on_first))
        guard_second = second.add_watcher(Watcher(on_second))

        def release() -> None:
            guard_first.release()
            guard_second.release()

        return WatcherGuard(release)

    def _flatten(self, value: tuple) -> tuple:
        first, second = value
        if isinstance(self._first, Zip):
            return (*self._first._flatten(first), second)
        return (first, second)

    def flatten_map(self, func: Callable[..., U]) -> Map[tuple, U]:
        """Map over the flattened values of nested zips, passed as separate arguments."""
        return Map(self, lambda value: func(*self._flatten(value)))

    def __repr__(self) -> str:
        return f"Zip({self._first!r}, {self._second!r})"


def zip_compute(first: Any, second: Any) -> Zip:
    """Create a Zip of two computations."""
    return Zip(first, second)


def into_compute(value: Any) -> Compute:
    """Return ``value`` if it is a computation, otherwise a constant holding it."""
    if isinstance(value, Compute):
        return value
    return Constant(value)