"""Two-way reactive bindings: values that can be read, watched and set."""

from __future__ import annotations

import copy
from abc import abstractmethod
from typing import Any, Callable, Generic, Optional, TypeVar

from tideflow.compute import Compute, Map, Zip
from tideflow.computed import Computed
from tideflow.watcher import Metadata, Watcher, WatcherGuard, WatcherManager

T = TypeVar("T")
U = TypeVar("U")


class CustomBinding(Compute[T]):
    """A computation whose value can also be set."""

    @abstractmethod
    def set(self, value: T) -> None:
        """Store ``value``, typically notifying watchers."""


class Container(CustomBinding[T]):
    """A stored value that notifies its watchers whenever it is set."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._watchers: WatcherManager[T] = WatcherManager()

    def compute(self) -> T:
        return copy.copy(self._value)

    def add_watcher(self, watcher: Watcher[T]) -> WatcherGuard:
        return WatcherGuard.from_id(self._watchers, self._watchers.register(watcher))

    def set(self, value: T) -> None:
        self._value = copy.copy(value)
        self._watchers.notify(value)

    def notify(self) -> None:
        """Notify every watcher with the current value."""
        self._watchers.notify(copy.copy(self._value))

    def __repr__(self) -> str:
        return f"Container({self._value!r})"


class _Mapping(CustomBinding[U], Generic[T, U]):
    """A binding derived from another through a getter and a setter."""

    def __init__(
        self,
        source: "Binding[T]",
        getter: Callable[[T], U],
        setter: Callable[["Binding[T]", U], None],
    ) -> None:
        self._source = source
        self._getter = getter
        self._setter = setter

    def compute(self) -> U:
        return self._getter(self._source.compute())

    def add_watcher(self, watcher: Watcher[U]) -> WatcherGuard:
        getter = self._getter

        def forward(value: T, metadata: Metadata) -> None:
            watcher.notify_with_metadata(getter(value), metadata)

        return self._source.add_watcher(Watcher(forward))

    def set(self, value: U) -> None:
        self._setter(self._source, value)

    def __repr__(self) -> str:
        return f"Mapping({self._source!r})"


class Binding(Compute[T]):
    """A mutable, observable value shared by everyone holding the binding."""

    def __init__(self, inner: CustomBinding[T]) -> None:
        if not isinstance(inner, CustomBinding):
            raise TypeError(f"{inner!r} is not a CustomBinding")
        self._inner = inner

    @classmethod
    def container(cls, value: T) -> "Binding[T]":
        """Create a binding holding ``value`` in a Container."""
        return cls(Container(value))

    @classmethod
    def custom(cls, custom: CustomBinding[T]) -> "Binding[T]":
        """Create a binding backed by a custom implementation."""
        return cls(custom)

    @classmethod
    def mapping(
        cls,
        source: "Binding[Any]",
        getter: Callable[[Any], U],
        setter: Callable[["Binding[Any]", U], None],
    ) -> "Binding[U]":
        """Create a binding whose value is ``getter(source)`` and whose setter writes back."""
        return cls(_Mapping(source, getter, setter))

    def get(self) -> T:
        """Return the current value."""
        return self._inner.compute()

    def set(self, value: T) -> None:
        """Store ``value`` if it differs from the current one."""
        if self.get() != value:
            self._inner.set(value)

    def get_mut(self) -> "BindingMutGuard[T]":
        """Return a guard whose ``value`` is written back when the block ends."""
        return BindingMutGuard(self)

    def handle(self, handler: Callable[[T], Optional[T]]) -> None:
        """Apply ``handler`` to the value and store the result.

        The handler may mutate the value in place and return None, or return
        a replacement value. A container binding always notifies; other
        bindings only notify when the value changes.
        """
        current = self.get()
        result = handler(current)
        updated = current if result is None else result
        if isinstance(self._inner, Container):
            self._inner.set(updated)
        else:
            self.set(updated)

    def filter(self, predicate: Callable[[T], bool]) -> "Binding[T]":
        """Return a binding that ignores values rejected by ``predicate``."""

        def setter(source: "Binding[T]", value: T) -> None:
            if predicate(value):
                source.set(value)

        return Binding.mapping(self, lambda value: value, setter)

    def range(self, low: Optional[T] = None, high: Optional[T] = None) -> "Binding[T]":
        """Return a binding accepting only values within ``low..=high``; None is unbounded."""

        def inside(value: T) -> bool:
            if low is not None and value < low:
                return False
            if high is not None and value > high:
                return False
            return True

        return self.filter(inside)

    def push(self, value: Any) -> None:
        """Append ``value`` to a list binding."""
        with self.get_mut() as guard:
            guard.value.append(value)

    def clear(self) -> None:
        """Empty a string or list binding."""
        if isinstance(self.get(), str):
            self.set("")
        else:
            with self.get_mut() as guard:
                guard.value.clear()

    def append(self, text: str) -> None:
        """Append ``text`` to a string binding."""
        self.handle(lambda value: value + text)

    def increment(self, amount: int) -> None:
        """Add ``amount`` to a numeric binding."""
        self.handle(lambda value: value + amount)

    def decrement(self, amount: int) -> None:
        """Subtract ``amount`` from a numeric binding."""
        self.handle(lambda value: value - amount)

    def toggle(self) -> None:
        """Invert a boolean binding."""
        self.handle(lambda value: not value)

    def compute(self) -> T:
        return self.get()

    def add_watcher(self, watcher: Watcher[T]) -> WatcherGuard:
        return self._inner.add_watcher(watcher)

    def __add__(self, other: Any) -> Computed:
        """Return a Computed sum with another computation or a plain value."""
        if isinstance(other, Compute):
            return Computed(Zip(self, other).flatten_map(lambda left, right: left + right))
        return Computed(Map(self, lambda value: value + other))

    def __iadd__(self, other: Any) -> "Binding[T]":
        def add_in_place(value: Any) -> Any:
            value += other
            return value

        self.handle(add_in_place)
        return self

    def __repr__(self) -> str:
        return f"Binding({self._inner!r})"


class BindingMutGuard(Generic[T]):
    """Holds a working copy of a binding's value and writes it back on exit."""

    def __init__(self, binding: Binding[T]) -> None:
        self._binding = binding
        self.value: T = binding.get()

    def __enter__(self) -> "BindingMutGuard[T]":
        return self

    def __exit__(self, *args: Any) -> None:
        self._binding.set(self.value)


def binding(value: T) -> Binding[T]:
    """Create a container binding holding ``value``."""
    return Binding.container(value)