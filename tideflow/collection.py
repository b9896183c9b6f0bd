"""Reactive collections that notify watchers when their contents change."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, Optional, TypeVar

from tideflow.watcher import WatcherGuard, WatcherManager

T = TypeVar("T")


class Collection(ABC, Generic[T]):
    """A collection read item by item, watched for structural changes."""

    @abstractmethod
    def get(self, index: int) -> Optional[T]:
        """Return the item at ``index``, or None when out of bounds."""

    @abstractmethod
    def remove(self, index: int) -> None:
        """Remove the item at ``index`` and notify watchers."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of items."""

    def is_empty(self) -> bool:
        """Return True when the collection holds no items."""
        return len(self) == 0

    @abstractmethod
    def add_watcher(self, watcher: Any) -> WatcherGuard:
        """Register a watcher called with None whenever the collection changes."""


class Array(Collection[T]):
    """A reactive list."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)
        self._watchers: WatcherManager[None] = WatcherManager()

    def push(self, item: T) -> None:
        """Append ``item`` and notify watchers."""
        self._items.append(item)
        self._watchers.notify(None)

    def clear(self) -> None:
        """Remove every item and notify watchers."""
        self._items.clear()
        self._watchers.notify(None)

    def get(self, index: int) -> Optional[T]:
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def remove(self, index: int) -> None:
        if 0 <= index < len(self._items):
            del self._items[index]
            self._watchers.notify(None)

    def __len__(self) -> int:
        return len(self._items)

    def add_watcher(self, watcher: Any) -> WatcherGuard:
        return WatcherGuard.from_id(self._watchers, self._watchers.register(watcher))

    def __repr__(self) -> str:
        return f"Array({self._items!r})"