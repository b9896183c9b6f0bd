"""Watchers, change notification and the guards that keep them registered."""

from __future__ import annotations

import weakref
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K")

_MISSING = object()


class Metadata:
    """Values attached to a notification, keyed by their type."""

    def __init__(self) -> None:
        self._values: dict[type, Any] = {}

    def get(self, kind: type[K]) -> K:
        """Return the stored value of type ``kind``; raise KeyError if absent."""
        value = self._values.get(kind, _MISSING)
        if value is _MISSING:
            raise KeyError(f"no metadata of type {kind.__name__}")
        return value

    def try_get(self, kind: type[K]) -> Optional[K]:
        """Return the stored value of type ``kind``, or None if absent."""
        return self._values.get(kind)

    def with_value(self, value: Any) -> "Metadata":
        """Return a copy holding ``value``, replacing any value of the same type."""
        updated = Metadata()
        updated._values = dict(self._values)
        updated._values[type(value)] = value
        return updated

    def __repr__(self) -> str:
        kinds = ", ".join(kind.__name__ for kind in self._values)
        return f"Metadata({kinds})"


class Watcher(Generic[T]):
    """A callback that receives a value together with its metadata."""

    def __init__(self, callback: Callable[[T, Metadata], None]) -> None:
        self._callback = callback

    @classmethod
    def simple(cls, callback: Callable[[T], None]) -> "Watcher[T]":
        """Build a watcher from a callback that only wants the value."""
        return cls(lambda value, _metadata: callback(value))

    def notify(self, value: T) -> None:
        """Deliver ``value`` with empty metadata."""
        self.notify_with_metadata(value, Metadata())

    def notify_with_metadata(self, value: T, metadata: Metadata) -> None:
        """Deliver ``value`` with the given metadata."""
        self._callback(value, metadata)


def _as_watcher(watcher: Any) -> Watcher:
    if isinstance(watcher, Watcher):
        return watcher
    if callable(watcher):
        return Watcher.simple(watcher)
    raise TypeError(f"cannot use {watcher!r} as a watcher")


class WatcherManager(Generic[T]):
    """A registry of watchers that are notified together."""

    def __init__(self) -> None:
        self._next_id = 1
        self._watchers: dict[int, Watcher[T]] = {}

    def is_empty(self) -> bool:
        """Return True when no watcher is registered."""
        return not self._watchers

    def register(self, watcher: Watcher[T]) -> int:
        """Register ``watcher`` and return its identifier."""
        watcher_id = self._next_id
        self._next_id += 1
        self._watchers[watcher_id] = _as_watcher(watcher)
        return watcher_id

    def notify(self, value: T) -> None:
        """Notify every watcher with ``value`` and empty metadata."""
        self.notify_with_metadata(value, Metadata())

    def notify_with_metadata(self, value: T, metadata: Metadata) -> None:
        """Notify every watcher, in registration order."""
        for watcher in list(self._watchers.values()):
            watcher.notify_with_metadata(value, metadata)

    def cancel(self, watcher_id: int) -> None:
        """Remove the watcher with the given identifier, if present."""
        self._watchers.pop(watcher_id, None)


class WatcherGuard:
    """Runs a cleanup action once, when released or garbage-collected."""

    def __init__(self, cleanup: Callable[[], None]) -> None:
        self._cleanup: Optional[Callable[[], None]] = cleanup

    @classmethod
    def from_id(cls, manager: WatcherManager, watcher_id: int) -> "WatcherGuard":
        """Create a guard that cancels ``watcher_id`` on ``manager``."""
        manager_ref = weakref.ref(manager)

        def cancel() -> None:
            target = manager_ref()
            if target is not None:
                target.cancel(watcher_id)

        return cls(cancel)

    def release(self) -> None:
        """Run the cleanup action now; later calls do nothing."""
        cleanup, self._cleanup = self._cleanup, None
        if cleanup is not None:
            cleanup()

    def leak(self) -> None:
        """Drop the cleanup action so it never runs."""
        self._cleanup = None

    def __enter__(self) -> "WatcherGuard":
        return self

    def __exit__(self, *args: Any) -> None:
        self.release()

    def __del__(self) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "active" if self._cleanup is not None else "released"
        return f"WatcherGuard({state})"


def watch(source: Any, watcher: Any) -> WatcherGuard:
    """Register ``watcher`` (a Watcher or a one-argument callable) on ``source``."""
    return source.add_watcher(_as_watcher(watcher))