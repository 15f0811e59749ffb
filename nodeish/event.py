"""A small event emitter with persistent and one-shot listeners."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

DEFAULT_MAX_EVENTS = 1024


class _Listener:
    """A registered callback; its identity is the handle handed to callers."""

    __slots__ = ("func", "once", "active")

    def __init__(self, func: Callable[..., Any], once: bool) -> None:
        self.func = func
        self.once = once
        self.active = True

    def __call__(self, *args: Any) -> bool:
        if self.active:
            self.func(*args)
            if self.once:
                self.active = False
        return self.active


class Event:
    """Holds callbacks and calls them, in registration order, on emit."""

    def __init__(self, max_events: int = DEFAULT_MAX_EVENTS) -> None:
        self._max_events = max_events
        self._listeners: list[_Listener] = []

    def __call__(self, func: Callable[..., Any]) -> _Listener | None:
        return self.on(func)

    def _add(self, func: Callable[..., Any], once: bool) -> _Listener | None:
        if len(self._listeners) >= self._max_events:
            return None
        listener = _Listener(func, once)
        self._listeners.append(listener)
        return listener

    def on(self, func: Callable[..., Any]) -> _Listener | None:
        """Register ``func`` for every emit; returns a handle, or None when full."""
        return self._add(func, once=False)

    def once(self, func: Callable[..., Any]) -> _Listener | None:
        """Register ``func`` for the next emit only; returns a handle, or None when full."""
        return self._add(func, once=True)

    def off(self, handle: _Listener | None) -> None:
        """Disable the listener behind ``handle``; it is dropped on the next emit."""
        if handle is not None:
            handle.active = False

    def emit(self, *args: Any) -> None:
        """Call every active listener with ``args`` and drop the finished ones."""
        for listener in list(self._listeners):
            if not listener(*args):
                try:
                    self._listeners.remove(listener)
                except ValueError:
                    pass

    def clear(self) -> None:
        self._listeners.clear()

    def empty(self) -> bool:
        return not self._listeners

    def __len__(self) -> int:
        return len(self._listeners)