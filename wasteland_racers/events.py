"""A small multicast event: handlers subscribe and all of them receive each emission."""

from __future__ import annotations

from typing import Any, Callable, List

Handler = Callable[..., Any]


class Event:
    """Holds an ordered set of handlers and calls each of them on emit."""

    def __init__(self) -> None:
        self._handlers: List[Handler] = []

    def __len__(self) -> int:
        return len(self._handlers)

    def __contains__(self, handler: object) -> bool:
        return handler in self._handlers

    def subscribe(self, handler: Handler) -> None:
        """Add a handler; a handler already subscribed is not added twice."""
        if handler not in self._handlers:
            self._handlers.append(handler)

    def unsubscribe(self, handler: Handler) -> None:
        """Remove a handler; removing one that is not subscribed does nothing."""
        if handler in self._handlers:
            self._handlers.remove(handler)

    def emit(self, *args: Any) -> None:
        """Call every subscribed handler, in subscription order, with ``args``."""
        for handler in list(self._handlers):
            handler(*args)