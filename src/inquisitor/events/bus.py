"""Synchronous dispatch of session events to listeners."""

from __future__ import annotations

from typing import Callable, TypeVar

from inquisitor.events.types import SessionEvent

E = TypeVar("E", bound=SessionEvent)

Listener = Callable[[SessionEvent], None]
Unsubscribe = Callable[[], None]


def _remover(listeners: list, callback: Callable) -> Unsubscribe:
    def remove() -> None:
        if callback in listeners:
            listeners.remove(callback)

    return remove


class EventBus:
    """Routes session events to listeners.

    Listeners run on the session's own coroutine, in registration order,
    catch-all listeners before typed ones. An exception raised by a
    listener propagates out of the session. Both registration methods
    return a callable that detaches the listener again.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Callable]] = {}
        self._global_listeners: list[Listener] = []

    def subscribe(self, event_type: type[E], callback: Callable[[E], None]) -> Unsubscribe:
        """Call *callback* for every event of exactly *event_type*."""
        listeners = self._listeners.setdefault(event_type, [])
        listeners.append(callback)
        return _remover(listeners, callback)

    def on_all(self, callback: Listener) -> Unsubscribe:
        """Call *callback* for every session event."""
        self._global_listeners.append(callback)
        return _remover(self._global_listeners, callback)

    def emit(self, event: SessionEvent) -> None:
        # Copies: a listener may detach itself while being called.
        for cb in list(self._global_listeners):
            cb(event)
        for cb in list(self._listeners.get(type(event), ())):
            cb(event)

    def listener_count(self, event_type: type | None = None) -> int:
        """Listeners that would receive an event of *event_type* (catch-all only when None)."""
        count = len(self._global_listeners)
        if event_type is not None:
            count += len(self._listeners.get(event_type, ()))
        return count
