"""Map interaction events, queued by the host and dispatched once per frame."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from flight_reveal.types import Coordinate

SINGLECLICK = "singleclick"
MOVESTART = "movestart"


@dataclass(frozen=True, slots=True)
class MapEvent:
    type: str
    coordinate: Coordinate | None = None


Listener = Callable[[MapEvent], None]


@dataclass(frozen=True, slots=True)
class ListenerKey:
    type: str
    listener: Listener


class MapEvents:

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}
        self._queue: list[MapEvent] = []

    def on(self, event_type: str, listener: Listener) -> ListenerKey:
        self._listeners.setdefault(event_type, []).append(listener)
        return ListenerKey(event_type, listener)

    def un(self, key: ListenerKey) -> None:
        listeners = self._listeners.get(key.type, [])
        if key.listener in listeners:
            listeners.remove(key.listener)

    def publish(self, event_type: str, coordinate: Coordinate | None = None) -> None:
        self._queue.append(MapEvent(event_type, coordinate))

    def flush(self) -> int:
        """Dispatch queued events in order. Returns how many were dispatched."""
        pending, self._queue = self._queue, []
        for event in pending:
            for listener in list(self._listeners.get(event.type, ())):
                listener(event)
        return len(pending)

    def clear(self) -> None:
        self._queue.clear()
