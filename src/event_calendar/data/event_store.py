from __future__ import annotations

import threading
from datetime import datetime
from types import MappingProxyType
from typing import Callable, Iterable, List, Mapping, Optional

from ..domain import Event


class EventStore:
    """In-memory, thread-safe collection of events keyed by name.

    Mutations are serialized by a single lock and published copy-on-write: each
    ``add``/``remove`` builds a new dict and swaps it in with one assignment.
    Published dicts are never modified again, so readers grab the current
    reference without locking and always see a complete state.

    Iteration order is insertion order of the live entries.
    """

    def __init__(self, events: Iterable[Event] = ()) -> None:
        self._lock = threading.Lock()
        self._events: Mapping[str, Event] = MappingProxyType({})
        for event in events:
            self.add(event)

    def __len__(self) -> int:
        return len(self._events)

    def __contains__(self, name: object) -> bool:
        return name in self._events

    def add(self, event: Event) -> bool:
        with self._lock:
            if event.name in self._events:
                return False
            updated = dict(self._events)
            updated[event.name] = event
            self._events = MappingProxyType(updated)
        return True

    def remove(self, name: str) -> bool:
        with self._lock:
            if name not in self._events:
                return False
            updated = dict(self._events)
            del updated[name]
            self._events = MappingProxyType(updated)
        return True

    def all(self) -> Mapping[str, Event]:
        """Return a read-only snapshot of every stored event."""

        return self._events

    def _select(self, predicate: Callable[[Event], bool]) -> List[Event]:
        snapshot = self._events
        return [event for event in snapshot.values() if predicate(event)]

    def filter_by_name(self, name: Optional[str] = None) -> List[Event]:
        return self._select(lambda event: name is None or event.name == name)

    def filter_by_type(self, event_type: Optional[str] = None) -> List[Event]:
        return self._select(lambda event: event_type is None or event.type == event_type)

    def filter_by_date(self, start: Optional[datetime] = None) -> List[Event]:
        return self._select(lambda event: start is None or event.start == start)

    def filter_by_location(self, location: Optional[str] = None) -> List[Event]:
        return self._select(lambda event: location is None or event.location == location)

    def filter_by_month(self, year: int, month: int) -> List[Event]:
        return self._select(lambda event: event.start.year == year and event.start.month == month)


__all__ = ["EventStore"]
