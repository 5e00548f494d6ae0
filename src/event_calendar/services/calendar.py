from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Mapping, Optional, Protocol

from ..data import EventStore
from ..domain import Event

logger = logging.getLogger(__name__)


class CalendarOperations(Protocol):
    """Operations a calendar exposes to remote callers.

    ``None`` filter arguments act as wildcards and match every event.
    """

    def add_event(self, event: Event) -> bool: ...

    def remove_event(self, name: str) -> bool: ...

    def get_events_by_name(self, name: Optional[str] = None) -> List[Event]: ...

    def get_events_by_type(self, event_type: Optional[str] = None) -> List[Event]: ...

    def get_events_by_date(self, start: Optional[datetime] = None) -> List[Event]: ...

    def get_events_by_location(self, location: Optional[str] = None) -> List[Event]: ...

    def get_events_for_month(self, year: int, month: int) -> List[Event]: ...

    def get_all_events(self) -> Mapping[str, Event]: ...


@dataclass(slots=True)
class EventService:
    """Remote-callable facade over an :class:`EventStore`."""

    store: EventStore = field(default_factory=EventStore)

    def add_event(self, event: Event) -> bool:
        added = self.store.add(event)
        if added:
            logger.info("Event added: %s at %s", event.name, event.start.isoformat())
        else:
            logger.warning("Event with the same name already exists, not added: %s", event.name)
        return added

    def remove_event(self, name: str) -> bool:
        removed = self.store.remove(name)
        if removed:
            logger.info("Event removed: %s", name)
        else:
            logger.warning("Event not found, nothing removed: %s", name)
        return removed

    def get_events_by_name(self, name: Optional[str] = None) -> List[Event]:
        events = self.store.filter_by_name(name)
        logger.debug("Events with name %r: %d", name, len(events))
        return events

    def get_events_by_type(self, event_type: Optional[str] = None) -> List[Event]:
        events = self.store.filter_by_type(event_type)
        logger.debug("Events with type %r: %d", event_type, len(events))
        return events

    def get_events_by_date(self, start: Optional[datetime] = None) -> List[Event]:
        events = self.store.filter_by_date(start)
        logger.debug("Events starting at %s: %d", start, len(events))
        return events

    def get_events_by_location(self, location: Optional[str] = None) -> List[Event]:
        events = self.store.filter_by_location(location)
        logger.debug("Events at %r: %d", location, len(events))
        return events

    def get_events_for_month(self, year: int, month: int) -> List[Event]:
        events = self.store.filter_by_month(year, month)
        logger.debug("Events for %02d/%d: %d", month, year, len(events))
        return events

    def get_all_events(self) -> Mapping[str, Event]:
        events = self.store.all()
        logger.debug("All events: %d", len(events))
        return events
