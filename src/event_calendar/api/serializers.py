from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping

from ..domain import Event
from .models import EventPayload


def serialize_event(event: Event) -> Dict[str, Any]:
    return EventPayload.from_domain(event).model_dump(mode="json")


def serialize_events(events: Iterable[Event]) -> List[Dict[str, Any]]:
    return [serialize_event(event) for event in events]


def serialize_event_map(events: Mapping[str, Event]) -> Dict[str, Dict[str, Any]]:
    return {name: serialize_event(event) for name, event in events.items()}


def deserialize_event(payload: Mapping[str, Any]) -> Event:
    return EventPayload.model_validate(dict(payload)).to_domain()
