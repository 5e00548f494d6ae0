from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import ValidationError

from ..domain import Event
from .models import EventPayload
from .registry import register_api
from .serializers import serialize_event, serialize_event_map, serialize_events
from .state import api_state


def _parse_datetime(timestamp: str) -> datetime:
    if not isinstance(timestamp, str):
        raise ValueError(f"Timestamp must be an ISO string, got {timestamp!r}")
    try:
        return datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError as exc:  # noqa: TRY003
        raise ValueError(f"Invalid ISO timestamp: {timestamp}") from exc


def _build_event(**fields: Any) -> Event:
    try:
        return EventPayload(**fields).to_domain()
    except ValidationError as exc:
        raise ValueError(f"Invalid event: {exc.errors(include_url=False)}") from exc


@register_api(
    "add_event",
    description="Add an event; reports added=false when an event with the same name already exists.",
    tags=("write",),
)
def add_event(
    *,
    name: str,
    start: str,
    duration_minutes: int = 0,
    event_type: str = "",
    description: str = "",
    location: str = "",
) -> Dict[str, Any]:
    event = _build_event(
        name=name,
        start=_parse_datetime(start),
        duration_minutes=duration_minutes,
        type=event_type,
        description=description,
        location=location,
    )
    added = api_state.calendar.add_event(event)
    return {"added": added, "event": serialize_event(event)}


@register_api(
    "remove_event",
    description="Remove an event by name; reports removed=false when no such event exists.",
    tags=("write",),
)
def remove_event(name: str) -> Dict[str, Any]:
    removed = api_state.calendar.remove_event(name)
    return {"removed": removed, "name": name}


@register_api(
    "events_by_name",
    description="Return events with the given name. Omit the name to return every event.",
    tags=("read",),
)
def events_by_name(name: Optional[str] = None) -> Dict[str, Any]:
    events = api_state.calendar.get_events_by_name(name)
    return {"name": name, "events": serialize_events(events)}


@register_api(
    "events_by_type",
    description="Return events of the given type. Omit the type to return every event.",
    tags=("read",),
)
def events_by_type(event_type: Optional[str] = None) -> Dict[str, Any]:
    events = api_state.calendar.get_events_by_type(event_type)
    return {"event_type": event_type, "events": serialize_events(events)}


@register_api(
    "events_by_date",
    description="Return events starting exactly at the ISO timestamp. Omit it to return every event.",
    tags=("read",),
)
def events_by_date(start: Optional[str] = None) -> Dict[str, Any]:
    start_dt = _parse_datetime(start) if start is not None else None
    events = api_state.calendar.get_events_by_date(start_dt)
    return {"start": start_dt.isoformat() if start_dt else None, "events": serialize_events(events)}


@register_api(
    "events_by_location",
    description="Return events at the given location. Omit the location to return every event.",
    tags=("read",),
)
def events_by_location(location: Optional[str] = None) -> Dict[str, Any]:
    events = api_state.calendar.get_events_by_location(location)
    return {"location": location, "events": serialize_events(events)}


@register_api(
    "events_for_month",
    description="Return events starting within the given calendar year and month.",
    tags=("read",),
)
def events_for_month(year: int, month: int) -> Dict[str, Any]:
    events = api_state.calendar.get_events_for_month(int(year), int(month))
    return {"year": int(year), "month": int(month), "events": serialize_events(events)}


@register_api(
    "all_events",
    description="Return every stored event keyed by name.",
    tags=("read",),
)
def all_events() -> Dict[str, Any]:
    return {"events": serialize_event_map(api_state.calendar.get_all_events())}
