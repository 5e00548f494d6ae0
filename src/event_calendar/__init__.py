"""Concurrent in-memory calendar event store with remote access."""

from __future__ import annotations

from .data import EventStore
from .domain import Event
from .services import CalendarOperations, EventService

__all__ = ["CalendarOperations", "Event", "EventService", "EventStore", "main"]


def main() -> None:
    from .cli import main as cli_main

    cli_main()
