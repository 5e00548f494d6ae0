"""Application services orchestrating the event store."""

from __future__ import annotations

from .calendar import CalendarOperations, EventService
from .context import ServiceContext

__all__ = ["CalendarOperations", "EventService", "ServiceContext"]
