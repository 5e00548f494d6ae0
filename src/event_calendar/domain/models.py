from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True, slots=True)
class Event:
    """A single calendar entry, identified by its unique ``name``."""

    name: str
    start: datetime
    duration_minutes: int
    type: str = ""
    description: str = ""
    location: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("Event name must be a non-empty string.")
        if not isinstance(self.start, datetime):
            raise ValueError(f"Event start must be a datetime, got {self.start!r}.")
        if isinstance(self.duration_minutes, bool) or not isinstance(self.duration_minutes, int):
            raise ValueError("Event duration_minutes must be an integer.")
        if self.duration_minutes < 0:
            raise ValueError("Event duration_minutes must not be negative.")

    @property
    def ends_at(self) -> datetime:
        return self.start + timedelta(minutes=self.duration_minutes)
