from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ..domain import Event


class EventPayload(BaseModel):
    """Wire representation of an :class:`Event`."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(min_length=1)
    start: datetime
    duration_minutes: int = Field(default=0, ge=0)
    type: str = Field(default="")
    description: str = Field(default="")
    location: str = Field(default="")

    @classmethod
    def from_domain(cls, event: Event) -> "EventPayload":
        return cls(
            name=event.name,
            start=event.start,
            duration_minutes=event.duration_minutes,
            type=event.type,
            description=event.description,
            location=event.location,
        )

    def to_domain(self) -> Event:
        return Event(
            name=self.name,
            start=self.start,
            duration_minutes=self.duration_minutes,
            type=self.type,
            description=self.description,
            location=self.location,
        )
