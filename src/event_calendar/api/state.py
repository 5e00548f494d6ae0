from __future__ import annotations

from dataclasses import dataclass, field

from ..services import EventService, ServiceContext


@dataclass(slots=True)
class ApiState:
    context: ServiceContext = field(default_factory=ServiceContext)
    calendar: EventService = field(init=False)

    def __post_init__(self) -> None:
        self.calendar = EventService(self.context.store)

    def reset(self) -> None:
        """Drop every stored event by swapping in a fresh context."""

        self.context = ServiceContext(settings=self.context.settings)
        self.calendar = EventService(self.context.store)


api_state = ApiState()
