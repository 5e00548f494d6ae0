from __future__ import annotations

from dataclasses import dataclass, field

from ..config import AppSettings, get_settings
from ..data import EventStore


@dataclass(slots=True)
class ServiceContext:
    """Shared settings and the process-wide event store."""

    settings: AppSettings = field(default_factory=get_settings)
    store: EventStore = field(default_factory=EventStore)

    @property
    def service_name(self) -> str:
        return self.settings.server.service_name
