from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import httpx

from ..api.serializers import deserialize_event
from ..config import get_settings
from ..domain import Event

logger = logging.getLogger(__name__)


class CalendarTransportError(RuntimeError):
    """Raised when a call cannot reach the service or the service rejects it."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ServiceLookupError(CalendarTransportError):
    """Raised when the server at the URL is not the expected calendar service."""


class CalendarClient:
    """HTTP client exposing the same operations as :class:`EventService`.

    Duplicate names and missing events come back as ``False``; only transport
    problems raise :class:`CalendarTransportError`.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        service_name: Optional[str] = None,
        http: Optional[httpx.Client] = None,
    ) -> None:
        settings = get_settings()
        self.service_name = service_name or settings.server.service_name
        self._owns_http = http is None
        self._http = http or httpx.Client(
            base_url=base_url or settings.client.base_url,
            timeout=timeout if timeout is not None else settings.client.timeout_seconds,
        )

    def __enter__(self) -> "CalendarClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = self._http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise CalendarTransportError(f"{method} {path} failed: {exc}") from exc
        if response.is_error:
            try:
                detail = response.json().get("detail", response.text)
            except ValueError:
                detail = response.text
            raise CalendarTransportError(
                f"{method} {path} returned {response.status_code}: {detail}",
                status_code=response.status_code,
            )
        return response.json()

    def _call(self, function_name: str, /, **arguments: Any) -> Dict[str, Any]:
        payload = self._request("POST", f"/api/functions/{function_name}", json={"arguments": arguments})
        return payload["result"]

    def _events(self, result: Dict[str, Any]) -> List[Event]:
        return [deserialize_event(item) for item in result["events"]]

    def lookup(self) -> Dict[str, Any]:
        health = self._request("GET", "/health")
        if health.get("service") != self.service_name:
            raise ServiceLookupError(
                f"Expected service {self.service_name!r}, found {health.get('service')!r}."
            )
        logger.debug("Located %s with %s events", self.service_name, health.get("events"))
        return health

    def add_event(self, event: Event) -> bool:
        result = self._call(
            "add_event",
            name=event.name,
            start=event.start.isoformat(),
            duration_minutes=event.duration_minutes,
            event_type=event.type,
            description=event.description,
            location=event.location,
        )
        return bool(result["added"])

    def remove_event(self, name: str) -> bool:
        return bool(self._call("remove_event", name=name)["removed"])

    def get_events_by_name(self, name: Optional[str] = None) -> List[Event]:
        return self._events(self._call("events_by_name", name=name))

    def get_events_by_type(self, event_type: Optional[str] = None) -> List[Event]:
        return self._events(self._call("events_by_type", event_type=event_type))

    def get_events_by_date(self, start: Optional[datetime] = None) -> List[Event]:
        timestamp = start.isoformat() if start is not None else None
        return self._events(self._call("events_by_date", start=timestamp))

    def get_events_by_location(self, location: Optional[str] = None) -> List[Event]:
        return self._events(self._call("events_by_location", location=location))

    def get_events_for_month(self, year: int, month: int) -> List[Event]:
        return self._events(self._call("events_for_month", year=year, month=month))

    def get_all_events(self) -> Dict[str, Event]:
        result = self._call("all_events")
        return {name: deserialize_event(item) for name, item in result["events"].items()}
