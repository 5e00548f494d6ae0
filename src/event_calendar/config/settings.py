from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from platformdirs import user_data_dir

load_dotenv()

APP_NAME = "Event Calendar"
APP_AUTHOR = "EventCalendar"
DATA_DIR = Path(user_data_dir(APP_NAME, APP_AUTHOR))


@dataclass(frozen=True)
class ServerSettings:
    host: str
    port: int
    service_name: str

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"


@dataclass(frozen=True)
class McpSettings:
    host: str
    port: int


@dataclass(frozen=True)
class ClientSettings:
    base_url: str
    timeout_seconds: float


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    log_dir: Path

    @property
    def log_file(self) -> Path:
        return self.log_dir / "event_calendar.log"


@dataclass(frozen=True)
class AppSettings:
    server: ServerSettings
    mcp: McpSettings
    client: ClientSettings
    logging: LoggingSettings


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    server = ServerSettings(
        host=os.getenv("EVENT_CALENDAR_HOST", "127.0.0.1"),
        port=_int_from_env("EVENT_CALENDAR_PORT", 8000),
        service_name=os.getenv("EVENT_CALENDAR_SERVICE_NAME", "CalendarService"),
    )

    mcp = McpSettings(
        host=os.getenv("EVENT_CALENDAR_MCP_HOST", "127.0.0.1"),
        port=_int_from_env("EVENT_CALENDAR_MCP_PORT", 8765),
    )

    client = ClientSettings(
        base_url=os.getenv("EVENT_CALENDAR_URL", server.base_url),
        timeout_seconds=_float_from_env("EVENT_CALENDAR_TIMEOUT_SECONDS", 10.0),
    )

    logging = LoggingSettings(
        level=os.getenv("EVENT_CALENDAR_LOG_LEVEL", "INFO").upper(),
        log_dir=Path(os.getenv("EVENT_CALENDAR_LOG_DIR") or DATA_DIR),
    )

    return AppSettings(server=server, mcp=mcp, client=client, logging=logging)
