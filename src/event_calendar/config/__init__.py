"""Configuration models and helpers."""

from __future__ import annotations

from .settings import (
    DATA_DIR,
    AppSettings,
    ClientSettings,
    LoggingSettings,
    McpSettings,
    ServerSettings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "ClientSettings",
    "DATA_DIR",
    "LoggingSettings",
    "McpSettings",
    "ServerSettings",
    "get_settings",
]
