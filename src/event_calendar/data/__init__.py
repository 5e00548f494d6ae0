"""Data access layer."""

from __future__ import annotations

from .event_store import EventStore

__all__ = ["EventStore"]
