"""Domain models for the event calendar."""

from __future__ import annotations

from .models import Event

__all__ = ["Event"]
