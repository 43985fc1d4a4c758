"""
Calendar component input models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.rules.models import GOOGLE_CALENDAR_RENDER_URL

# Literal embedded when an instant cannot be parsed
INVALID_DATE = "Invalid Date"


@dataclass(frozen=True)
class CalendarLinkInput:
    """Input for building an add-to-calendar link."""

    title: str
    start: str | None
    end: str | None
    location: str | None = None
    details: str | None = None
    base_url: str = GOOGLE_CALENDAR_RENDER_URL
