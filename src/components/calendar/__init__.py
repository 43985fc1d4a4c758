"""
Calendar component - Add-to-calendar links for events.
"""

from .component import build_calendar_url, event_calendar_url, format_calendar_instant
from .models import INVALID_DATE, CalendarLinkInput

__all__ = [
    "build_calendar_url",
    "event_calendar_url",
    "format_calendar_instant",
    "CalendarLinkInput",
    "INVALID_DATE",
]
