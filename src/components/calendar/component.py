"""
Calendar component - Add-to-calendar links for events.

Builds a Google Calendar "render" URL:

    {base}?action=TEMPLATE&text=..&details=..&location=..&dates=START/END

START and END are UTC instants in basic format (20240701T100000Z).
Pure: no I/O, no clock. An unparseable instant is embedded as the
"Invalid Date" literal instead of failing.
"""

from __future__ import annotations

import logging
from urllib.parse import urlencode

from src.domain.dates import parse_instant
from src.domain.entities import Event
from src.rules.models import GOOGLE_CALENDAR_RENDER_URL

from .models import INVALID_DATE, CalendarLinkInput

logger = logging.getLogger(__name__)


def format_calendar_instant(value: str | None) -> str:
    """ISO string -> 20240701T100000Z, or the Invalid Date literal."""
    dt = parse_instant(value)
    if dt is None:
        logger.warning("Cannot parse calendar instant %r", value)
        return INVALID_DATE
    return dt.strftime("%Y%m%dT%H%M%SZ")


def build_calendar_url(input_data: CalendarLinkInput) -> str:
    params: dict[str, str] = {
        "action": "TEMPLATE",
        "text": input_data.title,
    }
    if input_data.details is not None:
        params["details"] = input_data.details
    params["location"] = input_data.location or ""
    params["dates"] = (
        f"{format_calendar_instant(input_data.start)}/{format_calendar_instant(input_data.end)}"
    )

    return f"{input_data.base_url}?{urlencode(params)}"


def event_calendar_url(
    event: Event,
    details_template: str | None = None,
    base_url: str = GOOGLE_CALENDAR_RENDER_URL,
) -> str:
    """Calendar link for an event; details_template may use {title}."""
    details = details_template.format(title=event.title) if details_template else None
    return build_calendar_url(
        CalendarLinkInput(
            title=event.title,
            start=event.time,
            end=event.end_time,
            location=event.location,
            details=details,
            base_url=base_url,
        )
    )
