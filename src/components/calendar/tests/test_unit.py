"""
Calendar component unit tests.
"""

from __future__ import annotations

from urllib.parse import parse_qs, urlparse

from src.components.calendar import (
    INVALID_DATE,
    CalendarLinkInput,
    build_calendar_url,
    event_calendar_url,
    format_calendar_instant,
)
from src.domain.entities import Event


def query(url: str) -> dict[str, list[str]]:
    return parse_qs(urlparse(url).query)


class TestFormatInstant:
    def test_basic_utc_format(self) -> None:
        assert format_calendar_instant("2024-07-01T10:00:00Z") == "20240701T100000Z"

    def test_drops_fractional_seconds(self) -> None:
        assert format_calendar_instant("2024-07-01T10:00:00.123Z") == "20240701T100000Z"

    def test_converts_offsets_to_utc(self) -> None:
        assert format_calendar_instant("2024-07-01T12:30:00+02:00") == "20240701T103000Z"

    def test_naive_read_as_utc(self) -> None:
        assert format_calendar_instant("2024-07-01T10:00:00") == "20240701T100000Z"

    def test_invalid_embeds_literal(self) -> None:
        assert format_calendar_instant("not a date") == INVALID_DATE
        assert format_calendar_instant(None) == INVALID_DATE


class TestBuildCalendarUrl:
    def test_fair_in_the_park(self) -> None:
        url = build_calendar_url(
            CalendarLinkInput(
                title="Fair",
                start="2024-07-01T10:00:00Z",
                end="2024-07-01T12:00:00Z",
                location="Park",
            )
        )
        params = query(url)

        assert url.startswith("https://calendar.google.com/calendar/render?")
        assert params["action"] == ["TEMPLATE"]
        assert params["dates"] == ["20240701T100000Z/20240701T120000Z"]
        assert params["text"] == ["Fair"]
        assert params["location"] == ["Park"]
        assert "details" not in params

    def test_parameter_order(self) -> None:
        url = build_calendar_url(
            CalendarLinkInput(
                title="Fair",
                start="2024-07-01T10:00:00Z",
                end="2024-07-01T12:00:00Z",
                location="Park",
                details="More",
            )
        )
        keys = [pair.split("=")[0] for pair in urlparse(url).query.split("&")]

        assert keys == ["action", "text", "details", "location", "dates"]

    def test_values_are_encoded(self) -> None:
        url = build_calendar_url(
            CalendarLinkInput(
                title="Tea & Talk",
                start="2024-07-01T10:00:00Z",
                end="2024-07-01T12:00:00Z",
                location="Main Hall, 2nd floor",
            )
        )

        assert "text=Tea+%26+Talk" in url
        assert "dates=20240701T100000Z%2F20240701T120000Z" in url
        assert query(url)["location"] == ["Main Hall, 2nd floor"]

    def test_unparseable_dates_do_not_fail(self) -> None:
        url = build_calendar_url(CalendarLinkInput(title="Fair", start="soon", end=None))

        assert query(url)["dates"] == ["Invalid Date/Invalid Date"]


class TestEventCalendarUrl:
    def test_uses_event_fields_and_details_template(self) -> None:
        event = Event(
            id=1,
            slug="fair",
            title="Fair",
            time="2024-07-01T10:00:00Z",
            end_time="2024-07-01T12:00:00Z",
            location="Park",
        )
        params = query(event_calendar_url(event, "{title} - Learn more at our website."))

        assert params["text"] == ["Fair"]
        assert params["details"] == ["Fair - Learn more at our website."]
        assert params["dates"] == ["20240701T100000Z/20240701T120000Z"]

    def test_custom_base_url(self) -> None:
        event = Event(id=1, slug="fair", title="Fair", time="2024-07-01T10:00:00Z")
        url = event_calendar_url(event, base_url="https://cal.example.com/add")

        assert url.startswith("https://cal.example.com/add?")
