"""
Tests for CMS date parsing and display formats.
"""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from src.domain.dates import (
    format_clock,
    format_day,
    format_long_date,
    format_short_date,
    parse_instant,
    to_timestamp,
)


class TestParseInstant:
    """ISO strings to aware UTC datetimes."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2024-07-01T10:00:00Z", datetime(2024, 7, 1, 10, 0, tzinfo=UTC)),
            ("2024-07-01T12:00:00+02:00", datetime(2024, 7, 1, 10, 0, tzinfo=UTC)),
            ("2024-07-01T10:00:00", datetime(2024, 7, 1, 10, 0, tzinfo=UTC)),
            ("2024-07-01", datetime(2024, 7, 1, tzinfo=UTC)),
        ],
    )
    def test_parses_iso_variants(self, value: str, expected: datetime) -> None:
        assert parse_instant(value) == expected

    @pytest.mark.parametrize("value", [None, "", "soon", "2024-13-01"])
    def test_unparseable_is_none(self, value: str | None) -> None:
        assert parse_instant(value) is None
        assert to_timestamp(value) is None

    def test_timestamp_orders_offsets(self) -> None:
        earlier = to_timestamp("2024-01-01T10:00:00+02:00")
        later = to_timestamp("2024-01-01T09:00:00Z")

        assert earlier is not None and later is not None
        assert earlier < later


class TestFormats:
    """Display formats used on cards and detail pages."""

    def test_short_date(self) -> None:
        assert format_short_date("2024-07-01T10:00:00Z") == "Jul 1, 2024"

    def test_long_date(self) -> None:
        assert format_long_date("2024-12-25T00:00:00Z") == "December 25, 2024"

    def test_clock_and_day(self) -> None:
        assert format_clock("2024-07-01T09:05:00Z") == "09:05"
        assert format_day("2024-07-01T09:05:00Z") == "2024/07/01"

    def test_unparseable_renders_empty(self) -> None:
        assert format_short_date(None) == ""
        assert format_long_date("bad") == ""
        assert format_clock("bad") == ""
        assert format_day(None) == ""
