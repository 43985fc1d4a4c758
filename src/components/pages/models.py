"""
Pages component - Rendering configuration.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import ContentKind, SortOrder
from src.rules.models import GOOGLE_CALENDAR_RENDER_URL, Rules

PLACEHOLDER_IMAGE = "/placeholder.svg"
MAX_CARD_TAGS = 2


@dataclass(frozen=True)
class KindLabels:
    """Display words for one content kind."""

    plural: str
    badge: str
    empty_title: str
    sort_labels: dict[SortOrder, str]


KIND_LABELS: dict[ContentKind, KindLabels] = {
    "articles": KindLabels(
        plural="Articles",
        badge="Article",
        empty_title="No articles found",
        sort_labels={"newest": "Newest First", "oldest": "Oldest First"},
    ),
    "events": KindLabels(
        plural="Events",
        badge="Event",
        empty_title="No events found",
        sort_labels={"newest": "Upcoming First", "oldest": "Later Events First"},
    ),
}


@dataclass(frozen=True)
class PageContext:
    """Site-level settings the templates need."""

    public_url: str
    calendar_base_url: str = GOOGLE_CALENDAR_RENDER_URL
    calendar_details_template: str | None = None

    @classmethod
    def from_rules(cls, rules: Rules) -> PageContext:
        return cls(
            public_url=rules.cms.public_url,
            calendar_base_url=rules.calendar.base_url,
            calendar_details_template=rules.calendar.details_template,
        )
