"""
Collections component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import ContentKind
from src.rules.models import Rules


@dataclass(frozen=True)
class CollectionSpec:
    """Names of the three CMS collections behind one content kind."""

    kind: ContentKind
    items: str
    join: str
    join_content_field: str
    tags: str = "tags"
    join_tag_field: str = "tags_id"
    tag_label_field: str = "tag"

    @classmethod
    def from_rules(cls, rules: Rules, kind: ContentKind) -> CollectionSpec:
        collections = rules.cms.collections
        content = collections.articles if kind == "articles" else collections.events
        return cls(
            kind=kind,
            items=content.items,
            join=content.join,
            join_content_field=content.join_content_field,
            tags=collections.tags.collection,
            join_tag_field=collections.tags.join_tag_field,
            tag_label_field=collections.tags.label_field,
        )


ARTICLES = CollectionSpec(
    kind="articles",
    items="articles",
    join="articles_tags",
    join_content_field="articles_id",
)

EVENTS = CollectionSpec(
    kind="events",
    items="events",
    join="events_tags",
    join_content_field="events_id",
)
