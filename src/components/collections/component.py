"""
Collections component - Typed collection fetchers.

Reads raw CMS records through a CMSPort and converts them into domain
records. One fetcher per collection role:

- fetch_items: primary content (articles or events), optionally by slug
- fetch_join_rows: the content-to-tag join table
- fetch_tags: the tag dictionary

Records are converted one at a time. A record that does not fit the
domain model is skipped with a warning; its siblings are kept. Only a
failed read (NetworkError, UpstreamError) fails the whole fetch.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from src.core.ports.cms import CMSPort, CMSQuery, Record
from src.domain.entities import ITEM_MODELS, ContentItem, JoinRow, Tag

from .models import CollectionSpec

logger = logging.getLogger(__name__)


async def fetch_items(
    cms: CMSPort,
    spec: CollectionSpec,
    slug: str | None = None,
) -> list[ContentItem]:
    """Fetch primary content items, narrowed to one slug when given."""
    query = CMSQuery(field="slug", equals=slug) if slug is not None else None
    records = await cms.read_items(spec.items, query)

    model = ITEM_MODELS[spec.kind]
    items: list[ContentItem] = []
    for r in records:
        try:
            items.append(model.model_validate(_without_tags(r)))
        except ValidationError as e:
            _skip(spec.items, r, e)
    return items


async def fetch_join_rows(cms: CMSPort, spec: CollectionSpec) -> list[JoinRow]:
    """Fetch the join table, mapped onto (content_id, tag_id) rows."""
    records = await cms.read_items(spec.join)

    rows: list[JoinRow] = []
    for r in records:
        try:
            rows.append(
                JoinRow(
                    content_id=r.get(spec.join_content_field),
                    tag_id=r.get(spec.join_tag_field),
                )
            )
        except ValidationError as e:
            _skip(spec.join, r, e)
    return rows


async def fetch_tags(cms: CMSPort, spec: CollectionSpec) -> list[Tag]:
    """Fetch the tag dictionary."""
    records = await cms.read_items(spec.tags)

    tags: list[Tag] = []
    for r in records:
        if r.get("id") is None:
            continue
        try:
            tags.append(Tag(id=r["id"], label=r.get(spec.tag_label_field) or ""))
        except ValidationError as e:
            _skip(spec.tags, r, e)
    return tags


def _skip(collection: str, record: Record, error: ValidationError) -> None:
    logger.warning(
        "Skipping malformed %s record %r: %s",
        collection,
        record.get("id"),
        error.errors(include_url=False),
    )


def _without_tags(record: Record) -> Record:
    # The CMS exposes an alias field "tags" holding join ids; labels come from the join.
    return {k: v for k, v in record.items() if k != "tags"}
