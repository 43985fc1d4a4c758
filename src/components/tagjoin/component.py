"""
Tag-join component - Denormalize content items with their tag labels.

Joins a primary content collection with its many-to-many join table and the
tag dictionary:

1. tag_id -> label map from the dictionary (last write wins on duplicate ids)
2. per item, join rows whose content id equals the item id, in join-row order,
   mapped through the dictionary; unresolved ids and empty labels are dropped

Guarantees:
- one output item per input item
- an item's tags only ever hold labels present in the dictionary

Failure policy:
- the three collections are fetched concurrently
- if any fetch fails the whole join degrades to an empty list, the failure is
  logged, and the output carries a JoinDegraded marker
"""

from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from collections.abc import Sequence
from typing import TypeVar

from src.components.collections import fetch_items, fetch_join_rows, fetch_tags
from src.core.ports.cms import CMSError, CMSPort
from src.domain.entities import ContentItem, JoinRow, RecordId, Tag

from .models import (
    ContentFetchError,
    FetchWithTagsInput,
    JoinDegraded,
    TaggedCollectionOutput,
)

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=ContentItem)


# --- Pure Join ---


def build_tag_map(tags: Sequence[Tag]) -> dict[RecordId, str]:
    """Map tag ids to labels; a later duplicate id overwrites an earlier one."""
    tag_map: dict[RecordId, str] = {}
    for tag in tags:
        tag_map[tag.id] = tag.label
    return tag_map


def aggregate(
    items: Sequence[ItemT],
    join_rows: Sequence[JoinRow],
    tags: Sequence[Tag],
) -> list[ItemT]:
    """Attach resolved tag labels to every item."""
    tag_map = build_tag_map(tags)

    tag_ids_by_item: dict[RecordId, list[RecordId]] = defaultdict(list)
    for row in join_rows:
        if row.content_id is not None and row.tag_id is not None:
            tag_ids_by_item[row.content_id].append(row.tag_id)

    joined: list[ItemT] = []
    for item in items:
        labels = [tag_map.get(tag_id, "") for tag_id in tag_ids_by_item.get(item.id, [])]
        joined.append(item.model_copy(update={"tags": [label for label in labels if label]}))
    return joined


# --- Shell ---


async def run_fetch_with_tags(
    input_data: FetchWithTagsInput,
    cms: CMSPort,
) -> TaggedCollectionOutput:
    """Fetch items, join rows and tags concurrently, then join them."""
    spec = input_data.spec

    results = await asyncio.gather(
        fetch_items(cms, spec, slug=input_data.slug),
        fetch_join_rows(cms, spec),
        fetch_tags(cms, spec),
        return_exceptions=True,
    )

    for result in results:
        if isinstance(result, BaseException) and not isinstance(result, CMSError):
            raise result

    failures = [r for r in results if isinstance(r, CMSError)]
    if failures:
        cause = failures[0]
        logger.error("Error fetching %s with tags: %s", spec.kind, cause)
        return TaggedCollectionOutput(
            items=[],
            degraded=JoinDegraded(spec.kind, cause),
            errors=[
                ContentFetchError(
                    code="join_degraded",
                    message=str(failure),
                    field=failure.collection,
                )
                for failure in failures
            ],
        )

    items, join_rows, tags = results
    return TaggedCollectionOutput(items=aggregate(items, join_rows, tags))
