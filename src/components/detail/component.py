"""
Detail component - Resolve a single content item by slug.

Runs the same fetch + tag-join pipeline as listings with the primary
collection narrowed to slug == input. A fetch failure and an empty result
both end in the same not-found outcome. On a slug collision the first
match wins.
"""

from __future__ import annotations

import logging

from src.components.tagjoin import (
    ContentFetchError,
    FetchWithTagsInput,
    run_fetch_with_tags,
)
from src.core.ports.cms import CMSPort

from .models import DetailOutput, ResolveInput

logger = logging.getLogger(__name__)


async def run_resolve(input_data: ResolveInput, cms: CMSPort) -> DetailOutput:
    """Resolve a slug to one joined item."""
    spec = input_data.spec
    slug = input_data.slug.strip()

    if not slug:
        return DetailOutput(
            kind=spec.kind,
            slug=slug,
            errors=[ContentFetchError(code="slug_required", message="Slug is required", field="slug")],
        )

    result = await run_fetch_with_tags(FetchWithTagsInput(spec=spec, slug=slug), cms)

    if not result.items:
        errors = list(result.errors) or [
            ContentFetchError(
                code="not_found",
                message=f"No {spec.kind} with slug '{slug}'",
                field="slug",
            )
        ]
        return DetailOutput(kind=spec.kind, slug=slug, errors=errors)

    if len(result.items) > 1:
        logger.info("Slug '%s' matches %d %s; using the first", slug, len(result.items), spec.kind)

    return DetailOutput(kind=spec.kind, slug=slug, item=result.items[0])
