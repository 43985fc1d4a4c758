"""
Tag-join component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.components.collections.models import CollectionSpec
from src.domain.entities import ContentItem

# --- Errors ---


class JoinDegraded(Exception):
    """One or more of the three collections behind a join failed to fetch."""

    def __init__(self, kind: str, cause: Exception) -> None:
        self.kind = kind
        self.cause = cause
        super().__init__(f"Join for {kind} degraded: {cause}")


@dataclass(frozen=True)
class ContentFetchError:
    """Content fetch error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class FetchWithTagsInput:
    """Input for fetching a content kind joined with its tag labels."""

    spec: CollectionSpec
    slug: str | None = None


# --- Output Models ---


@dataclass(frozen=True)
class TaggedCollectionOutput:
    """
    Joined items, or an empty list plus the reason the join degraded.

    `degraded is None` means the collection is genuinely what the CMS holds,
    even when empty.
    """

    items: list[ContentItem]
    degraded: JoinDegraded | None = None
    errors: list[ContentFetchError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.degraded is None
