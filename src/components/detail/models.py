"""
Detail component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.components.collections.models import CollectionSpec
from src.components.tagjoin.models import ContentFetchError
from src.domain.entities import ContentItem


class NotFound(Exception):
    """No content item matches the requested slug."""

    def __init__(self, kind: str, slug: str) -> None:
        self.kind = kind
        self.slug = slug
        super().__init__(f"No {kind} with slug '{slug}'")


# --- Input Models ---


@dataclass(frozen=True)
class ResolveInput:
    """Input for resolving one content item by slug."""

    spec: CollectionSpec
    slug: str


# --- Output Models ---


@dataclass(frozen=True)
class DetailOutput:
    """Output containing zero or one resolved item."""

    kind: str
    slug: str
    item: ContentItem | None = None
    errors: list[ContentFetchError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.item is not None

    def require(self) -> ContentItem:
        """Return the item or raise NotFound."""
        if self.item is None:
            raise NotFound(self.kind, self.slug)
        return self.item
