"""
Listing component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from src.components.collections.models import CollectionSpec
from src.domain.entities import ContentItem, SortOrder

PAGE_SIZE = 12


class ListingPhase(str, Enum):
    """Where the controller is in its load/filter/page cycle."""

    IDLE = "idle"
    LOADED = "loaded"
    FILTERED = "filtered"
    PAGED = "paged"


# --- Input Models ---


@dataclass(frozen=True)
class ListingInput:
    """Input for building one listing page from query parameters."""

    spec: CollectionSpec
    tags: tuple[str, ...] = ()
    sort_order: SortOrder = "newest"
    page: int = 1
    page_size: int = PAGE_SIZE


# --- Output Models ---


@dataclass(frozen=True)
class ListingPage:
    """Snapshot of a listing view: the visible window plus filter state."""

    items: list[ContentItem]
    all_tags: list[str]
    selected_tags: list[str]
    sort_order: SortOrder
    current_page: int
    total_pages: int
    total_items: int
    page_size: int = PAGE_SIZE
    degraded: bool = False

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages
