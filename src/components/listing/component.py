"""
Listing component - In-memory filter, sort and pagination of joined content.

Holds the full fetched collection and derives the visible window from it.

State machine:
- any -> loaded (new items arrive)
- loaded|filtered|paged -> filtered (tag toggle, clear, sort toggle)
- loaded|filtered|paged -> paged (go_to_page inside bounds)

Rules:
- Filter: an item passes when no tag is selected, or it shares at least
  one tag with the selection (OR semantics)
- Sort: by date_created timestamp, newest or oldest first; ties keep
  collection order; unparseable dates go last in either order
- Pages: total_pages = max(1, ceil(filtered / page_size)); any filter
  change resets to page 1; go_to_page outside [1, total_pages] is a no-op

Loads are keyed by a request token. A load that is superseded by a newer
one, or that finishes after close(), never touches the controller state.
"""

from __future__ import annotations

import asyncio
import logging
import math
from collections.abc import Awaitable, Callable, Iterable, Sequence
from typing import Generic, TypeVar

from src.components.tagjoin import FetchWithTagsInput, TaggedCollectionOutput, run_fetch_with_tags
from src.core.ports.cms import CMSPort
from src.domain.dates import to_timestamp
from src.domain.entities import ContentItem, SortOrder

from .models import PAGE_SIZE, ListingInput, ListingPage, ListingPhase

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=ContentItem)

Fetch = Callable[[], Awaitable[TaggedCollectionOutput]]


# --- Pure Functions ---


def distinct_tags(items: Iterable[ContentItem]) -> list[str]:
    """Union of all item tags, deduplicated and sorted."""
    return sorted({tag for item in items for tag in item.tags})


def filter_by_tags(items: Sequence[ItemT], selected: Iterable[str]) -> list[ItemT]:
    """Keep items sharing at least one tag with the selection."""
    wanted = set(selected)
    if not wanted:
        return list(items)
    return [item for item in items if wanted.intersection(item.tags)]


def sort_by_date(items: Sequence[ItemT], order: SortOrder) -> list[ItemT]:
    """Order items by date_created; unparseable dates trail in original order."""
    dated: list[tuple[float, ItemT]] = []
    undated: list[ItemT] = []
    for item in items:
        ts = to_timestamp(item.date_created)
        if ts is None:
            undated.append(item)
        else:
            dated.append((ts, item))

    dated.sort(key=lambda pair: pair[0], reverse=(order == "newest"))
    return [item for _, item in dated] + undated


def count_pages(total: int, page_size: int = PAGE_SIZE) -> int:
    return max(1, math.ceil(total / page_size))


def page_window(items: Sequence[ItemT], page: int, page_size: int = PAGE_SIZE) -> list[ItemT]:
    start = (page - 1) * page_size
    return list(items[start : start + page_size])


# --- Controller ---


class ListingController(Generic[ItemT]):
    """
    Listing view state for one page instance.

    Only its own action methods mutate it; nothing is shared between
    instances.
    """

    def __init__(
        self,
        items: Sequence[ItemT] = (),
        page_size: int = PAGE_SIZE,
        on_scroll_top: Callable[[], None] | None = None,
    ) -> None:
        if page_size < 1:
            raise ValueError("page_size must be at least 1")

        self.page_size = page_size
        self.on_scroll_top = on_scroll_top
        self.phase = ListingPhase.IDLE
        self.degraded = False

        self._items: list[ItemT] = []
        self._all_tags: list[str] = []
        self._selected: list[str] = []
        self._sort_order: SortOrder = "newest"
        self._filtered: list[ItemT] = []
        self._current_page = 1

        self._token = 0
        self._inflight: asyncio.Future[TaggedCollectionOutput] | None = None
        self._closed = False

        if items:
            self.set_items(items)

    # --- Read-only view ---

    @property
    def items(self) -> list[ItemT]:
        return list(self._items)

    @property
    def all_tags(self) -> list[str]:
        return list(self._all_tags)

    @property
    def selected_tags(self) -> list[str]:
        return list(self._selected)

    @property
    def sort_order(self) -> SortOrder:
        return self._sort_order

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def filtered_items(self) -> list[ItemT]:
        return list(self._filtered)

    @property
    def total_pages(self) -> int:
        return count_pages(len(self._filtered), self.page_size)

    @property
    def displayed_items(self) -> list[ItemT]:
        return page_window(self._filtered, self._current_page, self.page_size)

    # --- Actions ---

    def set_items(self, items: Sequence[ItemT]) -> None:
        self._items = list(items)
        self._all_tags = distinct_tags(self._items)
        self._refilter()
        self.phase = ListingPhase.LOADED

    def toggle_tag(self, tag: str) -> None:
        if tag in self._selected:
            self._selected.remove(tag)
        else:
            self._selected.append(tag)
        self._refilter()

    def clear_tags(self) -> None:
        self._selected = []
        self._refilter()

    def toggle_sort_order(self) -> None:
        self._sort_order = "oldest" if self._sort_order == "newest" else "newest"
        self._refilter()

    def go_to_page(self, page: int) -> bool:
        """Move to a page; returns False (and changes nothing) when out of range."""
        if page < 1 or page > self.total_pages:
            return False

        self._current_page = page
        self.phase = ListingPhase.PAGED
        if self.on_scroll_top is not None:
            self.on_scroll_top()
        return True

    def snapshot(self) -> ListingPage:
        return ListingPage(
            items=list(self.displayed_items),
            all_tags=self.all_tags,
            selected_tags=self.selected_tags,
            sort_order=self._sort_order,
            current_page=self._current_page,
            total_pages=self.total_pages,
            total_items=len(self._filtered),
            page_size=self.page_size,
            degraded=self.degraded,
        )

    def _refilter(self) -> None:
        filtered = filter_by_tags(self._items, self._selected)
        self._filtered = sort_by_date(filtered, self._sort_order)
        self._current_page = 1
        self.phase = ListingPhase.FILTERED

    # --- Loading ---

    async def load(self, fetch: Fetch) -> bool:
        """
        Run a fetch and install its items if it is still the latest load.

        Starting a load cancels any load still in flight. Returns True when
        the result was applied.
        """
        if self._closed:
            return False

        self._token += 1
        token = self._token

        if self._inflight is not None and not self._inflight.done():
            self._inflight.cancel()

        task = asyncio.ensure_future(fetch())
        self._inflight = task

        try:
            await asyncio.wait({task})
        except asyncio.CancelledError:
            task.cancel()
            raise

        if task.cancelled() or token != self._token or self._closed:
            # A stale load can still have failed before it was cancelled
            if not task.cancelled() and task.exception() is not None:
                logger.debug("Stale listing load (token %s) failed: %r", token, task.exception())
            logger.debug("Discarding stale listing load (token %s)", token)
            return False

        output = task.result()
        self.degraded = output.degraded is not None
        self.set_items(output.items)  # type: ignore[arg-type]
        return True

    def close(self) -> None:
        """Tear down: cancel the in-flight load and ignore any later result."""
        self._closed = True
        if self._inflight is not None and not self._inflight.done():
            self._inflight.cancel()


# --- Shell ---


async def run_listing(input_data: ListingInput, cms: CMSPort) -> ListingPage:
    """Build one listing page: load, apply the requested filters, then page."""
    controller: ListingController[ContentItem] = ListingController(
        page_size=input_data.page_size
    )

    await controller.load(
        lambda: run_fetch_with_tags(FetchWithTagsInput(spec=input_data.spec), cms)
    )

    for tag in dict.fromkeys(input_data.tags):
        controller.toggle_tag(tag)
    if input_data.sort_order != controller.sort_order:
        controller.toggle_sort_order()
    controller.go_to_page(input_data.page)

    return controller.snapshot()
