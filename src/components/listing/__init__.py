"""
Listing component - Filterable, sortable, paginated content listings.
"""

from .component import (
    ListingController,
    count_pages,
    distinct_tags,
    filter_by_tags,
    page_window,
    run_listing,
    sort_by_date,
)
from .models import PAGE_SIZE, ListingInput, ListingPage, ListingPhase

__all__ = [
    # Entry points
    "run_listing",
    "ListingController",
    # Pure helpers
    "count_pages",
    "distinct_tags",
    "filter_by_tags",
    "page_window",
    "sort_by_date",
    # Models
    "PAGE_SIZE",
    "ListingInput",
    "ListingPage",
    "ListingPhase",
]
