"""
Collections component - Typed fetchers for CMS collections.
"""

from .component import fetch_items, fetch_join_rows, fetch_tags
from .models import ARTICLES, EVENTS, CollectionSpec

__all__ = [
    # Fetchers
    "fetch_items",
    "fetch_join_rows",
    "fetch_tags",
    # Models
    "CollectionSpec",
    "ARTICLES",
    "EVENTS",
]
