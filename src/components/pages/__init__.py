"""
Pages component - Server-rendered listing and detail pages.
"""

from .component import (
    asset_url,
    listing_href,
    render_card,
    render_detail_page,
    render_document,
    render_listing_page,
    render_not_found_page,
)
from .models import KIND_LABELS, PLACEHOLDER_IMAGE, PageContext

__all__ = [
    "asset_url",
    "listing_href",
    "render_card",
    "render_detail_page",
    "render_document",
    "render_listing_page",
    "render_not_found_page",
    "KIND_LABELS",
    "PLACEHOLDER_IMAGE",
    "PageContext",
]
