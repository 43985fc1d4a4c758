"""
Public JSON read API for articles and events.

Listing endpoints take the same view state as the HTML pages:
repeated `tag`, `sort` (newest|oldest) and `page`.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import RedirectResponse

from src.api.deps import (
    get_articles_spec,
    get_cms,
    get_events_spec,
    get_page_context,
    get_page_size,
)
from src.api.schemas import (
    ArticleListingResponse,
    ArticleResponse,
    EventListingResponse,
    EventResponse,
)
from src.components.calendar import event_calendar_url
from src.components.collections import CollectionSpec
from src.components.detail import NotFound, ResolveInput, run_resolve
from src.components.listing import ListingInput, ListingPage, run_listing
from src.components.pages import PageContext, asset_url
from src.core.ports.cms import CMSPort
from src.domain.entities import ContentItem, Event, SortOrder

router = APIRouter()


# --- Serialization ---


def to_article_response(item: ContentItem, ctx: PageContext) -> ArticleResponse:
    return ArticleResponse(
        **item.model_dump(include=set(ArticleResponse.model_fields) - {"image_url"}),
        image_url=asset_url(ctx.public_url, item.image),
    )


def to_event_response(item: Event, ctx: PageContext) -> EventResponse:
    return EventResponse(
        **item.model_dump(include=set(EventResponse.model_fields) - {"image_url", "calendar_url"}),
        image_url=asset_url(ctx.public_url, item.image),
        calendar_url=event_calendar_url(
            item, ctx.calendar_details_template, ctx.calendar_base_url
        ),
    )


def _listing_fields(page: ListingPage) -> dict:
    return {
        "all_tags": page.all_tags,
        "selected_tags": page.selected_tags,
        "sort_order": page.sort_order,
        "current_page": page.current_page,
        "total_pages": page.total_pages,
        "total_items": page.total_items,
        "page_size": page.page_size,
        "degraded": page.degraded,
    }


async def _resolve_or_404(spec: CollectionSpec, slug: str, cms: CMSPort) -> ContentItem:
    result = await run_resolve(ResolveInput(spec=spec, slug=slug), cms)
    try:
        return result.require()
    except NotFound as err:
        raise HTTPException(status_code=404, detail="Content not found") from err


# --- Articles ---


@router.get("/articles", response_model=ArticleListingResponse)
async def list_articles(
    tag: list[str] = Query(default=[]),
    sort: SortOrder = "newest",
    page: int = 1,
    cms: CMSPort = Depends(get_cms),
    spec: CollectionSpec = Depends(get_articles_spec),
    ctx: PageContext = Depends(get_page_context),
    page_size: int = Depends(get_page_size),
) -> ArticleListingResponse:
    """List articles with tag filter, date sort and pagination."""
    result = await run_listing(
        ListingInput(
            spec=spec, tags=tuple(tag), sort_order=sort, page=page, page_size=page_size
        ),
        cms,
    )
    return ArticleListingResponse(
        items=[to_article_response(item, ctx) for item in result.items],
        **_listing_fields(result),
    )


@router.get("/articles/{slug}", response_model=ArticleResponse)
async def get_article(
    slug: str,
    cms: CMSPort = Depends(get_cms),
    spec: CollectionSpec = Depends(get_articles_spec),
    ctx: PageContext = Depends(get_page_context),
) -> ArticleResponse:
    """Get one article by slug."""
    item = await _resolve_or_404(spec, slug, cms)
    return to_article_response(item, ctx)


# --- Events ---


@router.get("/events", response_model=EventListingResponse)
async def list_events(
    tag: list[str] = Query(default=[]),
    sort: SortOrder = "newest",
    page: int = 1,
    cms: CMSPort = Depends(get_cms),
    spec: CollectionSpec = Depends(get_events_spec),
    ctx: PageContext = Depends(get_page_context),
    page_size: int = Depends(get_page_size),
) -> EventListingResponse:
    """List events with tag filter, date sort and pagination."""
    result = await run_listing(
        ListingInput(
            spec=spec, tags=tuple(tag), sort_order=sort, page=page, page_size=page_size
        ),
        cms,
    )
    return EventListingResponse(
        items=[to_event_response(item, ctx) for item in result.items],  # type: ignore[arg-type]
        **_listing_fields(result),
    )


@router.get("/events/{slug}", response_model=EventResponse)
async def get_event(
    slug: str,
    cms: CMSPort = Depends(get_cms),
    spec: CollectionSpec = Depends(get_events_spec),
    ctx: PageContext = Depends(get_page_context),
) -> EventResponse:
    """Get one event by slug."""
    item = await _resolve_or_404(spec, slug, cms)
    return to_event_response(item, ctx)  # type: ignore[arg-type]


@router.get("/events/{slug}/calendar")
async def event_calendar_redirect(
    slug: str,
    cms: CMSPort = Depends(get_cms),
    spec: CollectionSpec = Depends(get_events_spec),
    ctx: PageContext = Depends(get_page_context),
) -> RedirectResponse:
    """Redirect to the add-to-calendar page for an event."""
    item = await _resolve_or_404(spec, slug, cms)
    url = event_calendar_url(item, ctx.calendar_details_template, ctx.calendar_base_url)  # type: ignore[arg-type]
    return RedirectResponse(url=url, status_code=307)
