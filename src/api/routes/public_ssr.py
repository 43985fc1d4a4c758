"""
Public SSR Routes - Server-side rendered listing and detail pages.

Wires the listing, detail and pages components together. Each request
fetches fresh from the CMS; nothing is cached between requests.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse, RedirectResponse

from src.api.deps import (
    get_articles_spec,
    get_cms,
    get_events_spec,
    get_page_context,
    get_page_size,
)
from src.components.collections import CollectionSpec
from src.components.detail import ResolveInput, run_resolve
from src.components.listing import ListingInput, run_listing
from src.components.pages import (
    PageContext,
    render_detail_page,
    render_listing_page,
    render_not_found_page,
)
from src.core.ports.cms import CMSPort
from src.domain.entities import SortOrder

router = APIRouter()


async def _listing(
    spec: CollectionSpec,
    tags: list[str],
    sort: SortOrder,
    page: int,
    cms: CMSPort,
    ctx: PageContext,
    page_size: int,
) -> HTMLResponse:
    result = await run_listing(
        ListingInput(
            spec=spec, tags=tuple(tags), sort_order=sort, page=page, page_size=page_size
        ),
        cms,
    )
    return HTMLResponse(content=render_listing_page(spec.kind, result, ctx))


async def _detail(spec: CollectionSpec, slug: str, cms: CMSPort, ctx: PageContext) -> HTMLResponse:
    result = await run_resolve(ResolveInput(spec=spec, slug=slug), cms)
    if result.item is None:
        return HTMLResponse(content=render_not_found_page(spec.kind, slug), status_code=404)
    return HTMLResponse(content=render_detail_page(spec.kind, result.item, ctx))


# --- SSR Endpoints ---


@router.get("/", include_in_schema=False)
def ssr_home() -> RedirectResponse:
    return RedirectResponse(url="/articles", status_code=307)


@router.get("/articles", response_class=HTMLResponse, summary="Articles listing")
async def ssr_articles(
    tag: list[str] = Query(default=[]),
    sort: SortOrder = "newest",
    page: int = 1,
    cms: CMSPort = Depends(get_cms),
    spec: CollectionSpec = Depends(get_articles_spec),
    ctx: PageContext = Depends(get_page_context),
    page_size: int = Depends(get_page_size),
) -> HTMLResponse:
    return await _listing(spec, tag, sort, page, cms, ctx, page_size)


@router.get("/articles/{slug}", response_class=HTMLResponse, summary="Article page")
async def ssr_article(
    slug: str,
    cms: CMSPort = Depends(get_cms),
    spec: CollectionSpec = Depends(get_articles_spec),
    ctx: PageContext = Depends(get_page_context),
) -> HTMLResponse:
    return await _detail(spec, slug, cms, ctx)


@router.get("/events", response_class=HTMLResponse, summary="Events listing")
async def ssr_events(
    tag: list[str] = Query(default=[]),
    sort: SortOrder = "newest",
    page: int = 1,
    cms: CMSPort = Depends(get_cms),
    spec: CollectionSpec = Depends(get_events_spec),
    ctx: PageContext = Depends(get_page_context),
    page_size: int = Depends(get_page_size),
) -> HTMLResponse:
    return await _listing(spec, tag, sort, page, cms, ctx, page_size)


@router.get("/events/{slug}", response_class=HTMLResponse, summary="Event page")
async def ssr_event(
    slug: str,
    cms: CMSPort = Depends(get_cms),
    spec: CollectionSpec = Depends(get_events_spec),
    ctx: PageContext = Depends(get_page_context),
) -> HTMLResponse:
    return await _detail(spec, slug, cms, ctx)
