"""
Pages component - Server-rendered listing and detail pages.

Pure functions from joined content to HTML strings. No I/O; the HTTP
routes fetch the data and pass it in.

Listing pages carry their whole view state in the query string
(repeated `tag`, `sort`, `page`), so every control is a plain link.
"""

from __future__ import annotations

import html
from collections.abc import Sequence
from urllib.parse import urlencode

from src.components.calendar import event_calendar_url
from src.components.listing import ListingPage
from src.domain.dates import format_clock, format_day, format_long_date, format_short_date
from src.domain.entities import ContentItem, ContentKind, Event, SortOrder

from .models import KIND_LABELS, MAX_CARD_TAGS, PLACEHOLDER_IMAGE, PageContext


def _e(value: object) -> str:
    return html.escape("" if value is None else str(value))


# --- URLs ---


def asset_url(public_url: str, image: str | None) -> str:
    """Absolute URL of a CMS asset, or the placeholder image."""
    if not image:
        return PLACEHOLDER_IMAGE
    return f"{public_url.rstrip('/')}/assets/{image}"


def listing_href(
    kind: ContentKind,
    tags: Sequence[str] = (),
    sort_order: SortOrder = "newest",
    page: int = 1,
) -> str:
    """Link to a listing view; defaults are left out of the query string."""
    params: list[tuple[str, str]] = [("tag", tag) for tag in tags]
    if sort_order != "newest":
        params.append(("sort", sort_order))
    if page != 1:
        params.append(("page", str(page)))

    query = urlencode(params)
    return f"/{kind}?{query}" if query else f"/{kind}"


def _toggled(selected: Sequence[str], tag: str) -> list[str]:
    if tag in selected:
        return [t for t in selected if t != tag]
    return [*selected, tag]


# --- Document ---


def render_document(title: str, body: str) -> str:
    """Complete HTML page."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>{_e(title)}</title>
</head>
<body>
    {body}
</body>
</html>"""


# --- Listing ---


def render_filters(kind: ContentKind, page: ListingPage) -> str:
    labels = KIND_LABELS[kind]
    selected = page.selected_tags
    count = len(selected)

    summary = "Filter by tags" if count == 0 else f"{count} tag{'s' if count > 1 else ''} selected"
    parts = [f'<div class="filters"><details class="tag-filter"><summary>{summary}</summary>']

    if selected:
        clear_href = listing_href(kind, (), page.sort_order)
        parts.append(f'<a class="clear-tags" href="{_e(clear_href)}">Clear all</a>')

    parts.append("<ul>")
    for tag in page.all_tags:
        href = listing_href(kind, _toggled(selected, tag), page.sort_order)
        checked = ' aria-checked="true"' if tag in selected else ' aria-checked="false"'
        parts.append(f'<li><a role="checkbox"{checked} href="{_e(href)}">{_e(tag)}</a></li>')
    parts.append("</ul></details>")

    other: SortOrder = "oldest" if page.sort_order == "newest" else "newest"
    sort_href = listing_href(kind, selected, other)
    parts.append(
        f'<a class="sort-toggle" href="{_e(sort_href)}">{labels.sort_labels[page.sort_order]}</a>'
    )

    if selected:
        parts.append('<div class="selected-tags">')
        for tag in selected:
            href = listing_href(kind, _toggled(selected, tag), page.sort_order)
            parts.append(
                f'<span class="chip">{_e(tag)} '
                f'<a href="{_e(href)}" aria-label="Remove {_e(tag)}">&times;</a></span>'
            )
        parts.append("</div>")

    parts.append("</div>")
    return "".join(parts)


def render_card(kind: ContentKind, item: ContentItem, ctx: PageContext) -> str:
    labels = KIND_LABELS[kind]
    href = f"/{kind}/{item.slug}"

    tag_chips = "".join(f'<span class="tag">{_e(tag)}</span>' for tag in item.tags[:MAX_CARD_TAGS])
    if len(item.tags) > MAX_CARD_TAGS:
        tag_chips += f'<span class="tag">+{len(item.tags) - MAX_CARD_TAGS}</span>'

    if isinstance(item, Event):
        date_text = format_short_date(item.time)
        calendar_href = event_calendar_url(
            item, ctx.calendar_details_template, ctx.calendar_base_url
        )
        meta = (
            f'<div class="event-meta"><span class="time">{format_clock(item.time)} - '
            f'{format_clock(item.end_time)}</span>'
            f'<span class="location">{_e(item.location)}</span></div>'
        )
        action = (
            f'<a class="add-to-calendar" href="{_e(calendar_href)}" target="_blank" '
            f'rel="noopener noreferrer">Add to Calendar</a>'
        )
    else:
        date_text = format_short_date(item.date_created)
        meta = ""
        action = ""

    return (
        f'<article class="card">'
        f'<a href="{_e(href)}">'
        f'<img src="{_e(asset_url(ctx.public_url, item.image))}" alt="{_e(item.title)}" />'
        f'<span class="badge">{labels.badge}</span>'
        f'<span class="date">{date_text}</span>'
        f'<div class="tags">{tag_chips}</div>'
        f"<h2>{_e(item.title)}</h2>"
        f"{meta}"
        f"</a>"
        f"{action}"
        f"</article>"
    )


def render_pagination(kind: ContentKind, page: ListingPage) -> str:
    if page.total_items == 0 or page.total_pages <= 1:
        return ""

    def href(n: int) -> str:
        return _e(listing_href(kind, page.selected_tags, page.sort_order, n))

    parts = ['<nav class="pagination">']
    if page.has_previous:
        parts.append(f'<a class="prev" href="{href(page.current_page - 1)}">Previous</a>')
    for n in range(1, page.total_pages + 1):
        if n == page.current_page:
            parts.append(f'<span class="page current" aria-current="page">{n}</span>')
        else:
            parts.append(f'<a class="page" href="{href(n)}">{n}</a>')
    if page.has_next:
        parts.append(f'<a class="next" href="{href(page.current_page + 1)}">Next</a>')
    parts.append("</nav>")
    return "".join(parts)


def render_listing_page(kind: ContentKind, page: ListingPage, ctx: PageContext) -> str:
    labels = KIND_LABELS[kind]

    if page.items:
        cards = "".join(render_card(kind, item, ctx) for item in page.items)
        content = f'<div class="cards">{cards}</div>'
    else:
        content = (
            f'<div class="empty"><h3>{labels.empty_title}</h3>'
            f"<p>Try adjusting your filters to find what you&#x27;re looking for.</p></div>"
        )

    body = (
        f"<main><h1>{labels.plural}</h1>"
        f"{render_filters(kind, page)}"
        f"{content}"
        f"{render_pagination(kind, page)}"
        f"</main>"
    )
    return render_document(labels.plural, body)


# --- Detail ---


def render_detail_page(kind: ContentKind, item: ContentItem, ctx: PageContext) -> str:
    labels = KIND_LABELS[kind]

    breadcrumbs = (
        '<nav class="breadcrumbs"><a href="/">Home</a> &rsaquo; '
        f'<a href="/{kind}">{labels.plural}</a> &rsaquo; '
        f"<span>{_e(item.title)}</span></nav>"
    )
    tags = "".join(f'<span class="tag">{_e(tag)}</span>' for tag in item.tags)

    header = (
        f'<header style="background-image: url(\'{_e(asset_url(ctx.public_url, item.image))}\')">'
        f"{breadcrumbs}"
        f"<h1>{_e(item.title)}</h1>"
        f'<div class="posted">{format_long_date(item.date_created)}</div>'
        f'<div class="tags">{tags}</div>'
        f"</header>"
    )

    event_card = ""
    if isinstance(item, Event):
        calendar_href = event_calendar_url(
            item, ctx.calendar_details_template, ctx.calendar_base_url
        )
        event_card = (
            '<section class="event-details">'
            f'<div class="dates">{format_day(item.time)} - {format_day(item.end_time)}</div>'
            f'<div class="time">{format_clock(item.time)} - {format_clock(item.end_time)}</div>'
            f'<div class="location">{_e(item.location)}</div>'
            f'<div class="fee">{_e(item.fee)}</div>'
            f'<a class="add-to-calendar" href="{_e(calendar_href)}" target="_blank" '
            f'rel="noopener noreferrer">Add to Calendar</a>'
            "</section>"
        )

    # Body HTML is authored in the CMS and rendered as-is
    prose = (
        '<section class="prose">'
        f'<p class="lead">{_e(item.short_description)}</p>'
        f"<div>{item.content or ''}</div>"
        "</section>"
    )

    return render_document(item.title, f"<main>{header}{event_card}{prose}</main>")


def render_not_found_page(kind: ContentKind, slug: str) -> str:
    labels = KIND_LABELS[kind]
    body = (
        f"<main><h1>Not found</h1>"
        f"<p>Nothing is published at /{kind}/{_e(slug)}.</p>"
        f'<a href="/{kind}">Back to {labels.plural}</a></main>'
    )
    return render_document("Not found", body)
