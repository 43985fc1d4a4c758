from pydantic import BaseModel

from src.domain.entities import RecordId, SortOrder


# --- Content Items ---
class ContentItemResponse(BaseModel):
    id: RecordId
    slug: str
    title: str
    image: str | None = None
    image_url: str
    date_created: str | None = None
    short_description: str | None = None
    content: str | None = None
    tags: list[str] = []


class ArticleResponse(ContentItemResponse):
    pass


class EventResponse(ContentItemResponse):
    time: str | None = None
    end_time: str | None = None
    location: str | None = None
    fee: str | None = None
    calendar_url: str


# --- Listings ---
class ListingResponse(BaseModel):
    all_tags: list[str]
    selected_tags: list[str]
    sort_order: SortOrder
    current_page: int
    total_pages: int
    total_items: int
    page_size: int
    degraded: bool = False


class ArticleListingResponse(ListingResponse):
    items: list[ArticleResponse]


class EventListingResponse(ListingResponse):
    items: list[EventResponse]
