from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# --- Enums / Literals ---
ContentKind = Literal["articles", "events"]
SortOrder = Literal["newest", "oldest"]

# CMS primary keys are integers in practice; string keys are kept as-is.
RecordId = int | str


def _as_text(value: Any) -> Any:
    # CMS fields are loosely typed; a numeric fee or title is still text to us
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return value

# --- Tags ---

class Tag(BaseModel):
    id: RecordId
    label: str = ""

    @field_validator("label", mode="before")
    @classmethod
    def coerce_label(cls, v: Any) -> Any:
        return _as_text(v)

class JoinRow(BaseModel):
    content_id: RecordId | None = None
    tag_id: RecordId | None = None

# --- Content ---

class ContentItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: RecordId
    slug: str
    title: str = ""
    image: str | None = None
    date_created: str | None = None
    short_description: str | None = None
    content: str | None = None

    # Resolved tag labels (empty until joined)
    tags: list[str] = Field(default_factory=list)

    @field_validator("slug", "image", "date_created", "short_description", "content", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Any:
        return _as_text(v)

    @field_validator("title", mode="before")
    @classmethod
    def coerce_title(cls, v: Any) -> Any:
        """A missing title renders as an empty heading."""
        return "" if v is None else _as_text(v)

class Article(ContentItem):
    pass

class Event(ContentItem):
    time: str | None = None
    end_time: str | None = None
    location: str | None = None
    fee: str | None = None

    @field_validator("time", "end_time", "location", "fee", mode="before")
    @classmethod
    def coerce_event_text(cls, v: Any) -> Any:
        return _as_text(v)


ITEM_MODELS: dict[ContentKind, type[ContentItem]] = {
    "articles": Article,
    "events": Event,
}
