from pydantic import BaseModel, Field

DEFAULT_CMS_URL = "https://api.hub.solo-web.studio"
GOOGLE_CALENDAR_RENDER_URL = "https://calendar.google.com/calendar/render"


class ProjectRules(BaseModel):
    slug: str = "solo-hub-web"
    rules_version: str = "1"

class ContentCollectionRules(BaseModel):
    items: str
    join: str
    join_content_field: str

class TagCollectionRules(BaseModel):
    collection: str = "tags"
    label_field: str = "tag"
    join_tag_field: str = "tags_id"

class CollectionsRules(BaseModel):
    articles: ContentCollectionRules = ContentCollectionRules(
        items="articles", join="articles_tags", join_content_field="articles_id"
    )
    events: ContentCollectionRules = ContentCollectionRules(
        items="events", join="events_tags", join_content_field="events_id"
    )
    tags: TagCollectionRules = TagCollectionRules()

class CMSRules(BaseModel):
    base_url: str = DEFAULT_CMS_URL
    # Asset host; images resolve to {public_url}/assets/{image}
    public_url: str = DEFAULT_CMS_URL
    collections: CollectionsRules = CollectionsRules()

class ListingRules(BaseModel):
    page_size: int = Field(default=12, ge=1)

class CalendarRules(BaseModel):
    base_url: str = GOOGLE_CALENDAR_RENDER_URL
    details_template: str | None = "{title} - Learn more at our website."

class OpsRules(BaseModel):
    required_env: list[str] = Field(default_factory=list)

class Rules(BaseModel):
    project: ProjectRules = ProjectRules()
    cms: CMSRules = CMSRules()
    listing: ListingRules = ListingRules()
    calendar: CalendarRules = CalendarRules()
    ops: OpsRules = OpsRules()
