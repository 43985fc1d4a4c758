import pytest

from src.adapters.memory_cms import InMemoryCMSAdapter
from src.rules.models import Rules


@pytest.fixture
def sample_collections() -> dict[str, list[dict]]:
    """
    A small CMS snapshot: three articles, two events, three tags.
    """
    return {
        "articles": [
            {
                "id": 1,
                "slug": "hello-world",
                "title": "Hello World",
                "image": "img-hello",
                "date_created": "2024-03-01T09:00:00Z",
                "short_description": "First post",
                "content": "<p>Welcome.</p>",
            },
            {
                "id": 2,
                "slug": "design-notes",
                "title": "Design Notes",
                "date_created": "2024-05-10T09:00:00Z",
            },
            {
                "id": 3,
                "slug": "undated",
                "title": "Undated",
                "date_created": None,
            },
        ],
        "articles_tags": [
            {"id": 10, "articles_id": 1, "tags_id": 1},
            {"id": 11, "articles_id": 2, "tags_id": 2},
            {"id": 12, "articles_id": 2, "tags_id": 1},
        ],
        "events": [
            {
                "id": 7,
                "slug": "spring-fair",
                "title": "Spring Fair",
                "date_created": "2024-02-01T09:00:00Z",
                "time": "2024-07-01T10:00:00Z",
                "end_time": "2024-07-01T12:00:00Z",
                "location": "Park",
                "fee": "Free",
            },
            {
                "id": 8,
                "slug": "night-market",
                "title": "Night Market",
                "date_created": "2024-04-01T09:00:00Z",
                "time": "2024-08-01T18:00:00Z",
                "end_time": "2024-08-01T22:00:00Z",
                "location": "Harbour",
            },
        ],
        "events_tags": [{"id": 20, "events_id": 7, "tags_id": 3}],
        "tags": [
            {"id": 1, "tag": "news"},
            {"id": 2, "tag": "design"},
            {"id": 3, "tag": "community"},
        ],
    }


@pytest.fixture
def cms(sample_collections: dict[str, list[dict]]) -> InMemoryCMSAdapter:
    return InMemoryCMSAdapter(collections=sample_collections)


@pytest.fixture
def rules() -> Rules:
    return Rules.model_validate(
        {"cms": {"base_url": "https://cms.test", "public_url": "https://cms.test"}}
    )
