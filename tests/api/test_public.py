"""
Tests for the public JSON API and app-wide HTTP behavior.

The CMS is replaced by the in-memory adapter through dependency overrides.
"""

from __future__ import annotations

from urllib.parse import parse_qs, urlparse

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.adapters.memory_cms import InMemoryCMSAdapter
from src.api.deps import get_cms, get_rules
from src.api.main import app as main_app
from src.rules.models import Rules


@pytest.fixture
def app(cms: InMemoryCMSAdapter, rules: Rules) -> FastAPI:
    """Main app with the CMS and rules overridden."""
    main_app.dependency_overrides[get_cms] = lambda: cms
    main_app.dependency_overrides[get_rules] = lambda: rules
    yield main_app
    main_app.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Test client (lifespan not started, so no real CMS client)."""
    return TestClient(app)


class TestArticlesListing:
    def test_default_view(self, client: TestClient) -> None:
        response = client.get("/api/public/articles")

        assert response.status_code == 200
        data = response.json()
        assert [i["slug"] for i in data["items"]] == ["design-notes", "hello-world", "undated"]
        assert data["all_tags"] == ["design", "news"]
        assert data["total_items"] == 3
        assert data["total_pages"] == 1
        assert data["degraded"] is False

    def test_item_fields(self, client: TestClient) -> None:
        data = client.get("/api/public/articles").json()
        hello = next(i for i in data["items"] if i["slug"] == "hello-world")

        assert hello["tags"] == ["news"]
        assert hello["image_url"] == "https://cms.test/assets/img-hello"
        assert hello["content"] == "<p>Welcome.</p>"

    def test_missing_image_uses_placeholder(self, client: TestClient) -> None:
        data = client.get("/api/public/articles").json()
        notes = next(i for i in data["items"] if i["slug"] == "design-notes")

        assert notes["image_url"] == "/placeholder.svg"

    def test_tag_filter_and_sort(self, client: TestClient) -> None:
        data = client.get(
            "/api/public/articles", params={"tag": ["news"], "sort": "oldest"}
        ).json()

        assert [i["slug"] for i in data["items"]] == ["hello-world", "design-notes"]
        assert data["selected_tags"] == ["news"]
        assert data["sort_order"] == "oldest"

    def test_tags_are_or_combined(self, client: TestClient) -> None:
        data = client.get("/api/public/articles", params={"tag": ["design", "news"]}).json()

        assert data["total_items"] == 2

    def test_paging_uses_configured_page_size(self, client: TestClient, rules: Rules) -> None:
        rules.listing.page_size = 2

        data = client.get("/api/public/articles", params={"page": 2}).json()

        assert data["total_pages"] == 2
        assert data["current_page"] == 2
        assert [i["slug"] for i in data["items"]] == ["undated"]

    def test_out_of_range_page_stays_on_first(self, client: TestClient) -> None:
        data = client.get("/api/public/articles", params={"page": 9}).json()

        assert data["current_page"] == 1

    def test_invalid_sort_rejected(self, client: TestClient) -> None:
        response = client.get("/api/public/articles", params={"sort": "random"})

        assert response.status_code == 422

    def test_cms_outage_degrades_to_empty(
        self, client: TestClient, cms: InMemoryCMSAdapter
    ) -> None:
        cms.failing = {"tags"}

        response = client.get("/api/public/articles")

        assert response.status_code == 200
        data = response.json()
        assert data["items"] == []
        assert data["degraded"] is True


class TestDetail:
    def test_article_by_slug(self, client: TestClient) -> None:
        response = client.get("/api/public/articles/design-notes")

        assert response.status_code == 200
        assert response.json()["tags"] == ["design", "news"]

    def test_unknown_slug_is_404(self, client: TestClient) -> None:
        response = client.get("/api/public/articles/nope")

        assert response.status_code == 404
        assert response.json()["detail"] == "Content not found"

    def test_cms_outage_is_404(self, client: TestClient, cms: InMemoryCMSAdapter) -> None:
        cms.failing = {"articles"}

        assert client.get("/api/public/articles/hello-world").status_code == 404

    def test_event_includes_calendar_url(self, client: TestClient) -> None:
        data = client.get("/api/public/events/spring-fair").json()
        params = parse_qs(urlparse(data["calendar_url"]).query)

        assert data["location"] == "Park"
        assert data["tags"] == ["community"]
        assert params["dates"] == ["20240701T100000Z/20240701T120000Z"]
        assert params["details"] == ["Spring Fair - Learn more at our website."]

    def test_calendar_redirect(self, client: TestClient) -> None:
        response = client.get("/api/public/events/spring-fair/calendar", follow_redirects=False)

        assert response.status_code == 307
        assert response.headers["location"].startswith(
            "https://calendar.google.com/calendar/render?action=TEMPLATE"
        )


class TestEventsListing:
    def test_events_sorted_by_creation_date(self, client: TestClient) -> None:
        data = client.get("/api/public/events").json()

        assert [i["slug"] for i in data["items"]] == ["night-market", "spring-fair"]
        assert all(i["calendar_url"] for i in data["items"])

    def test_numeric_fee_is_served_as_text(
        self, client: TestClient, cms: InMemoryCMSAdapter
    ) -> None:
        cms.collections["events"].append(
            {"id": 9, "slug": "paid", "title": None, "fee": 10, "date_created": "2024-01-01"}
        )

        data = client.get("/api/public/events").json()
        detail = client.get("/api/public/events/paid")

        assert data["total_items"] == 3
        assert detail.status_code == 200
        assert detail.json()["fee"] == "10"
        assert detail.json()["title"] == ""


class TestAppBehavior:
    def test_every_response_is_no_store(self, client: TestClient) -> None:
        for path in ("/health", "/api/public/articles", "/api/public/articles/nope"):
            assert client.get(path).headers["cache-control"] == "no-store"

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "service": "web"}
