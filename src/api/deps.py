import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends, Request

from src.components.collections import CollectionSpec
from src.components.pages import PageContext
from src.core.ports.cms import CMSPort
from src.rules.loader import load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(os.environ.get("HUB_RULES_PATH", str(self.base_dir / "rules.yaml")))


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return _load_rules_cached(settings.rules_path)


@lru_cache
def _load_rules_cached(path: Path) -> Rules:
    return load_rules(path)


# --- CMS ---
def get_cms(request: Request) -> CMSPort:
    """CMS client created by the app lifespan; tests override this dependency."""
    return request.app.state.cms


def get_articles_spec(rules: Rules = Depends(get_rules)) -> CollectionSpec:
    return CollectionSpec.from_rules(rules, "articles")


def get_events_spec(rules: Rules = Depends(get_rules)) -> CollectionSpec:
    return CollectionSpec.from_rules(rules, "events")


# --- Rendering ---
def get_page_context(rules: Rules = Depends(get_rules)) -> PageContext:
    return PageContext.from_rules(rules)


def get_page_size(rules: Rules = Depends(get_rules)) -> int:
    return rules.listing.page_size
