"""
Tag-join component - Content items denormalized with tag labels.
"""

from .component import aggregate, build_tag_map, run_fetch_with_tags
from .models import (
    ContentFetchError,
    FetchWithTagsInput,
    JoinDegraded,
    TaggedCollectionOutput,
)

__all__ = [
    # Entry points
    "run_fetch_with_tags",
    "aggregate",
    "build_tag_map",
    # Input models
    "FetchWithTagsInput",
    # Output models
    "TaggedCollectionOutput",
    "ContentFetchError",
    "JoinDegraded",
]
