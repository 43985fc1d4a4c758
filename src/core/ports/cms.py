"""
CMS Read Interface.

Protocol-based interface for reading collections from the headless CMS.
Listing and detail pages only ever read; nothing is written back.

Key requirements:
- Read a whole collection, optionally narrowed by one equality filter
- Every request bypasses intermediate HTTP caches (no-store)
- Transport failures and non-success statuses raise, never return partial data

Implementations:
1. DirectusAdapter: REST calls over httpx (production)
2. InMemoryCMSAdapter: fixed collections held in memory (dev/test)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

# Raw CMS record, shape depends on the collection schema
Record = dict[str, Any]


@dataclass(frozen=True)
class CMSQuery:
    """
    Query for a collection read.

    Supports a single equality filter, e.g. CMSQuery("slug", "my-event").
    """

    field: str | None = None
    equals: str | int | None = None
    limit: int | None = None

    def to_params(self) -> dict[str, str]:
        """Encode as Directus REST query parameters."""
        params: dict[str, str] = {}
        if self.field is not None and self.equals is not None:
            params[f"filter[{self.field}][_eq]"] = str(self.equals)
        if self.limit is not None:
            params["limit"] = str(self.limit)
        return params

    def matches(self, record: Record) -> bool:
        """Apply the filter to an in-memory record."""
        if self.field is None or self.equals is None:
            return True
        value = record.get(self.field)
        return value == self.equals or (value is not None and str(value) == str(self.equals))


class CMSPort(Protocol):
    """
    CMS collection reader.

    Implementations:
    - DirectusAdapter: production REST client
    - InMemoryCMSAdapter: in-memory collections (dev/test)
    """

    async def read_items(
        self,
        collection: str,
        query: CMSQuery | None = None,
    ) -> list[Record]:
        """
        Read records from a collection.

        Raises:
            NetworkError: backend unreachable
            UpstreamError: backend answered with a non-success status
                or an unreadable body
        """
        ...


# --- Error Types ---


class CMSError(Exception):
    """Base exception for CMS read errors."""

    def __init__(self, collection: str, message: str) -> None:
        self.collection = collection
        self.message = message
        super().__init__(f"{collection}: {message}")


class NetworkError(CMSError):
    """The CMS could not be reached."""


class UpstreamError(CMSError):
    """The CMS answered but the response was not usable."""

    def __init__(
        self,
        collection: str,
        message: str,
        status_code: int | None = None,
    ) -> None:
        self.status_code = status_code
        super().__init__(collection, message)
