"""
In-Memory CMS Adapter.

Serves fixed collections from memory instead of calling a CMS.
Used for local development and testing.

Key behaviors:
- Applies CMSQuery equality filters like the real backend
- Returns copies so callers cannot mutate the stored records
- Collections named in `failing` raise NetworkError
- Records every read for test assertions
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.core.ports.cms import CMSQuery, NetworkError, Record

logger = logging.getLogger(__name__)


@dataclass
class InMemoryCMSAdapter:
    """CMSPort implementation over dicts of records."""

    collections: dict[str, list[Record]] = field(default_factory=dict)
    failing: set[str] = field(default_factory=set)

    # Reads as (collection, query) for test assertions
    reads: list[tuple[str, CMSQuery | None]] = field(default_factory=list)

    async def read_items(
        self,
        collection: str,
        query: CMSQuery | None = None,
    ) -> list[Record]:
        self.reads.append((collection, query))

        if collection in self.failing:
            logger.debug("In-memory CMS: simulated failure for %s", collection)
            raise NetworkError(collection, "Simulated outage")

        records = self.collections.get(collection, [])
        if query is not None:
            records = [r for r in records if query.matches(r)]
            if query.limit is not None and query.limit >= 0:
                records = records[: query.limit]
        return [dict(r) for r in records]
