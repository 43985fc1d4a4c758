"""
Directus CMS Adapter.

Implements CMSPort over the Directus REST API using httpx.

Key behaviors:
- GET {base_url}/items/{collection}, body shaped {"data": [...]}
- Equality filters sent as filter[field][_eq]=value
- Every request carries Cache-Control: no-store so content edits show up
  on the next page load
- No retries and no timeouts
- Transport failures raise NetworkError; non-2xx or unreadable bodies
  raise UpstreamError
"""

from __future__ import annotations

import logging

import httpx

from src.core.ports.cms import CMSQuery, NetworkError, Record, UpstreamError

logger = logging.getLogger(__name__)

NO_STORE_HEADERS = {
    "Cache-Control": "no-store",
    "Pragma": "no-cache",
}


class DirectusAdapter:
    """
    REST client for a Directus instance.

    The httpx client can be injected (tests pass one built on
    httpx.MockTransport). An adapter that builds its own client also
    closes it in aclose().
    """

    def __init__(
        self,
        base_url: str,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=None, follow_redirects=True)

    async def read_items(
        self,
        collection: str,
        query: CMSQuery | None = None,
    ) -> list[Record]:
        url = f"{self.base_url}/items/{collection}"
        params = query.to_params() if query else {}

        try:
            response = await self._client.get(url, params=params, headers=NO_STORE_HEADERS)
        except httpx.HTTPError as exc:
            logger.warning("CMS request for %s failed: %s", collection, exc)
            raise NetworkError(collection, str(exc) or exc.__class__.__name__) from exc

        if response.is_error:
            logger.warning(
                "CMS returned %s for %s", response.status_code, collection
            )
            raise UpstreamError(
                collection,
                _error_message(response),
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamError(
                collection, "Response body is not JSON", status_code=response.status_code
            ) from exc

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, list):
            raise UpstreamError(
                collection, "Response has no data list", status_code=response.status_code
            )

        return [row for row in data if isinstance(row, dict)]

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


def _error_message(response: httpx.Response) -> str:
    """Pull the first Directus error message out of a failed response."""
    try:
        payload = response.json()
        errors = payload.get("errors") or []
        if errors and isinstance(errors[0], dict) and errors[0].get("message"):
            return str(errors[0]["message"])
    except (ValueError, AttributeError):
        pass
    return f"HTTP {response.status_code}"
