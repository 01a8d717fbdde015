"""
Card catalog cache.

Fetches the deck builder's cards.json and keeps the last good snapshot.
A snapshot older than `max_age` seconds is re-fetched before it is handed
out again. Concurrent refreshes share a single request.
"""

import asyncio
import logging
import time
from collections.abc import Callable

import httpx
from pydantic import ValidationError

from kardsbot.models.card import Catalog
from kardsbot.models.failure import CatalogFetchError

logger = logging.getLogger(__name__)

DEFAULT_MAX_AGE = 60.0
DEFAULT_TIMEOUT = 10.0


async def fetch_catalog(
    url: str,
    timeout: float = DEFAULT_TIMEOUT,
    client: httpx.AsyncClient | None = None,
) -> Catalog:
    """
    Download and decode the card catalog.

    Args:
        url: Location of the cards.json resource
        timeout: Request timeout in seconds
        client: Optional client for connection reuse

    Returns:
        A complete Catalog snapshot.

    Raises:
        CatalogFetchError: On network errors, non-200 responses or a body
            that is not a JSON array of cards
    """
    try:
        if client is not None:
            response = await client.get(url, timeout=timeout)
        else:
            async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as new_client:
                response = await new_client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise CatalogFetchError(
            f"Failed to fetch card catalog: HTTP {e.response.status_code}"
        ) from e
    except httpx.RequestError as e:
        raise CatalogFetchError(f"Failed to fetch card catalog: {e!r}") from e

    if response.status_code != 200:
        raise CatalogFetchError(f"Failed to fetch card catalog: HTTP {response.status_code}")

    try:
        return Catalog.from_json(response.content)
    except ValidationError as e:
        raise CatalogFetchError(
            f"Card catalog is malformed: {e.error_count()} validation error(s)"
        ) from e


class CatalogCache:
    """
    Holds the most recent catalog snapshot and its fetch time.

    The snapshot is only ever replaced as a whole after a successful fetch.
    A failed fetch leaves the previous snapshot (or none) in place.

    Usage:
        cache = CatalogCache(settings.catalog_url)
        catalog = await cache.ensure_fresh()
    """

    def __init__(
        self,
        url: str,
        max_age: float = DEFAULT_MAX_AGE,
        timeout: float = DEFAULT_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.url = url
        self.max_age = max_age
        self.timeout = timeout
        self._clock = clock
        self._client = client
        self._catalog: Catalog | None = None
        self._fetched_at: float | None = None
        self._inflight: asyncio.Task[Catalog] | None = None

    @property
    def catalog(self) -> Catalog | None:
        """Last successfully fetched snapshot, None if never fetched."""
        return self._catalog

    @property
    def fetched_at(self) -> float | None:
        """Clock reading of the last successful fetch."""
        return self._fetched_at

    def is_stale(self) -> bool:
        """True if there is no snapshot or it is at least `max_age` seconds old."""
        if self._catalog is None or self._fetched_at is None:
            return True
        return self._clock() - self._fetched_at >= self.max_age

    def invalidate(self) -> None:
        """Force the next `ensure_fresh` to fetch, keeping the current snapshot."""
        self._fetched_at = None

    async def ensure_fresh(self) -> Catalog:
        """
        Return a catalog no older than `max_age`, fetching it if needed.

        Callers arriving while a fetch is in flight wait for that fetch
        instead of starting their own.

        Raises:
            CatalogFetchError: If a fetch was needed and failed
        """
        if not self.is_stale():
            assert self._catalog is not None
            return self._catalog

        if self._inflight is None:
            self._inflight = asyncio.ensure_future(self._refresh())

        # Shield so one cancelled caller doesn't cancel the shared fetch
        return await asyncio.shield(self._inflight)

    async def _refresh(self) -> Catalog:
        try:
            catalog = await fetch_catalog(self.url, timeout=self.timeout, client=self._client)
        except CatalogFetchError as e:
            logger.warning("Card catalog refresh failed, keeping previous snapshot: %s", e)
            raise
        finally:
            self._inflight = None

        self._catalog = catalog
        self._fetched_at = self._clock()
        logger.info("Refreshed card catalog: %d cards", len(catalog))
        return catalog
