"""Fetches the search index relative to the page the query runs on."""
from __future__ import annotations

import asyncio
import logging
from typing import Optional
from urllib.parse import urljoin

from ..domain.errors import IndexFetchError
from ..domain.repositories.base import IndexFetcher
from .http_transport import HTTPTransport, CurlTransport

logger = logging.getLogger(__name__)


class TransportIndexFetcher(IndexFetcher):
    """Resolves the index URL against `page_url` and fetches it via a transport.

    The blocking transport call runs in a worker thread so the query task
    only suspends at this point.
    """

    def __init__(self, page_url: str, transport: Optional[HTTPTransport] = None, timeout: float = 30.0):
        self.page_url = page_url
        self._transport = transport or CurlTransport()
        self._timeout = timeout

    def resolve(self, relative_url: str) -> str:
        return urljoin(self.page_url, relative_url)

    async def fetch(self, relative_url: str) -> bytes:
        url = self.resolve(relative_url)
        logger.debug("Fetching search index %s", url)
        try:
            resp = await asyncio.to_thread(
                self._transport.get, url, headers={}, follow_redirects=True, timeout=self._timeout
            )
        except Exception as e:
            raise IndexFetchError(url, str(e)) from e

        if resp.status_code != 200:
            raise IndexFetchError(url, f"HTTP {resp.status_code}", status_code=resp.status_code)
        return resp.content


__all__ = ["TransportIndexFetcher"]
