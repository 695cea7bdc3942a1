"""GitHub contents API client.

This module provides a lightweight async client wrapper around the
repository contents API: listing one directory and downloading the raw
text of a file. A single httpx.AsyncClient is created per instance and
reused for every request.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import httpx

from core.errors import DecodeError, TransportError
from core.models import RepositoryEntry, RepositorySettings

logger = logging.getLogger(__name__)


class GitHubClient:
    """Async client for the contents API.

    Purpose:
      - list_directory(path='') -> List[RepositoryEntry]
      - read_text(url) -> str

    Every request carries the configured User-Agent. There is no timeout,
    retry or rate-limit handling; a hung request hangs the caller.
    """

    JSON_ACCEPT = "application/vnd.github+json"

    def __init__(
        self,
        settings: RepositorySettings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = settings
        self._client = httpx.AsyncClient(
            headers={"User-Agent": settings.user_agent},
            timeout=None,
            follow_redirects=True,
            transport=transport,
        )

    @property
    def settings(self) -> RepositorySettings:
        return self._settings

    async def list_directory(self, path: str = "") -> List[RepositoryEntry]:
        """List one directory node, in the order the API returns it."""
        url = self._settings.contents_url(path)
        logger.debug("Listing %s", url)

        resp = await self._get(url, headers={"Accept": self.JSON_ACCEPT})
        try:
            payload: Any = resp.json()
        except ValueError as e:
            raise DecodeError(f"Listing response for {url} is not valid JSON: {e}") from e

        if payload is None:
            return []
        if not isinstance(payload, list):
            raise DecodeError(f"Listing response for {url} is not an array")

        return [RepositoryEntry.from_api(item) for item in payload]

    async def read_text(self, url: str) -> str:
        """Download a file's raw content and return it decoded as text."""
        logger.debug("Downloading %s", url)
        resp = await self._get(url)
        return resp.text

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # --- HTTP helpers ---

    async def _get(self, url: str, *, headers: Optional[dict] = None) -> httpx.Response:
        try:
            resp = await self._client.get(url, headers=headers)
            resp.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(str(e)) from e
        return resp
