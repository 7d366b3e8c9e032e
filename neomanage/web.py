"""HTTP transport for the management API.

Uses httpx for async HTTP. Every call takes an absolute URL, since service
descriptors hand out absolute resource URLs. Raises :class:`WebError`
subclasses at call time if the server is unreachable or answers with an
error status.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from neomanage.config import DEFAULT_TIMEOUT
from neomanage.errors import WebConnectionError, WebResponseError

logger = logging.getLogger(__name__)


class Web:
    """Thin async JSON wrapper around :class:`httpx.AsyncClient`.

    A single client is reused across calls for connection pooling and
    keep-alive.  Call :meth:`aclose` (or use as an async context manager)
    when done.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, headers: dict[str, str] | None = None) -> None:
        self.timeout = timeout
        self._client: httpx.AsyncClient = httpx.AsyncClient(
            timeout=self.timeout,
            headers=self._headers(headers),
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client and free resources."""
        await self._client.aclose()

    async def __aenter__(self) -> "Web":
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.aclose()

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    async def get(self, url: str) -> Any:
        return await self._request("GET", url)

    async def post(self, url: str, data: Any = None) -> Any:
        return await self._request("POST", url, data)

    async def put(self, url: str, data: Any = None) -> Any:
        return await self._request("PUT", url, data)

    async def delete(self, url: str) -> Any:
        return await self._request("DELETE", url)

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    async def _request(self, method: str, url: str, data: Any = None) -> Any:
        kwargs: dict[str, Any] = {}
        if data is not None:
            kwargs["json"] = data
        try:
            response = await self._client.request(method, url, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise WebConnectionError(f"Cannot reach server at {url}: {exc}") from exc
        logger.debug("%s %s -> %d", method, url, response.status_code)
        if response.status_code >= 400:
            raise WebResponseError(
                f"{method} {url} returned {response.status_code}",
                response.status_code,
            )
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise WebResponseError(
                f"{method} {url} returned a non-JSON body",
                response.status_code,
            ) from exc

    @staticmethod
    def _headers(extra: dict[str, str] | None) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if extra:
            headers.update(extra)
        return headers
