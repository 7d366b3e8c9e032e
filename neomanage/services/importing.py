"""Import service."""

from __future__ import annotations

from typing import Any

from .base import Service


class ImportService(Service):
    name = "importing"

    async def from_url(self, url: str) -> Any:
        """Ask the server to import the graph file found at *url*."""
        return await self._post("import_from_url", {"url": url})
