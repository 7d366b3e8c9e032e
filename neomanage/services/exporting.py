"""Export service."""

from __future__ import annotations

from typing import Any

from .base import Service


class ExportService(Service):
    name = "exporting"

    async def all(self) -> Any:
        """Export the whole database; the reply carries the download URL."""
        return await self._post("export_all")
