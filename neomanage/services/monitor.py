"""Monitoring data (time series of server statistics)."""

from __future__ import annotations

from typing import Any

from .base import Service


class MonitorService(Service):
    name = "monitor"

    async def get_data(self) -> Any:
        """Return the most recent data points."""
        return await self._get("latest_data")

    async def get_data_from(self, from_ts: int) -> Any:
        """Return data points newer than *from_ts* (seconds since epoch)."""
        return await self._get("data_from", time=from_ts)
