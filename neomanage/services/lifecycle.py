"""Server lifecycle control."""

from __future__ import annotations

from typing import Any

from .base import Service


class LifecycleService(Service):
    name = "lifecycle"

    async def get_status(self) -> Any:
        return await self._get("status")

    async def start(self) -> Any:
        return await self._post("start")

    async def stop(self) -> Any:
        return await self._post("stop")

    async def restart(self) -> Any:
        return await self._post("restart")
