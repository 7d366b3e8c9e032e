"""Server configuration properties."""

from __future__ import annotations

from typing import Any

from .base import Service


class ConfigService(Service):
    name = "config"

    async def get_properties(self) -> dict[str, Any]:
        """Return ``{key: property}`` for every configurable property."""
        result = await self._get("properties")
        if isinstance(result, list):
            return {p["key"]: p for p in result if isinstance(p, dict) and "key" in p}
        return result if isinstance(result, dict) else {}

    async def get_property(self, key: str) -> dict[str, Any] | None:
        return (await self.get_properties()).get(key)

    async def set_properties(self, values: dict[str, Any]) -> Any:
        payload = [{"key": k, "value": v} for k, v in values.items()]
        return await self._post("properties", payload)
