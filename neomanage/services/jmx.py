"""JMX bean browser."""

from __future__ import annotations

from typing import Any

from .base import Service


class JmxService(Service):
    name = "jmx"

    async def get_domains(self) -> list[str]:
        result = await self._get("domains")
        return result if isinstance(result, list) else []

    async def get_domain(self, domain: str) -> Any:
        return await self._get("domain", domain=domain)

    async def get_bean(self, domain: str, bean: str) -> Any:
        return await self._get("bean", domain=domain, name=bean)

    async def query(self, names: list[str]) -> list[Any]:
        """Fetch several beans by object name in one request."""
        result = await self._post("query", names)
        return result if isinstance(result, list) else []
