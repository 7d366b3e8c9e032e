"""Remote script console."""

from __future__ import annotations

from typing import Any

from .base import Service


class ConsoleService(Service):
    name = "console"

    async def exec(self, statement: str, engine: str = "shell") -> Any:
        """Evaluate *statement* with the server-side *engine* and return its reply."""
        return await self._post("exec", {"command": statement, "engine": engine})
