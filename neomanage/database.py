"""Handle for one graph database server."""

from __future__ import annotations

from typing import Any, Callable

from neomanage.config import default_manage_url, load_settings
from neomanage.events import Events
from neomanage.manager import GraphDatabaseManager
from neomanage.web import Web


class GraphDatabase:
    """Owns the transport, the event registry and the management client.

    Args:
        url:        REST root of the server, e.g. ``http://localhost:7474``.
        manage_url: Management root. Derived from *url* when omitted.
        web:        Transport to use; a new :class:`Web` when omitted.
    """

    def __init__(
        self,
        url: str,
        manage_url: str | None = None,
        web: Web | None = None,
    ) -> None:
        self.url = url.rstrip("/")
        self.manage_url = manage_url or default_manage_url(self.url)
        self.web = web if web is not None else Web()
        self.events = Events()
        self._manager: GraphDatabaseManager | None = None

    @classmethod
    def from_env(cls, **overrides: Any) -> "GraphDatabase":
        """Build a handle from ``NEO4J_*`` environment variables.

        Keyword *overrides* (``url``, ``manage_url``, ``timeout``) win over
        the environment.
        """
        settings = load_settings(**overrides)
        return cls(settings.url, settings.manage_url, Web(timeout=settings.timeout))

    @property
    def manager(self) -> GraphDatabaseManager:
        """The management client, created (and discovery started) on first access."""
        if self._manager is None:
            self._manager = GraphDatabaseManager(self)
        return self._manager

    def bind(self, name: str, callback: Callable[..., Any]) -> None:
        self.events.bind(name, callback)

    def trigger(self, name: str, *args: Any) -> None:
        self.events.trigger(name, *args)

    async def aclose(self) -> None:
        """Cancel a pending discovery and close the transport."""
        if self._manager is not None and not self._manager.discovery.done():
            self._manager.discovery.cancel()
        await self.web.aclose()

    async def __aenter__(self) -> "GraphDatabase":
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"<GraphDatabase {self.url}>"
