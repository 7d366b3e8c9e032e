"""Service directory for a server with management enabled.

On construction the manager creates one proxy per known service kind and
schedules discovery: a single GET of the management root, which answers
with ``{"services": {name: descriptor, ...}}``.  Every proxy named in the
answer receives its descriptor, then ``services.loaded`` is triggered on the
owning database handle.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from neomanage.errors import DiscoveryError, ServicesNotLoadedError, WebError
from neomanage.services import SERVICE_TYPES, Service

if TYPE_CHECKING:
    from neomanage.database import GraphDatabase

logger = logging.getLogger(__name__)

SERVICES_LOADED = "services.loaded"


class GraphDatabaseManager:
    """Discovers and exposes the management services of one server.

    Must be constructed while an event loop is running; discovery is
    scheduled as :attr:`discovery`, an :class:`asyncio.Task` whose result is
    the descriptor mapping or a :class:`DiscoveryError`.

    Args:
        db: The owning handle. Needs ``manage_url``, ``web`` and
            ``trigger(event_name)``.
    """

    def __init__(self, db: "GraphDatabase") -> None:
        self.db = db
        self.url: str = db.manage_url

        self.proxies: dict[str, Service] = {
            name: cls(db) for name, cls in SERVICE_TYPES.items()
        }
        self.backup = self.proxies["backup"]
        self.config = self.proxies["config"]
        self.importing = self.proxies["importing"]
        self.exporting = self.proxies["exporting"]
        self.console = self.proxies["console"]
        self.jmx = self.proxies["jmx"]
        self.lifecycle = self.proxies["lifecycle"]
        self.monitor = self.proxies["monitor"]

        self.services: dict[str, Any] | None = None
        self._service_names: tuple[str, ...] | None = None

        self.discovery: asyncio.Task[dict[str, Any]] = asyncio.get_running_loop().create_task(
            self.discover_services()
        )
        self.discovery.add_done_callback(self._on_discovery_done)

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def services_loaded(self) -> bool:
        """Return True once service descriptions have been received.

        You can also bind to the ``services.loaded`` event on the database.
        """
        return self.services is not None

    def available_services(self) -> tuple[str, ...]:
        """Return the names of the services the server advertised.

        The names are collected on first use after discovery and then reused.

        Raises:
            ServicesNotLoadedError: discovery has not completed (check
                :meth:`services_loaded` or wait for ``services.loaded``).
        """
        if self.services is None:
            raise ServicesNotLoadedError("Service definition has not been loaded yet.")
        if self._service_names is None:
            self._service_names = tuple(self.services)
        return self._service_names

    def get_service(self, name: str) -> Service | None:
        """Return the local proxy for *name*, or ``None`` for unknown kinds."""
        return self.proxies.get(name)

    async def wait_until_loaded(self) -> dict[str, Any]:
        """Wait for the automatic discovery and return the descriptor mapping.

        Raises:
            DiscoveryError: the management root could not be fetched.
        """
        return await asyncio.shield(self.discovery)

    async def discover_services(self) -> dict[str, Any]:
        """Connect to the server and find out what services are available.

        Raises:
            DiscoveryError: the management root could not be fetched or did
                not answer with a service listing.
        """
        try:
            definition = await self.db.web.get(self.url)
        except WebError as exc:
            raise DiscoveryError(self.url) from exc

        services = definition.get("services") if isinstance(definition, dict) else None
        if not isinstance(services, dict):
            logger.warning("no service listing in response from %s", self.url)
            raise DiscoveryError(self.url)

        self.services = services
        self._service_names = None

        for name, descriptor in services.items():
            proxy = self.proxies.get(name)
            if proxy is None:
                logger.debug("ignoring unknown service %r from %s", name, self.url)
                continue
            proxy.make_available(descriptor)

        for name, proxy in self.proxies.items():
            if name not in services and proxy.available():
                proxy.make_unavailable()

        logger.info("discovered %d service(s) at %s", len(services), self.url)
        self.db.trigger(SERVICES_LOADED)
        return services

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _on_discovery_done(self, task: asyncio.Task) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("service discovery failed for %s: %s", self.url, exc)
