"""Base class for management service proxies.

A proxy is created before the server has said anything about the service.
Once discovery hands it a descriptor via :meth:`Service.make_available`, the
descriptor's ``resources`` map tells the proxy which URLs to call.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from neomanage.errors import ServiceResourceError, ServiceUnavailableError

if TYPE_CHECKING:
    from neomanage.database import GraphDatabase

logger = logging.getLogger(__name__)


class Service:
    """One named management capability offered by the server."""

    name: str = ""

    def __init__(self, db: "GraphDatabase") -> None:
        self.db = db
        self.descriptor: Any = None

    def make_available(self, descriptor: Any) -> None:
        """Attach the server-provided *descriptor*; the service is usable afterwards."""
        self.descriptor = descriptor
        logger.debug("service %s available", self.name)

    def make_unavailable(self) -> None:
        """Drop the descriptor after the server stopped listing this service."""
        self.descriptor = None
        logger.debug("service %s no longer available", self.name)

    def available(self) -> bool:
        return self.descriptor is not None

    def resource_url(self, key: str, **params: Any) -> str:
        """Return the URL the descriptor lists under ``resources[key]``.

        ``{placeholder}`` segments in the URL are filled from *params*,
        URL-quoted.

        Raises:
            ServiceUnavailableError: discovery has not described this service.
            ServiceResourceError:    the descriptor has no such resource.
        """
        if self.descriptor is None:
            raise ServiceUnavailableError(f"Service '{self.name}' is not available yet")
        resources = self.descriptor.get("resources") if isinstance(self.descriptor, dict) else None
        if not isinstance(resources, dict):
            resources = {}
        try:
            url = resources[key]
        except KeyError:
            raise ServiceResourceError(
                f"Service '{self.name}' has no resource '{key}'"
            ) from None
        for placeholder, value in params.items():
            url = url.replace("{" + placeholder + "}", quote(str(value), safe=""))
        return url

    # ------------------------------------------------------------------ #
    # Transport shortcuts
    # ------------------------------------------------------------------ #

    async def _get(self, key: str, **params: Any) -> Any:
        return await self.db.web.get(self.resource_url(key, **params))

    async def _post(self, key: str, data: Any = None, **params: Any) -> Any:
        return await self.db.web.post(self.resource_url(key, **params), data)

    async def _put(self, key: str, data: Any = None, **params: Any) -> Any:
        return await self.db.web.put(self.resource_url(key, **params), data)

    async def _delete(self, key: str, **params: Any) -> Any:
        return await self.db.web.delete(self.resource_url(key, **params))

    def __repr__(self) -> str:
        state = "available" if self.available() else "unavailable"
        return f"<{type(self).__name__} {self.name} {state}>"
