"""neomanage — asyncio client for a graph database management API.

Quickstart::

    from neomanage import GraphDatabase

    async with GraphDatabase.from_env() as db:   # reads NEO4J_URL from env
        manager = db.manager                     # discovery starts here
        await manager.wait_until_loaded()
        print(manager.available_services())
        print(await manager.lifecycle.get_status())
"""

from neomanage.database import GraphDatabase
from neomanage.errors import (
    DiscoveryError,
    NeoManageError,
    ServiceResourceError,
    ServicesNotLoadedError,
    ServiceUnavailableError,
    WebConnectionError,
    WebError,
    WebResponseError,
)
from neomanage.manager import GraphDatabaseManager

__version__ = "1.0.0"

__all__ = [
    "DiscoveryError",
    "GraphDatabase",
    "GraphDatabaseManager",
    "NeoManageError",
    "ServiceResourceError",
    "ServicesNotLoadedError",
    "ServiceUnavailableError",
    "WebConnectionError",
    "WebError",
    "WebResponseError",
]
