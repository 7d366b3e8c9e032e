"""List the management services a server advertises.

Usage::

    python -m neomanage [--url URL] [--manage-url URL] [--timeout S] [-v]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from neomanage.database import GraphDatabase
from neomanage.errors import DiscoveryError


async def _list_services(db: GraphDatabase) -> list[str]:
    async with db:
        manager = db.manager
        await manager.wait_until_loaded()
        return manager.available_services()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m neomanage",
        description="List management services offered by a graph database server",
    )
    parser.add_argument(
        "--url",
        default=None,
        help="Server REST root (default: NEO4J_URL env var or http://localhost:7474)",
    )
    parser.add_argument(
        "--manage-url",
        metavar="URL",
        default=None,
        help="Management root (default: NEO4J_MANAGE_URL or <url>/db/manage/)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="HTTP timeout in seconds (default: NEO4J_HTTP_TIMEOUT or 10)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    db = GraphDatabase.from_env(url=args.url, manage_url=args.manage_url, timeout=args.timeout)
    try:
        names = asyncio.run(_list_services(db))
    except DiscoveryError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for name in names:
        print(name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
