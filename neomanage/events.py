"""Named-event registry used by the database handle."""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


class Events:
    """Synchronous publish/subscribe keyed by event name.

    Callbacks run in registration order. A callback that raises is logged and
    skipped; the remaining callbacks still run.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[Callable[..., Any]]] = {}

    def bind(self, name: str, callback: Callable[..., Any]) -> None:
        """Register *callback* for *name*."""
        self._handlers.setdefault(name, []).append(callback)

    def unbind(self, name: str, callback: Callable[..., Any] | None = None) -> None:
        """Remove *callback* from *name*, or every callback when omitted."""
        if callback is None:
            self._handlers.pop(name, None)
            return
        handlers = self._handlers.get(name, [])
        if callback in handlers:
            handlers.remove(callback)

    def trigger(self, name: str, *args: Any) -> int:
        """Invoke every callback bound to *name*; returns how many ran."""
        handlers = list(self._handlers.get(name, ()))
        logger.debug("trigger %s (%d handler(s))", name, len(handlers))
        for cb in handlers:
            try:
                cb(*args)
            except Exception:
                logger.exception("Error in %s callback", name)
        return len(handlers)
