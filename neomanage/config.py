"""Environment-driven settings.

Reads:
    NEO4J_URL           REST root of the server (default: http://localhost:7474)
    NEO4J_MANAGE_URL    management root (default: <NEO4J_URL>/db/manage/)
    NEO4J_HTTP_TIMEOUT  per-request timeout in seconds (default: 10.0)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_URL = "http://localhost:7474"
MANAGE_PATH = "/db/manage/"
DEFAULT_TIMEOUT = 10.0


def default_manage_url(url: str) -> str:
    """Derive the management root from a server REST root."""
    return url.rstrip("/") + MANAGE_PATH


@dataclass
class Settings:
    url: str = DEFAULT_URL
    manage_url: str = ""
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        self.url = self.url.rstrip("/")
        if not self.manage_url:
            self.manage_url = default_manage_url(self.url)


def load_settings(
    url: str | None = None,
    manage_url: str | None = None,
    timeout: float | None = None,
) -> Settings:
    """Return :class:`Settings`, explicit arguments taking precedence over env."""
    if url is None:
        url = os.environ.get("NEO4J_URL", DEFAULT_URL)
    if manage_url is None:
        manage_url = os.environ.get("NEO4J_MANAGE_URL", "")
    if timeout is None:
        raw = os.environ.get("NEO4J_HTTP_TIMEOUT")
        try:
            timeout = float(raw) if raw else DEFAULT_TIMEOUT
        except ValueError:
            raise ValueError(f"NEO4J_HTTP_TIMEOUT must be a number, got {raw!r}") from None
    return Settings(url=url, manage_url=manage_url, timeout=timeout)
