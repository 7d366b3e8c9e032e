"""Exception hierarchy for neomanage."""

from __future__ import annotations


class NeoManageError(Exception):
    """Base error for all neomanage failures."""


class WebError(NeoManageError):
    """Base error for HTTP transport failures."""


class WebConnectionError(WebError):
    """Raised when the server is network-unreachable."""


class WebResponseError(WebError):
    """Raised when the server answers with a 4xx/5xx status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class ServicesNotLoadedError(NeoManageError):
    """Raised when service names are requested before discovery completed."""


class DiscoveryError(NeoManageError):
    """Raised when the service descriptions could not be fetched."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Unable to fetch service descriptions for server {url}")
        self.url = url


class ServiceUnavailableError(NeoManageError):
    """Raised when a service is used before the server described it."""


class ServiceResourceError(NeoManageError, KeyError):
    """Raised when a service descriptor lacks a requested resource."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
