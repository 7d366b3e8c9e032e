"""pytest configuration for neomanage tests."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from neomanage.database import GraphDatabase


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "asyncio: mark test as async"
    )


@pytest.fixture
def web():
    """Transport double; set ``web.get.return_value`` or ``side_effect`` per test."""
    return AsyncMock()


@pytest.fixture
def db(web):
    return GraphDatabase("http://localhost:7474", web=web)
