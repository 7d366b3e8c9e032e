"""Tests for the GraphDatabase handle."""

from __future__ import annotations

import asyncio

from neomanage.database import GraphDatabase
from neomanage.manager import GraphDatabaseManager
from neomanage.web import Web


class TestGraphDatabase:
    def test_manage_url_derived(self, web):
        db = GraphDatabase("http://localhost:7474/", web=web)
        assert db.url == "http://localhost:7474"
        assert db.manage_url == "http://localhost:7474/db/manage/"

    def test_manage_url_explicit(self, web):
        db = GraphDatabase("http://localhost:7474", manage_url="http://other/manage/", web=web)
        assert db.manage_url == "http://other/manage/"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("NEO4J_URL", "http://envhost:7474")
        monkeypatch.setenv("NEO4J_HTTP_TIMEOUT", "3")
        monkeypatch.delenv("NEO4J_MANAGE_URL", raising=False)
        db = GraphDatabase.from_env()
        assert db.manage_url == "http://envhost:7474/db/manage/"
        assert isinstance(db.web, Web)
        assert db.web.timeout == 3.0

    async def test_manager_created_once(self, db, web):
        web.get.return_value = {"services": {}}
        manager = db.manager
        assert isinstance(manager, GraphDatabaseManager)
        assert db.manager is manager
        await manager.discovery

    def test_bind_and_trigger(self, db):
        calls = []
        db.bind("services.loaded", lambda: calls.append(1))
        db.trigger("services.loaded")
        assert calls == [1]

    async def test_context_manager_closes_web(self, web):
        async with GraphDatabase("http://localhost:7474", web=web):
            pass
        web.aclose.assert_awaited_once()

    async def test_aclose_cancels_pending_discovery(self, web):
        db = GraphDatabase("http://localhost:7474", web=web)
        manager = db.manager
        await db.aclose()
        await asyncio.sleep(0)
        assert manager.discovery.cancelled()
        assert manager.services_loaded() is False
