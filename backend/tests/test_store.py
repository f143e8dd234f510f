"""
BlogHub Backend — Store Lifecycle & Health Tests
==================================================

What:  Tests for lazy connection, reconnection after failure and /health.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest
from sqlalchemy import text

from bloghub.database import ConnectionState, Store
from bloghub.exceptions import OperationError
from bloghub.routes import health


class TestStore:

    @pytest.mark.asyncio
    async def test_starts_disconnected(self, tmp_path):
        store = Store(f"sqlite+aiosqlite:///{tmp_path}/lazy.db")

        assert store.state is ConnectionState.DISCONNECTED
        with pytest.raises(RuntimeError):
            store.session_factory

    @pytest.mark.asyncio
    async def test_connect_is_idempotent(self, tmp_path):
        store = Store(f"sqlite+aiosqlite:///{tmp_path}/once.db")
        try:
            await store.connect()
            engine = store.engine
            await store.connect()

            assert store.state is ConnectionState.CONNECTED
            assert store.engine is engine
        finally:
            await store.dispose()

    @pytest.mark.asyncio
    async def test_concurrent_first_connects_share_live_engine(self, tmp_path):
        store = Store(f"sqlite+aiosqlite:///{tmp_path}/pending.db")
        try:
            await asyncio.gather(store.connect(), store.connect())

            assert store.state is ConnectionState.CONNECTED
            async with store.session_factory() as session:
                assert (await session.execute(text("SELECT 1"))).scalar() == 1
        finally:
            await store.dispose()

    @pytest.mark.asyncio
    async def test_failed_connect_resets_state(self, tmp_path):
        store = Store(f"sqlite+aiosqlite:///{tmp_path}/missing/dir/x.db")

        with pytest.raises(OperationError) as exc_info:
            await store.connect()

        assert exc_info.value.message == "Could not connect to the database"
        assert store.state is ConnectionState.DISCONNECTED
        assert await store.ping() is False

    @pytest.mark.asyncio
    async def test_dispose_allows_reconnect(self, tmp_path):
        store = Store(f"sqlite+aiosqlite:///{tmp_path}/again.db")
        await store.connect()
        await store.dispose()
        assert store.state is ConnectionState.DISCONNECTED

        assert await store.ping() is True
        await store.dispose()


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy(self, anon_client, db_store):
        response = await anon_client.get("/health")

        data = response.json()
        assert response.status_code == 200
        assert data["status"] == "healthy"
        assert data["database"] == "connected"

    @pytest.mark.asyncio
    async def test_unhealthy(self, anon_client, monkeypatch):
        monkeypatch.setattr(health.store, "ping", AsyncMock(return_value=False))

        response = await anon_client.get("/health")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"
