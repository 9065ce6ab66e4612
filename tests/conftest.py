"""
Pytest fixtures - test DB, client, service (TDD/BDD support).
Challenge: Isolated tests; SQLite file database instead of PostgreSQL, no Redis.
"""

import os

# Must be set before the app (and its cached settings) is imported
os.environ["CACHE_ENABLED"] = "false"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test_bdd.db"
os.environ["CREATE_TABLES"] = "true"

from typing import AsyncGenerator

import fakeredis
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from gadget_registry.cache import redis_client
from gadget_registry.db.base import Base
from gadget_registry.db.repositories.gadget_repository import GadgetRepository
from gadget_registry.db.session import Database, get_database, get_db
from gadget_registry.main import app
from gadget_registry.services.gadget_service import GadgetService


TEST_DATABASE_URL = "sqlite+aiosqlite:///./test.db"


@pytest_asyncio.fixture
async def database() -> AsyncGenerator[Database, None]:
    db = Database(TEST_DATABASE_URL)
    db.open()
    async with db.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield db
    async with db.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await db.close()


@pytest_asyncio.fixture
async def session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    async with database.session_maker() as s:
        yield s


@pytest_asyncio.fixture
async def client(database: Database, session: AsyncSession):
    async def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_database] = lambda: database
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def service(session: AsyncSession) -> GadgetService:
    return GadgetService(GadgetRepository(session))


@pytest_asyncio.fixture
async def cache(monkeypatch) -> AsyncGenerator[fakeredis.FakeAsyncRedis, None]:
    """Enable the gadget cache against an in-memory Redis."""
    client = fakeredis.FakeAsyncRedis(decode_responses=True)
    monkeypatch.setattr(redis_client, "_redis", client)
    monkeypatch.setattr(redis_client.settings, "cache_enabled", True)
    yield client
    await client.flushall()
