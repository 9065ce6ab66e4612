"""
Async database session management.
Challenge: Connection pooling, scoped sessions, proper cleanup.
Design: The application owns one Database handle (opened in the lifespan, stored on
app.state); request-scoped sessions are injected from it.
"""

import logging
from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from gadget_registry.cache.redis_client import discard_invalidations, flush_invalidations
from gadget_registry.db.base import Base

logger = logging.getLogger(__name__)


class Database:
    """Storage handle: async engine plus session factory, with explicit open/close."""

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.echo = echo
        self.engine: AsyncEngine | None = None
        self.session_maker: async_sessionmaker[AsyncSession] | None = None

    def open(self) -> None:
        if self.engine is not None:
            return
        options: dict = {"echo": self.echo, "pool_pre_ping": True}
        # SQLite (tests, local runs) picks its own pool class; pool sizing only applies to servers
        if not self.url.startswith("sqlite"):
            options.update(pool_size=10, max_overflow=20)
        self.engine = create_async_engine(self.url, **options)
        # Session factory: one session per request
        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        logger.info("Database engine opened (%s)", self.engine.url.render_as_string(hide_password=True))

    async def close(self) -> None:
        if self.engine is None:
            return
        await self.engine.dispose()
        self.engine = None
        self.session_maker = None
        logger.info("Database engine disposed")

    async def create_all(self) -> None:
        """Create tables from metadata. Local/dev only; production uses Alembic."""
        async with self._require_engine().begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> bool:
        """Readiness probe: can we run a trivial query?"""
        try:
            async with self._require_engine().connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as exc:
            logger.warning("Database ping failed: %s", exc)
            return False

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session. Commit on success, then clear queued cache keys; rollback on error."""
        if self.session_maker is None:
            raise RuntimeError("Database is not open")
        async with self.session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                discard_invalidations(session)
                raise
            await flush_invalidations(session)

    def _require_engine(self) -> AsyncEngine:
        if self.engine is None:
            raise RuntimeError("Database is not open")
        return self.engine


def get_database(request: Request) -> Database:
    """The handle opened by the application lifespan."""
    return request.app.state.database


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session per request. Ensures rollback on error, close on exit."""
    async with get_database(request).session() as session:
        yield session


# Type alias for FastAPI dependency injection
DbSession = Annotated[AsyncSession, Depends(get_db)]
