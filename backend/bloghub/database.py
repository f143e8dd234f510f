"""
BlogHub Backend — Store Connection & Session Management
=========================================================

What:  Lazily connected async SQLAlchemy engine, session factory, and the
       FastAPI dependency that hands one session to each request.
Why:   Centralizes all database connection logic in one place.
How:   A process-wide `Store` creates the engine on first use and tracks a
       tri-state connection status; `get_db_session` opens a fresh session per
       request that commits on success and rolls back on error.
Who:   Used by route handlers via FastAPI's dependency injection system.

Connection Lifecycle:
    DISCONNECTED ──connect()──▶ CONNECTING ──ping ok──▶ CONNECTED
         ▲                          │
         └──────── ping failed ─────┘

    connect() is a no-op when CONNECTED, and returns immediately when another
    caller is CONNECTING (the engine already exists and SQLAlchemy connects
    lazily). There is no lock: two first requests racing through
    DISCONNECTED both build an engine, and the later one wins.
"""

import enum
import logging
from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from bloghub.config import settings
from bloghub.exceptions import OperationError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object between the models, Alembic and the
    test suite (which creates tables straight from it).
    """
    pass


class ConnectionState(str, enum.Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"


class Store:
    """
    Process-wide handle on the document store.

    Attributes:
        url:    SQLAlchemy async URL the engine is built from
        state:  Current ConnectionState
    """

    def __init__(self, url: str, **engine_options):
        self.url = url
        self.state = ConnectionState.DISCONNECTED
        self._engine_options = engine_options
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Store is not connected; call connect() first")
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self._session_factory is None:
            raise RuntimeError("Store is not connected; call connect() first")
        return self._session_factory

    async def connect(self) -> None:
        """
        Establish the engine if needed and verify it with SELECT 1.

        Raises:
            OperationError: The store could not be reached. State returns to
                DISCONNECTED so the next request tries again.
        """
        if self.state is ConnectionState.CONNECTED:
            logger.debug("Already connected to store")
            return

        if self.state is ConnectionState.CONNECTING:
            logger.debug("Store connection in progress")
            return

        self.state = ConnectionState.CONNECTING
        self._engine = create_async_engine(self.url, **self._engine_options)
        # expire_on_commit=False: documents are serialized after the session commits
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            logger.error("Store connection failed: %s", str(e))
            await self._reset()
            raise OperationError.wrap("Could not connect to the database", e)

        self.state = ConnectionState.CONNECTED
        logger.info("Connected to store (%s)", self._engine.url.render_as_string(hide_password=True))

    async def ping(self) -> bool:
        """Lightweight connectivity check used by the health endpoint."""
        try:
            await self.connect()
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("Store ping failed: %s", str(e))
            return False

    async def dispose(self) -> None:
        """Close all pooled connections (application shutdown)."""
        await self._reset()
        logger.info("Store connection closed")

    async def _reset(self) -> None:
        engine = self._engine
        self._engine = None
        self._session_factory = None
        self.state = ConnectionState.DISCONNECTED
        if engine is not None:
            await engine.dispose()


def build_engine_options() -> dict:
    """
    Engine keyword arguments derived from settings.

    Pool sizing only applies to server databases; SQLite drivers reject
    pool_size/max_overflow.
    """
    options = {"echo": settings.log_level == "DEBUG"}
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


# Singleton store — connected on the first request, disposed on shutdown
store = Store(settings.database_url, **build_engine_options())


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Connects the store if this is the first request of the process
        2. Yields a new session to the route handler
        3. On success: commits the transaction
        4. On error: rolls back and re-raises for the global error handlers

    Example usage in a route:
        @router.get("/users")
        async def list_users(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    await store.connect()
    async with store.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
