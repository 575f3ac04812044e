"""Async database configuration and session management."""

import asyncio

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import ClassVar

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.infrastructure.config.settings import get_settings


def to_async_url(database_url: str) -> str:
    """Convert a sync database URL to its async driver equivalent."""
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if database_url.startswith("sqlite:///"):
        return database_url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    return database_url


class AsyncDatabase:
    """Async database manager.

    Engines are cached per event loop, so the CLI (one `asyncio.run` per
    command) and the HTTP server can share this object safely.
    """

    _engines: ClassVar[dict[tuple[int, str], AsyncEngine]] = {}
    _session_makers: ClassVar[
        dict[tuple[int, str], async_sessionmaker[AsyncSession]]
    ] = {}

    def __init__(self, database_url: str | None = None):
        """Initialize async database manager.

        Args:
            database_url: Overrides the configured DATABASE_URL
        """
        self._async_url = to_async_url(
            database_url or get_settings().get_database_url()
        )

    @property
    def url(self) -> str:
        """Async database URL in use."""
        return self._async_url

    def _cache_key(self) -> tuple[int, str]:
        try:
            loop_id = id(asyncio.get_running_loop())
        except RuntimeError:
            loop_id = 0
        return loop_id, self._async_url

    def _get_engine_and_session_maker(
        self,
    ) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
        key = self._cache_key()
        if key not in self._engines:
            engine = create_async_engine(self._async_url, echo=False)
            self._engines[key] = engine
            self._session_makers[key] = async_sessionmaker(
                engine, class_=AsyncSession, expire_on_commit=False
            )

        return self._engines[key], self._session_makers[key]

    @property
    def engine(self) -> AsyncEngine:
        """Engine bound to the current event loop."""
        engine, _ = self._get_engine_and_session_maker()
        return engine

    @property
    def async_session_maker(self) -> async_sessionmaker[AsyncSession]:
        """Session maker bound to the current event loop."""
        _, session_maker = self._get_engine_and_session_maker()
        return session_maker

    async def create_tables(self) -> None:
        """Create every table declared on the ORM metadata."""
        from src.infrastructure.persistence.sqlalchemy_models import Base

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Dispose the engine of the current event loop."""
        key = self._cache_key()
        engine = self._engines.pop(key, None)
        self._session_makers.pop(key, None)
        if engine is not None:
            await engine.dispose()

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession]:
        """Get an async database session.

        Commits when the block exits normally and rolls back on error.

        Yields:
            AsyncSession: Database session
        """
        async with self.async_session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()
