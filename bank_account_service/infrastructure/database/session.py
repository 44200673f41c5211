"""Async SQLAlchemy engine and session management."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager, nullcontext
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from bank_account_service.core.config import DatabaseSettings

from .base import Base


def build_engine(settings: DatabaseSettings, *, debug: bool = False) -> AsyncEngine:
    engine_kwargs: dict[str, Any] = {
        "echo": settings.echo or debug,
    }
    if settings.is_memory_sqlite:
        # every connection must see the same in-memory database
        engine_kwargs["poolclass"] = StaticPool
        engine_kwargs["connect_args"] = {"check_same_thread": False}
    else:
        if settings.pool_size is not None:
            engine_kwargs["pool_size"] = settings.pool_size
        if settings.max_overflow is not None:
            engine_kwargs["max_overflow"] = settings.max_overflow

    return create_async_engine(settings.url, **engine_kwargs)


class Database:
    """Owns the engine and hands out request scoped sessions."""

    def __init__(self, engine: AsyncEngine, *, serialize_sessions: bool = False) -> None:
        self._engine = engine
        # StaticPool sessions share one connection and therefore one transaction
        self._lock = asyncio.Lock() if serialize_sessions else None
        self._session_factory = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: DatabaseSettings, *, debug: bool = False) -> "Database":
        return cls(
            build_engine(settings, debug=debug),
            serialize_sessions=settings.is_memory_sqlite,
        )

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        return self._session_factory

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Session committed on success and rolled back on any error.

        On a shared in-memory connection sessions are handed out one at a time.
        """
        guard = self._lock if self._lock is not None else nullcontext()
        async with guard:
            async with self._session_factory() as session:
                try:
                    yield session
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise

    async def init_models(self) -> None:
        """Create database tables in development mode (migrations preferred)."""
        from bank_account_service.db import models  # noqa: F401

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self._engine.dispose()


__all__ = ["Database", "build_engine"]
