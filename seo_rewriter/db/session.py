"""Database connection management.

DatabaseManager handles:
- One async engine and session factory per database URL
- Transactional sessions (commit on success, rollback on error)
- Schema creation for development and tests
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from seo_rewriter.config import get_settings

from .models import Base

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Owns the async engine for the rewriter database."""

    def __init__(
        self,
        database_url: str | None = None,
        **engine_kwargs: Any,
    ):
        """Initialize the database manager.

        Args:
            database_url: SQLAlchemy async URL (default from settings)
            **engine_kwargs: Extra arguments for create_async_engine
        """
        self.database_url: str = database_url or get_settings().database_url
        self._engine: AsyncEngine = create_async_engine(self.database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get a transactional session.

        Yields:
            AsyncSession committed on exit, rolled back on error
        """
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create all tables (development and tests; production uses Alembic)."""
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema created")

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self._engine.dispose()
