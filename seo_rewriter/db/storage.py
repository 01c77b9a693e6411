"""Persistence adapter for users, configuration and rewrite history.

Every operation runs in its own transaction and fails straight through to
the caller; nothing is retried.
"""

import logging
import math
from abc import ABC, abstractmethod
from datetime import datetime

from sqlalchemy import delete, select

from seo_rewriter.constants import CONFIG_SINGLETON_ID, DEFAULT_HISTORY_LIMIT
from seo_rewriter.schemas.storage import (
    ConfigInput,
    RewriteHistoryInput,
    StatsSummary,
    UserCreate,
)

from .models import Config, RewriteHistory, User
from .session import DatabaseManager

logger = logging.getLogger(__name__)


class StorageInterface(ABC):
    """Operations the application needs from its store."""

    @abstractmethod
    async def get_user(self, user_id: int) -> User | None:
        pass

    @abstractmethod
    async def get_user_by_username(self, username: str) -> User | None:
        pass

    @abstractmethod
    async def create_user(self, user: UserCreate) -> User:
        pass

    @abstractmethod
    async def get_config(self) -> Config | None:
        pass

    @abstractmethod
    async def save_config(self, config: ConfigInput) -> Config:
        pass

    @abstractmethod
    async def save_rewrite_history(self, entry: RewriteHistoryInput) -> RewriteHistory:
        pass

    @abstractmethod
    async def get_rewrite_history(self, limit: int = DEFAULT_HISTORY_LIMIT) -> list[RewriteHistory]:
        pass

    @abstractmethod
    async def get_stats(self) -> StatsSummary:
        pass


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class DatabaseStorage(StorageInterface):
    """SQLAlchemy implementation of StorageInterface."""

    def __init__(self, db: DatabaseManager | None = None):
        """Initialize storage.

        Args:
            db: Database manager (default: one built from settings)
        """
        self.db = db or DatabaseManager()

    # =========================================================================
    # Users
    # =========================================================================

    async def get_user(self, user_id: int) -> User | None:
        """Point lookup by id; None when absent."""
        async with self.db.get_session() as session:
            result = await session.execute(select(User).where(User.id == user_id))
            return result.scalar_one_or_none()

    async def get_user_by_username(self, username: str) -> User | None:
        """Point lookup by username; None when absent."""
        async with self.db.get_session() as session:
            result = await session.execute(select(User).where(User.username == username))
            return result.scalar_one_or_none()

    async def create_user(self, user: UserCreate) -> User:
        """Insert a user and return it with its assigned id."""
        async with self.db.get_session() as session:
            record = User(username=user.username, password=user.password)
            session.add(record)
            await session.flush()
            await session.refresh(record)
            return record

    # =========================================================================
    # Configuration
    # =========================================================================

    async def get_config(self) -> Config | None:
        """Most recently updated configuration, or None."""
        async with self.db.get_session() as session:
            result = await session.execute(
                select(Config).order_by(Config.updated_at.desc()).limit(1)
            )
            return result.scalar_one_or_none()

    async def save_config(self, config: ConfigInput) -> Config:
        """Replace the configuration.

        Stray rows are removed and the singleton row is upserted in one
        transaction, so a failure leaves the previous configuration in place.
        """
        async with self.db.get_session() as session:
            await session.execute(delete(Config).where(Config.id != CONFIG_SINGLETON_ID))
            record = await session.merge(
                Config(
                    id=CONFIG_SINGLETON_ID,
                    updated_at=datetime.now(),
                    **config.model_dump(),
                )
            )
            await session.flush()
            await session.refresh(record)

        logger.info("Configuration saved")
        return record

    # =========================================================================
    # Rewrite history
    # =========================================================================

    async def save_rewrite_history(self, entry: RewriteHistoryInput) -> RewriteHistory:
        """Append one history entry; created_at is assigned by the store."""
        async with self.db.get_session() as session:
            record = RewriteHistory(**entry.model_dump())
            session.add(record)
            await session.flush()
            await session.refresh(record)
            return record

    async def get_rewrite_history(self, limit: int = DEFAULT_HISTORY_LIMIT) -> list[RewriteHistory]:
        """The ``limit`` most recent entries, newest first."""
        async with self.db.get_session() as session:
            result = await session.execute(
                select(RewriteHistory)
                .order_by(RewriteHistory.created_at.desc(), RewriteHistory.id.desc())
                .limit(limit)
            )
            return list(result.scalars().all())

    async def get_stats(self) -> StatsSummary:
        """Count, rounded average SEO score and total word count over all history."""
        async with self.db.get_session() as session:
            result = await session.execute(
                select(RewriteHistory.seo_score, RewriteHistory.word_count)
            )
            rows = result.all()

        total = len(rows)
        if total == 0:
            return StatsSummary()

        score_sum = sum(row.seo_score or 0 for row in rows)
        return StatsSummary(
            total_rewrites=total,
            avg_seo_score=_round_half_up(score_sum / total),
            total_word_count=sum(row.word_count or 0 for row in rows),
        )
