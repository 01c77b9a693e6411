"""Database fixtures backed by in-memory SQLite."""

import pytest
import pytest_asyncio
from sqlalchemy.pool import StaticPool

from seo_rewriter.db import DatabaseManager, DatabaseStorage


@pytest_asyncio.fixture
async def db_manager():
    """Fresh schema per test."""
    manager = DatabaseManager("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    await manager.create_all()
    yield manager
    await manager.dispose()


@pytest.fixture
def storage(db_manager) -> DatabaseStorage:
    return DatabaseStorage(db_manager)
