"""Pytest configuration and fixtures for tests."""

import os
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from seo_rewriter.config import Settings, reset_settings  # noqa: E402
from seo_rewriter.llm.schemas import LLMResponse, TokenUsage  # noqa: E402


@pytest.fixture
def keyword():
    """Target keyword used across rewrite tests."""
    return "teste"


@pytest.fixture
def settings():
    """Settings with a usable credential and an in-memory database."""
    return Settings(
        openai_api_key="sk-test-key",
        openai_model="gpt-4o",
        database_url="sqlite+aiosqlite:///:memory:",
    )


@pytest.fixture
def settings_without_key():
    """Settings with no credential configured."""
    return Settings(openai_api_key=None, database_url="sqlite+aiosqlite:///:memory:")


@pytest.fixture
def make_llm_response():
    """Factory for LLMResponse objects carrying the given reply text."""

    def _make(content: str) -> LLMResponse:
        return LLMResponse(
            content=content,
            token_usage=TokenUsage(input=100, output=200),
            model="gpt-4o",
            finish_reason="stop",
            provider="openai",
        )

    return _make


@pytest.fixture
def mock_llm_client(make_llm_response):
    """Mock LLM client whose generate() returns an empty JSON object."""
    client = MagicMock()
    client.provider_name = "openai"
    client.generate = AsyncMock(return_value=make_llm_response("{}"))
    return client


@pytest.fixture
def client_factory(mock_llm_client):
    """Client factory that always hands out ``mock_llm_client``."""
    return MagicMock(return_value=mock_llm_client)


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Keep cached settings from leaking between tests."""
    reset_settings()
    yield
    reset_settings()


# Environment configuration
def pytest_configure(config):
    """Configure pytest environment."""
    # Register custom markers
    config.addinivalue_line("markers", "slow: mark test as slow (may take > 30s)")
    config.addinivalue_line("markers", "db: mark test as requiring a database driver")

    # Set test environment variables
    os.environ.setdefault("LOG_LEVEL", "DEBUG")
    os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
