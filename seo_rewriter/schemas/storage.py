"""Persistence input and aggregate schemas."""

from pydantic import Field

from .rewrite import CamelModel


class UserCreate(CamelModel):
    """User to insert."""

    username: str = Field(..., min_length=1, max_length=255)
    password: str


class ConfigInput(CamelModel):
    """Configuration to persist (replaces any existing one)."""

    openai_api_key: str | None = None
    company_name: str | None = None
    author_name: str | None = None
    author_description: str | None = None
    keyword_link: str | None = None


class RewriteHistoryInput(CamelModel):
    """One completed rewrite to append to history."""

    original_content: str
    rewritten_content: str
    target_keyword: str
    word_count: int | None = Field(default=None, ge=0)
    keyword_density: str | None = None
    seo_score: int | None = Field(default=None, ge=0, le=100)


class StatsSummary(CamelModel):
    """Aggregate over all history entries, computed on demand."""

    total_rewrites: int = 0
    avg_seo_score: int = 0
    total_word_count: int = 0
