"""SQLAlchemy models for the rewriter database.

Tables: users, configs, rewrite_history
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for rewriter DB models."""

    pass


class User(Base):
    """Application user."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(Text, nullable=False)


class Config(Base):
    """Application configuration.

    At most one row exists; it always has id = CONFIG_SINGLETON_ID.
    """

    __tablename__ = "configs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    openai_api_key: Mapped[str | None] = mapped_column(Text, nullable=True)
    company_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    author_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    author_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    keyword_link: Mapped[str | None] = mapped_column(Text, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.now, onupdate=datetime.now, nullable=False
    )


class RewriteHistory(Base):
    """Append-only record of one completed rewrite."""

    __tablename__ = "rewrite_history"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    original_content: Mapped[str] = mapped_column(Text, nullable=False)
    rewritten_content: Mapped[str] = mapped_column(Text, nullable=False)
    target_keyword: Mapped[str] = mapped_column(String(255), nullable=False)
    word_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    keyword_density: Mapped[str | None] = mapped_column(String(16), nullable=True)
    seo_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.now, nullable=False, index=True
    )
