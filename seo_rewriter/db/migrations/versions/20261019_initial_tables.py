"""Create users, configs and rewrite_history tables

Revision ID: 20261019_001
Revises:
Create Date: 2026-10-19
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261019_001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create the three application tables."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("password", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
    )

    op.create_table(
        "configs",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("openai_api_key", sa.Text(), nullable=True),
        sa.Column("company_name", sa.String(255), nullable=True),
        sa.Column("author_name", sa.String(255), nullable=True),
        sa.Column("author_description", sa.Text(), nullable=True),
        sa.Column("keyword_link", sa.Text(), nullable=True),
        sa.Column(
            "updated_at",
            sa.DateTime(),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "rewrite_history",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("original_content", sa.Text(), nullable=False),
        sa.Column("rewritten_content", sa.Text(), nullable=False),
        sa.Column("target_keyword", sa.String(255), nullable=False),
        sa.Column("word_count", sa.Integer(), nullable=True),
        sa.Column("keyword_density", sa.String(16), nullable=True),
        sa.Column("seo_score", sa.Integer(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_rewrite_history_created_at", "rewrite_history", ["created_at"])


def downgrade() -> None:
    """Drop the application tables."""
    op.drop_index("ix_rewrite_history_created_at", table_name="rewrite_history")
    op.drop_table("rewrite_history")
    op.drop_table("configs")
    op.drop_table("users")
