"""Shared Pydantic schemas for rewrite helpers.

- Parse results for LLM output
- Content metrics recomputed from the rewritten text
"""

from typing import Any

from pydantic import BaseModel, Field


class ParseResult(BaseModel):
    """JSON parse result."""

    success: bool
    data: dict[str, Any] | None = None
    raw: str
    format_detected: str = Field(default="unknown", description="json, markdown, html or unknown")
    fixes_applied: list[str] = Field(default_factory=list)


class RewriteMetrics(BaseModel):
    """Metrics derived from the final rewritten text and the keyword."""

    word_count: int
    keyword_occurrences: int
    keyword_density: str
    seo_score: int
    readability_score: str
