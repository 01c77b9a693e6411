"""Helpers for parsing model replies and computing content metrics."""

from .content_metrics import (
    compute_rewrite_metrics,
    count_keyword_occurrences,
    count_words,
    keyword_density,
    readability_label,
    seo_score,
)
from .output_parser import OutputParser
from .schemas import ParseResult, RewriteMetrics

__all__ = [
    "OutputParser",
    "ParseResult",
    "RewriteMetrics",
    "compute_rewrite_metrics",
    "count_words",
    "count_keyword_occurrences",
    "keyword_density",
    "seo_score",
    "readability_label",
]
