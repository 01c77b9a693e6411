"""Content metrics calculation utilities.

Metrics are always recomputed from the final rewritten text so that the values
returned to callers do not depend on what the model claimed:
- Word count: whitespace-separated tokens
- Keyword occurrences: case-insensitive literal substring matches
- Keyword density: occurrences / words * 100, one decimal plus "%"
- SEO score: occurrences * 10 plus a length bonus, clamped to [1, 100]
- Readability label from the word count
"""

from seo_rewriter.constants import (
    READABILITY_GOOD,
    READABILITY_GOOD_THRESHOLD,
    READABILITY_REGULAR,
    SEO_SCORE_LONG_CONTENT_BONUS,
    SEO_SCORE_LONG_CONTENT_THRESHOLD,
    SEO_SCORE_MAX,
    SEO_SCORE_MIN,
    SEO_SCORE_PER_OCCURRENCE,
    SEO_SCORE_SHORT_CONTENT_BONUS,
)

from .schemas import RewriteMetrics


def count_words(text: str) -> int:
    """Count whitespace-separated tokens."""
    return len(text.split())


def count_keyword_occurrences(text: str, keyword: str) -> int:
    """Count non-overlapping, case-insensitive literal occurrences of ``keyword``."""
    if not keyword:
        return 0
    return text.lower().count(keyword.lower())


def keyword_density(occurrences: int, word_count: int) -> str:
    """Format keyword density, e.g. ``"2.1%"``; ``"0%"`` for empty text."""
    if word_count <= 0:
        return "0%"
    return f"{occurrences / word_count * 100:.1f}%"


def seo_score(occurrences: int, word_count: int) -> int:
    """Heuristic SEO score in [1, 100]."""
    bonus = (
        SEO_SCORE_LONG_CONTENT_BONUS
        if word_count > SEO_SCORE_LONG_CONTENT_THRESHOLD
        else SEO_SCORE_SHORT_CONTENT_BONUS
    )
    raw = occurrences * SEO_SCORE_PER_OCCURRENCE + bonus
    return min(SEO_SCORE_MAX, max(SEO_SCORE_MIN, raw))


def readability_label(word_count: int) -> str:
    """Readability label shown next to the scores."""
    return READABILITY_GOOD if word_count > READABILITY_GOOD_THRESHOLD else READABILITY_REGULAR


def compute_rewrite_metrics(text: str, keyword: str) -> RewriteMetrics:
    """
    Calculate all recomputed metrics for a rewritten text.

    Args:
        text: Final rewritten text (HTML or plain)
        keyword: Target keyword, matched literally

    Returns:
        RewriteMetrics: word count, occurrences, density, SEO score, readability
    """
    words = count_words(text)
    occurrences = count_keyword_occurrences(text, keyword)
    return RewriteMetrics(
        word_count=words,
        keyword_occurrences=occurrences,
        keyword_density=keyword_density(occurrences, words),
        seo_score=seo_score(occurrences, words),
        readability_score=readability_label(words),
    )
