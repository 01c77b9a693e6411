"""Prompt templates for the rewriter."""

from .rewrite import (
    PLAIN_LANGUAGE_RULES,
    QUALITY_CRITERIA,
    WORD_SUBSTITUTIONS,
    QualityCriterion,
    RewritePromptInput,
    build_output_example,
    build_rewrite_prompt,
)

__all__ = [
    "QualityCriterion",
    "QUALITY_CRITERIA",
    "PLAIN_LANGUAGE_RULES",
    "WORD_SUBSTITUTIONS",
    "RewritePromptInput",
    "build_output_example",
    "build_rewrite_prompt",
]
