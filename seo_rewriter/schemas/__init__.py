"""Pydantic schemas for rewrite results and persisted records."""

from .rewrite import (
    CamelModel,
    CaseStudy,
    Citation,
    CTASection,
    Entities,
    FAQItem,
    FeaturedImage,
    InternalLinkSuggestion,
    RewriteParams,
    RewriteResult,
    RichContent,
    SchemaMarkup,
    SuggestedGraphic,
    SuggestedImage,
    VisualElement,
)
from .storage import ConfigInput, RewriteHistoryInput, StatsSummary, UserCreate

__all__ = [
    "CamelModel",
    "RewriteParams",
    "RewriteResult",
    "FeaturedImage",
    "FAQItem",
    "CaseStudy",
    "RichContent",
    "SuggestedGraphic",
    "SuggestedImage",
    "VisualElement",
    "Citation",
    "InternalLinkSuggestion",
    "Entities",
    "SchemaMarkup",
    "CTASection",
    "UserCreate",
    "ConfigInput",
    "RewriteHistoryInput",
    "StatsSummary",
]
