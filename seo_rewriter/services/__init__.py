"""Rewrite services.

- SEORewriter: the rewrite operation
- ResponseNormalizer: default table + overlay of the model's reply
- Collaborator contracts for case studies and internal links
"""

from .collaborators import (
    CaseStudyLookup,
    DynamicCaseStudy,
    InternalLink,
    InternalLinkGenerator,
    derive_site_domain,
    generate_internal_links,
    slugify,
)
from .normalizer import ResponseNormalizer, build_default_fields
from .rewriter import (
    SEORewriter,
    classify_provider_error,
    resolve_api_key,
    rewrite_content_with_seo,
)

__all__ = [
    "SEORewriter",
    "rewrite_content_with_seo",
    "classify_provider_error",
    "resolve_api_key",
    "ResponseNormalizer",
    "build_default_fields",
    "CaseStudyLookup",
    "DynamicCaseStudy",
    "InternalLink",
    "InternalLinkGenerator",
    "derive_site_domain",
    "generate_internal_links",
    "slugify",
]
