"""SEO content rewriter.

- services: the rewrite operation (prompt, LLM call, reply normalization)
- db: persistence of users, configuration and rewrite history
"""

from seo_rewriter.core.errors import ConfigurationError, UpstreamError, UpstreamErrorKind
from seo_rewriter.schemas.rewrite import RewriteParams, RewriteResult
from seo_rewriter.services.rewriter import SEORewriter, rewrite_content_with_seo

__all__ = [
    "SEORewriter",
    "rewrite_content_with_seo",
    "RewriteParams",
    "RewriteResult",
    "ConfigurationError",
    "UpstreamError",
    "UpstreamErrorKind",
]
