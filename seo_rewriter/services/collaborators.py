"""Lookup collaborators used while building a rewrite prompt.

Two collaborators feed the prompt:
- Case-study lookup: async, optional, supplied by the caller
- Internal-link generator: sync, always called; a slug-based default is shipped

Both are plain callables so callers can pass a function, a bound method or a
mock.
"""

import re
import unicodedata
from typing import Awaitable, Protocol

from seo_rewriter.constants import DOMAIN_TLD, PLACEHOLDER_DOMAIN
from seo_rewriter.schemas.rewrite import CamelModel, CaseStudy, InternalLinkSuggestion

_WHITESPACE = re.compile(r"\s+")
_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")

INTERNAL_LINK_CONTEXT = "link interno relevante"
INTERNAL_LINK_RELEVANCE = 0.8


class DynamicCaseStudy(CamelModel):
    """Case study returned by the lookup service."""

    title: str
    description: str
    growth_metric: str = ""
    source_url: str = ""

    def to_case_study(self) -> CaseStudy:
        """Map to the shape embedded in rewrite results."""
        return CaseStudy(
            title=self.title,
            description=self.description,
            results=self.growth_metric,
            external_link=self.source_url,
        )


class InternalLink(CamelModel):
    """Internal link proposed by the generator."""

    text: str
    url: str

    def to_suggestion(self) -> InternalLinkSuggestion:
        """Map to the shape embedded in the prompt's JSON example."""
        return InternalLinkSuggestion(
            anchor_text=self.text,
            target_page=self.url,
            context=INTERNAL_LINK_CONTEXT,
            relevance_score=INTERNAL_LINK_RELEVANCE,
        )


class CaseStudyLookup(Protocol):
    """Finds real case studies related to a keyword."""

    def __call__(
        self, keyword: str, content: str, limit: int
    ) -> Awaitable[list[DynamicCaseStudy]]: ...


class InternalLinkGenerator(Protocol):
    """Proposes internal links on the company's domain."""

    def __call__(self, keyword: str, content: str, domain: str) -> list[InternalLink]: ...


def derive_site_domain(company_name: str | None) -> str:
    """Company name lower-cased with whitespace removed plus the TLD.

    >>> derive_site_domain("Minha Empresa")
    'minhaempresa.com.br'
    """
    if not company_name:
        return PLACEHOLDER_DOMAIN
    return f"{_WHITESPACE.sub('', company_name.lower())}{DOMAIN_TLD}"


def slugify(text: str) -> str:
    """ASCII slug, accents folded: ``"Marketing Digital"`` -> ``"marketing-digital"``."""
    folded = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    return _NON_SLUG_CHARS.sub("-", folded.lower()).strip("-")


def generate_internal_links(keyword: str, content: str, domain: str) -> list[InternalLink]:
    """Default generator: keyword tag page and blog guide on ``domain``."""
    slug = slugify(keyword) or "blog"
    site_root = f"https://{domain}"
    return [
        InternalLink(text=keyword, url=f"{site_root}/tag/{slug}"),
        InternalLink(text=f"Guia completo sobre {keyword}", url=f"{site_root}/blog/{slug}"),
        InternalLink(text="Mais artigos no blog", url=f"{site_root}/blog"),
    ]
