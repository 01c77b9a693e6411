"""SEO rewrite result schemas.

Field names are snake_case in Python and camelCase on the wire, which is the
shape the model is asked to produce and the shape callers receive from
``RewriteResult.to_wire()``.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model accepting both camelCase aliases and field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Input
# =============================================================================


class RewriteParams(CamelModel):
    """Optional per-call parameters of a rewrite."""

    keyword_link: str | None = Field(default=None, description="Link for the first keyword mention")
    company_name: str | None = Field(default=None, description="Company promoted in the CTA")
    author_name: str | None = Field(default=None, description="Article author")
    author_description: str | None = Field(default=None, description="Author bio source text")
    api_key: str | None = Field(default=None, description="OpenAI credential for this call")


# =============================================================================
# Result parts
# =============================================================================


class FeaturedImage(CamelModel):
    """Suggested primary image descriptor."""

    title: str
    alt_text: str
    keywords: list[str] = Field(default_factory=list)


class FAQItem(CamelModel):
    """Question/answer pair."""

    question: str
    answer: str


class CaseStudy(CamelModel):
    """Case study as embedded in the result."""

    title: str
    description: str
    results: str = ""
    external_link: str = ""


class SuggestedGraphic(CamelModel):
    """Chart, infographic, diagram or table suggestion."""

    type: str = Field(..., description="chart | infographic | diagram | table")
    title: str
    description: str = ""
    data_points: list[str] = Field(default_factory=list)


class SuggestedImage(CamelModel):
    """Supporting image suggestion."""

    position: str
    description: str
    alt_text: str = ""
    caption: str = ""


class VisualElement(CamelModel):
    """Card, callout, highlight or quote suggestion."""

    type: str = Field(..., description="card | callout | highlight | quote")
    content: str
    position: str = ""


class RichContent(CamelModel):
    """Rich content suggestions."""

    suggested_graphics: list[SuggestedGraphic] = Field(default_factory=list)
    suggested_images: list[SuggestedImage] = Field(default_factory=list)
    visual_elements: list[VisualElement] = Field(default_factory=list)


class Citation(CamelModel):
    """Evidence the rewritten article should cite."""

    type: str = Field(..., description="study | statistic | expert | source")
    text: str
    suggested_link: str = ""
    credibility: str = Field(default="medium", description="high | medium | low")


class InternalLinkSuggestion(CamelModel):
    """Internal link suggestion."""

    anchor_text: str
    target_page: str
    context: str = ""
    relevance_score: float = 0.0


class Entities(CamelModel):
    """Entities mentioned for entity optimization."""

    brands: list[str] = Field(default_factory=list)
    people: list[str] = Field(default_factory=list)
    locations: list[str] = Field(default_factory=list)
    concepts: list[str] = Field(default_factory=list)


class SchemaMarkup(CamelModel):
    """Structured-data markup types the content suits."""

    article_schema: bool = True
    author_schema: bool = False
    faq_schema: bool = False
    organization_schema: bool = False
    review_schema: bool = False


class CTASection(CamelModel):
    """Call-to-action block for the company."""

    title: str
    text: str
    button_text: str


# =============================================================================
# Result
# =============================================================================


class RewriteResult(CamelModel):
    """Fully populated SEO rewrite result."""

    rewritten_content: str
    word_count: int = Field(..., ge=0)
    keyword_density: str
    seo_score: int = Field(..., ge=1, le=100)
    readability_score: str
    meta_description: str = Field(..., max_length=155)

    helpfulness_score: int = Field(..., ge=0, le=100)
    quality_score: int = Field(..., ge=0, le=100)
    eat_score: int = Field(..., ge=0, le=100)
    structure_score: int = Field(..., ge=0, le=100)
    ai_optimization_score: int = Field(..., ge=0, le=100)

    featured_image: FeaturedImage
    faq: list[FAQItem] = Field(default_factory=list, max_length=8)
    case_studies: list[CaseStudy] = Field(default_factory=list, max_length=3)
    rich_content: RichContent = Field(default_factory=RichContent)
    citations: list[Citation] = Field(default_factory=list)
    internal_linking: list[InternalLinkSuggestion] = Field(default_factory=list)
    entities: Entities = Field(default_factory=Entities)
    schema_markup: SchemaMarkup = Field(default_factory=SchemaMarkup)

    author_bio: str | None = None
    cta_section: CTASection | None = None

    def to_wire(self) -> dict[str, Any]:
        """Serialize with camelCase keys, omitting absent optional sections."""
        return self.model_dump(by_alias=True, exclude_none=True)
