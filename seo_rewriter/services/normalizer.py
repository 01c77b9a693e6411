"""Response normalizer for the rewrite reply.

The model's JSON is untrusted. Normalization works the same way on both
paths:

1. Build the default table for this call (keyword, company, author and the
   fetched case studies are the only inputs).
2. Parse success: overlay every present, well-typed upstream field onto the
   table. Parse failure: the raw reply becomes the rewritten text and the
   table is used as is.
3. Enforce limits (meta description, FAQ, case studies) and recompute word
   count, keyword density, SEO score and readability from the final text.

authorBio and ctaSection exist only when an author / company was supplied,
whatever the model returned.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_camel

from seo_rewriter.constants import (
    CASE_STUDY_MAX_ITEMS,
    DEFAULT_SCORES,
    FAQ_MAX_ITEMS,
    META_DESCRIPTION_MAX_LENGTH,
)
from seo_rewriter.helpers.content_metrics import compute_rewrite_metrics
from seo_rewriter.helpers.schemas import ParseResult
from seo_rewriter.observability.logger import get_logger
from seo_rewriter.schemas.rewrite import (
    CaseStudy,
    Citation,
    CTASection,
    Entities,
    FAQItem,
    FeaturedImage,
    InternalLinkSuggestion,
    RewriteResult,
    RichContent,
    SchemaMarkup,
    SuggestedGraphic,
    SuggestedImage,
    VisualElement,
)

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# upstream key -> result field, for the five quality scores
SCORE_KEYS: dict[str, str] = {
    "helpfulnessScore": "helpfulness_score",
    "qualityScore": "quality_score",
    "eatScore": "eat_score",
    "structureScore": "structure_score",
    "aiOptimizationScore": "ai_optimization_score",
}

DEFAULT_FAQ_ANSWER = "Resposta baseada no conteúdo reescrito."


def build_default_fields(
    keyword: str,
    company_name: str | None = None,
    author_name: str | None = None,
    case_studies: list[CaseStudy] | None = None,
) -> dict[str, Any]:
    """Default value for every result field except the recomputed metrics."""
    return {
        "meta_description": f"{keyword} - resumo otimizado para SEO",
        **DEFAULT_SCORES,
        "featured_image": FeaturedImage(
            title=f"Imagem sobre {keyword}",
            alt_text=f"{keyword} - imagem ilustrativa",
            keywords=[keyword],
        ),
        "faq": [FAQItem(question=f"O que é {keyword}?", answer=DEFAULT_FAQ_ANSWER)],
        "case_studies": list(case_studies or [])[:CASE_STUDY_MAX_ITEMS],
        "rich_content": RichContent(),
        "citations": [],
        "internal_linking": [],
        "entities": Entities(),
        "schema_markup": SchemaMarkup(),
        "author_bio": f"Biografia do autor {author_name}" if author_name else None,
        "cta_section": (
            CTASection(
                title=f"Transforme seu negócio com {keyword}",
                text=(
                    f"A {company_name} é especialista em {keyword} e pode ajudar você a "
                    "alcançar os mesmos resultados. Entre em contato conosco hoje mesmo!"
                ),
                button_text=f"Falar com {company_name}",
            )
            if company_name
            else None
        ),
    }


# =============================================================================
# Field coercion
# =============================================================================


def _text(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


def _score(value: Any) -> int | None:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not 0 <= value <= 100:
        return None
    return int(round(value))


def _str_list(value: Any) -> list[str] | None:
    if not isinstance(value, list):
        return None
    return [item for item in value if isinstance(item, str)]


def _model(value: Any, model_cls: type[ModelT]) -> ModelT | None:
    if not isinstance(value, dict):
        return None
    try:
        return model_cls.model_validate(value)
    except ValidationError:
        return None


def _model_list(value: Any, model_cls: type[ModelT]) -> list[ModelT] | None:
    """Valid items of a list; None when ``value`` is not a list."""
    if not isinstance(value, list):
        return None
    items = []
    for raw in value:
        item = _model(raw, model_cls)
        if item is not None:
            items.append(item)
    if len(items) != len(value):
        logger.debug(
            "Dropped malformed %s items: %d of %d",
            model_cls.__name__,
            len(value) - len(items),
            len(value),
        )
    return items


def _featured_image(value: Any, default: FeaturedImage) -> FeaturedImage:
    if not isinstance(value, dict):
        return default
    keywords = _str_list(value.get("keywords"))
    return FeaturedImage(
        title=_text(value.get("title")) or default.title,
        alt_text=_text(value.get("altText")) or default.alt_text,
        keywords=keywords if keywords else default.keywords,
    )


def _rich_content(value: Any, default: RichContent) -> RichContent:
    if not isinstance(value, dict):
        return default
    return RichContent(
        suggested_graphics=_model_list(value.get("suggestedGraphics"), SuggestedGraphic) or [],
        suggested_images=_model_list(value.get("suggestedImages"), SuggestedImage) or [],
        visual_elements=_model_list(value.get("visualElements"), VisualElement) or [],
    )


def _entities(value: Any, default: Entities) -> Entities:
    if not isinstance(value, dict):
        return default
    return Entities(
        brands=_str_list(value.get("brands")) or [],
        people=_str_list(value.get("people")) or [],
        locations=_str_list(value.get("locations")) or [],
        concepts=_str_list(value.get("concepts")) or [],
    )


def _schema_markup(value: Any, default: SchemaMarkup) -> SchemaMarkup:
    if not isinstance(value, dict):
        return default
    flags = default.model_dump()
    for field_name in SchemaMarkup.model_fields:
        flag = value.get(to_camel(field_name))
        if isinstance(flag, bool):
            flags[field_name] = flag
    return SchemaMarkup(**flags)


class ResponseNormalizer:
    """Turns a parsed (or unparseable) reply into a fully populated RewriteResult."""

    def normalize(
        self,
        parsed: ParseResult,
        keyword: str,
        company_name: str | None = None,
        author_name: str | None = None,
        case_studies: list[CaseStudy] | None = None,
    ) -> RewriteResult:
        """
        Normalize one reply.

        Args:
            parsed: Output of OutputParser.parse_json for the raw reply
            keyword: Target keyword (defaults and metrics)
            company_name: Enables ctaSection when set
            author_name: Enables authorBio when set
            case_studies: Fetched case studies, used when the reply has none

        Returns:
            RewriteResult: every field populated
        """
        fields = build_default_fields(keyword, company_name, author_name, case_studies)

        if parsed.success and parsed.data is not None:
            rewritten = _text(parsed.data.get("rewrittenContent")) or ""
            self._overlay(
                fields,
                parsed.data,
                has_author=bool(author_name),
                has_company=bool(company_name),
            )
        else:
            logger.warning(
                "Reply is not a JSON object; using raw text as rewritten content (format=%s)",
                parsed.format_detected,
            )
            rewritten = parsed.raw

        fields["meta_description"] = fields["meta_description"][:META_DESCRIPTION_MAX_LENGTH]
        fields["faq"] = fields["faq"][:FAQ_MAX_ITEMS]
        fields["case_studies"] = fields["case_studies"][:CASE_STUDY_MAX_ITEMS]

        metrics = compute_rewrite_metrics(rewritten, keyword)
        return RewriteResult(
            rewritten_content=rewritten,
            word_count=metrics.word_count,
            keyword_density=metrics.keyword_density,
            seo_score=metrics.seo_score,
            readability_score=metrics.readability_score,
            **fields,
        )

    def _overlay(
        self,
        fields: dict[str, Any],
        data: dict[str, Any],
        has_author: bool,
        has_company: bool,
    ) -> None:
        """Replace defaults in ``fields`` with valid values from ``data``."""
        if meta := _text(data.get("metaDescription")):
            fields["meta_description"] = meta

        for key, field_name in SCORE_KEYS.items():
            score = _score(data.get(key))
            if score is not None:
                fields[field_name] = score

        fields["featured_image"] = _featured_image(data.get("featuredImage"), fields["featured_image"])

        # A list whose items were all malformed keeps the default
        raw_faq = data.get("faq")
        faq = _model_list(raw_faq, FAQItem)
        if faq or raw_faq == []:
            fields["faq"] = faq

        raw_case_studies = data.get("caseStudies")
        case_studies = _model_list(raw_case_studies, CaseStudy)
        if case_studies or raw_case_studies == []:
            fields["case_studies"] = case_studies

        fields["rich_content"] = _rich_content(data.get("richContent"), fields["rich_content"])

        citations = _model_list(data.get("citations"), Citation)
        if citations is not None:
            fields["citations"] = citations

        links = _model_list(data.get("internalLinking"), InternalLinkSuggestion)
        if links is not None:
            fields["internal_linking"] = links

        fields["entities"] = _entities(data.get("entities"), fields["entities"])
        fields["schema_markup"] = _schema_markup(data.get("schemaMarkup"), fields["schema_markup"])

        if has_author and (bio := _text(data.get("authorBio"))):
            fields["author_bio"] = bio
        if has_company:
            cta = _model(data.get("ctaSection"), CTASection)
            if cta is not None:
                fields["cta_section"] = cta
