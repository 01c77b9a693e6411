"""SEO rewrite service.

Flow of one rewrite:
1. Resolve the API credential (explicit parameter, then settings)
2. Optional case-study lookup (failures logged, degraded to [])
3. Internal-link suggestions for the derived company domain
4. Build the instruction prompt
5. Single text-generation call in strict JSON mode (no retries)
6. Parse and normalize the reply into a fully populated RewriteResult

Only ConfigurationError and UpstreamError reach the caller.

Example usage:
    rewriter = SEORewriter()
    result = await rewriter.rewrite(
        content=article_text,
        keyword="marketing digital",
        params=RewriteParams(company_name="Minha Empresa", api_key="sk-..."),
    )
    payload = result.to_wire()
"""

import uuid
from typing import Any

from pydantic import ValidationError

from seo_rewriter.config import Settings, get_settings
from seo_rewriter.constants import (
    CASE_STUDY_MAX_ITEMS,
    MAX_OUTPUT_TOKENS,
    PLACEHOLDER_API_KEY,
    TEMPERATURE,
)
from seo_rewriter.core.errors import (
    CollaboratorError,
    ConfigurationError,
    UpstreamError,
    UpstreamErrorKind,
)
from seo_rewriter.helpers.output_parser import OutputParser
from seo_rewriter.llm.base import LLMClientFactory, LLMInterface, get_llm_client
from seo_rewriter.llm.exceptions import LLMConfigurationError
from seo_rewriter.llm.schemas import LLMCallMetadata, LLMMessage, LLMRequestConfig
from seo_rewriter.observability.logger import (
    clear_context,
    configure_logging,
    get_logger,
    set_context,
)
from seo_rewriter.prompts.rewrite import RewritePromptInput, build_rewrite_prompt
from seo_rewriter.schemas.rewrite import (
    CaseStudy,
    InternalLinkSuggestion,
    RewriteParams,
    RewriteResult,
)
from seo_rewriter.services.collaborators import (
    CaseStudyLookup,
    DynamicCaseStudy,
    InternalLink,
    InternalLinkGenerator,
    derive_site_domain,
    generate_internal_links,
)
from seo_rewriter.services.normalizer import ResponseNormalizer

logger = get_logger(__name__)

# Structured provider error code -> kind
ERROR_CODE_KINDS: dict[str, UpstreamErrorKind] = {
    "invalid_api_key": UpstreamErrorKind.CREDENTIAL_REJECTED,
    "invalid_authentication": UpstreamErrorKind.CREDENTIAL_REJECTED,
    "insufficient_quota": UpstreamErrorKind.QUOTA_EXCEEDED,
    "billing_hard_limit_reached": UpstreamErrorKind.QUOTA_EXCEEDED,
    "rate_limit_exceeded": UpstreamErrorKind.RATE_LIMITED,
}

STATUS_CODE_KINDS: dict[int, UpstreamErrorKind] = {
    401: UpstreamErrorKind.CREDENTIAL_REJECTED,
    429: UpstreamErrorKind.RATE_LIMITED,
}

# Last-resort substring matching on the error text
MESSAGE_PATTERN_KINDS: tuple[tuple[str, UpstreamErrorKind], ...] = (
    ("api key", UpstreamErrorKind.CREDENTIAL_REJECTED),
    ("quota", UpstreamErrorKind.QUOTA_EXCEEDED),
    ("rate limit", UpstreamErrorKind.RATE_LIMITED),
)


def classify_provider_error(error: Exception) -> UpstreamErrorKind:
    """Classify a provider failure: structured code, then HTTP status, then message text."""
    code = getattr(error, "code", None)
    if isinstance(code, str) and code in ERROR_CODE_KINDS:
        return ERROR_CODE_KINDS[code]

    status_code = getattr(error, "status_code", None)
    if isinstance(status_code, int) and status_code in STATUS_CODE_KINDS:
        return STATUS_CODE_KINDS[status_code]

    message = str(error).lower()
    for pattern, kind in MESSAGE_PATTERN_KINDS:
        if pattern in message:
            return kind
    return UpstreamErrorKind.UNKNOWN


def resolve_api_key(explicit_key: str | None, settings: Settings) -> str:
    """Pick the credential for a call or raise ConfigurationError."""
    api_key = explicit_key or settings.openai_api_key
    if not api_key or not api_key.strip() or api_key == PLACEHOLDER_API_KEY:
        raise ConfigurationError()
    return api_key


def _default_client_factory(api_key: str, model: str | None) -> LLMInterface:
    return get_llm_client("openai", api_key=api_key, model=model)


def _to_case_study(item: Any) -> CaseStudy | None:
    if isinstance(item, DynamicCaseStudy):
        return item.to_case_study()
    if isinstance(item, CaseStudy):
        return item
    if isinstance(item, dict):
        try:
            return DynamicCaseStudy.model_validate(item).to_case_study()
        except ValidationError:
            return None
    return None


def _to_internal_link(item: Any) -> InternalLink | None:
    if isinstance(item, InternalLink):
        return item
    if isinstance(item, dict):
        try:
            return InternalLink.model_validate(item)
        except ValidationError:
            return None
    return None


class SEORewriter:
    """Rewrites an article for a target keyword through the LLM."""

    def __init__(
        self,
        settings: Settings | None = None,
        client_factory: LLMClientFactory | None = None,
        internal_link_generator: InternalLinkGenerator = generate_internal_links,
        parser: OutputParser | None = None,
        normalizer: ResponseNormalizer | None = None,
    ) -> None:
        """Initialize the rewriter.

        Args:
            settings: Settings; loaded from the environment when omitted
            client_factory: Builds an LLM client from (api_key, model)
            internal_link_generator: Proposes internal links for the prompt
            parser: Reply parser
            normalizer: Reply normalizer
        """
        self.settings = settings or get_settings()
        self.client_factory = client_factory or _default_client_factory
        self.internal_link_generator = internal_link_generator
        self.parser = parser or OutputParser()
        self.normalizer = normalizer or ResponseNormalizer()
        configure_logging(self.settings.log_level)

    async def rewrite(
        self,
        content: str,
        keyword: str,
        params: RewriteParams | None = None,
        case_study_lookup: CaseStudyLookup | None = None,
    ) -> RewriteResult:
        """Rewrite ``content`` for ``keyword``.

        Args:
            content: Original article text
            keyword: Target keyword
            params: Link, company, author, bio and credential
            case_study_lookup: Optional async case-study collaborator

        Returns:
            RewriteResult: fully populated result

        Raises:
            ConfigurationError: no usable API credential
            UpstreamError: the text-generation call failed
        """
        params = params or RewriteParams()
        request_id = uuid.uuid4().hex
        set_context(request_id=request_id, keyword=keyword)
        try:
            return await self._rewrite(content, keyword, params, case_study_lookup, request_id)
        finally:
            clear_context()

    async def _rewrite(
        self,
        content: str,
        keyword: str,
        params: RewriteParams,
        case_study_lookup: CaseStudyLookup | None,
        request_id: str,
    ) -> RewriteResult:
        api_key = resolve_api_key(params.api_key, self.settings)
        logger.rewrite_started(keyword, len(content))

        case_studies = await self._fetch_case_studies(case_study_lookup, keyword, content)
        internal_links = self._generate_internal_links(keyword, content, params.company_name)

        prompt = build_rewrite_prompt(
            RewritePromptInput(
                content=content,
                keyword=keyword,
                keyword_link=params.keyword_link,
                company_name=params.company_name,
                author_name=params.author_name,
                author_description=params.author_description,
                case_studies=case_studies,
                internal_links=internal_links,
            )
        )

        try:
            client = self.client_factory(api_key, self.settings.openai_model)
        except LLMConfigurationError as e:
            raise ConfigurationError() from e

        try:
            response = await client.generate(
                messages=[LLMMessage(role="user", content=prompt)],
                config=LLMRequestConfig(
                    temperature=TEMPERATURE,
                    max_tokens=MAX_OUTPUT_TOKENS,
                    response_format="json_object",
                ),
                metadata=LLMCallMetadata(request_id=request_id, keyword=keyword),
            )
        except Exception as e:
            kind = classify_provider_error(e)
            error = UpstreamError.from_kind(kind, str(e))
            logger.rewrite_failed(keyword, error.message, kind.value)
            raise error from e

        parsed = self.parser.parse_json(response.content)
        result = self.normalizer.normalize(
            parsed,
            keyword=keyword,
            company_name=params.company_name,
            author_name=params.author_name,
            case_studies=case_studies,
        )
        logger.rewrite_completed(
            keyword,
            word_count=result.word_count,
            seo_score=result.seo_score,
            parsed=parsed.success,
            fixes_applied=parsed.fixes_applied,
        )
        return result

    async def _fetch_case_studies(
        self,
        lookup: CaseStudyLookup | None,
        keyword: str,
        content: str,
    ) -> list[CaseStudy]:
        if lookup is None:
            return []
        try:
            found = await lookup(keyword, content, CASE_STUDY_MAX_ITEMS)
            studies = [study for study in map(_to_case_study, found or []) if study is not None]
        except Exception as e:
            error = CollaboratorError("case_study_lookup", e)
            logger.warning(
                "Case study lookup failed; continuing without case studies",
                extra_data={"error": error.message},
            )
            return []

        studies = studies[:CASE_STUDY_MAX_ITEMS]
        logger.info(
            f"Found {len(studies)} dynamic case studies for '{keyword}'",
            extra_data={"count": len(studies)},
        )
        return studies

    def _generate_internal_links(
        self,
        keyword: str,
        content: str,
        company_name: str | None,
    ) -> list[InternalLinkSuggestion]:
        domain = derive_site_domain(company_name)
        try:
            generated = self.internal_link_generator(keyword, content, domain)
            links = [link for link in map(_to_internal_link, generated or []) if link is not None]
        except Exception as e:
            error = CollaboratorError("internal_link_generator", e)
            logger.warning(
                "Internal link generation failed; continuing without links",
                extra_data={"error": error.message, "domain": domain},
            )
            return []
        return [link.to_suggestion() for link in links]


async def rewrite_content_with_seo(
    content: str,
    keyword: str,
    params: RewriteParams | None = None,
    case_study_lookup: CaseStudyLookup | None = None,
    settings: Settings | None = None,
) -> RewriteResult:
    """Module-level shortcut for a one-off rewrite with default collaborators."""
    rewriter = SEORewriter(settings=settings)
    return await rewriter.rewrite(content, keyword, params, case_study_lookup)
