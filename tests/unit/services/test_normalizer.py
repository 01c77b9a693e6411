"""Tests for ResponseNormalizer."""

from seo_rewriter.helpers import OutputParser
from seo_rewriter.schemas.rewrite import CaseStudy, CTASection
from seo_rewriter.services.normalizer import ResponseNormalizer, build_default_fields


def _normalize(raw: str, keyword: str = "teste", **kwargs):
    parsed = OutputParser().parse_json(raw)
    return ResponseNormalizer().normalize(parsed, keyword=keyword, **kwargs)


class TestBuildDefaultFields:
    """build_default_fields tests."""

    def test_keyword_defaults(self) -> None:
        fields = build_default_fields("teste")

        assert fields["meta_description"] == "teste - resumo otimizado para SEO"
        assert fields["featured_image"].title == "Imagem sobre teste"
        assert fields["featured_image"].alt_text == "teste - imagem ilustrativa"
        assert fields["faq"][0].question == "O que é teste?"
        assert fields["helpfulness_score"] == 85
        assert fields["ai_optimization_score"] == 78

    def test_optional_sections(self) -> None:
        fields = build_default_fields("teste")
        assert fields["author_bio"] is None
        assert fields["cta_section"] is None

        fields = build_default_fields("teste", company_name="Acme", author_name="Ana")
        assert fields["author_bio"] == "Biografia do autor Ana"
        assert isinstance(fields["cta_section"], CTASection)
        assert fields["cta_section"].button_text == "Falar com Acme"


class TestNormalizeParsed:
    """Normalization of a parsed JSON object."""

    def test_metrics_recomputed(self) -> None:
        """Model-reported metrics are ignored."""
        result = _normalize(
            '{"rewrittenContent": "<p>um teste e outro teste</p>",'
            ' "wordCount": 9999, "seoScore": 99, "keywordDensity": "50%"}'
        )

        assert result.word_count == 5
        assert result.keyword_density == "40.0%"
        assert result.seo_score == 30
        assert result.readability_score == "Regular"

    def test_valid_fields_overlay_defaults(self) -> None:
        result = _normalize(
            '{"rewrittenContent": "<p>teste</p>", "metaDescription": "Meta própria",'
            ' "qualityScore": 91, "faq": [{"question": "Q?", "answer": "A."}],'
            ' "entities": {"brands": ["Sebrae"]},'
            ' "schemaMarkup": {"faqSchema": true, "articleSchema": "sim"}}'
        )

        assert result.meta_description == "Meta própria"
        assert result.quality_score == 91
        assert result.helpfulness_score == 85
        assert [item.question for item in result.faq] == ["Q?"]
        assert result.entities.brands == ["Sebrae"]
        assert result.schema_markup.faq_schema is True
        assert result.schema_markup.article_schema is True

    def test_wrong_types_fall_back(self) -> None:
        result = _normalize(
            '{"rewrittenContent": "<p>teste</p>", "metaDescription": 42,'
            ' "eatScore": "alto", "structureScore": 250, "helpfulnessScore": true,'
            ' "featuredImage": "img.png", "faq": "nenhuma"}'
        )

        assert result.meta_description == "teste - resumo otimizado para SEO"
        assert result.eat_score == 75
        assert result.structure_score == 82
        assert result.helpfulness_score == 85
        assert result.featured_image.title == "Imagem sobre teste"
        assert result.faq[0].question == "O que é teste?"

    def test_malformed_list_items_dropped(self) -> None:
        result = _normalize(
            '{"rewrittenContent": "x", "citations": ['
            '{"type": "study", "text": "IBGE"}, {"text": "sem tipo"}, "texto solto"]}'
        )

        assert len(result.citations) == 1
        assert result.citations[0].credibility == "medium"

    def test_all_malformed_faq_keeps_default(self) -> None:
        result = _normalize('{"rewrittenContent": "a", "faq": [{"q": 1}]}')

        assert len(result.faq) == 1
        assert result.faq[0].question == "O que é teste?"
        assert result.faq[0].answer == "Resposta baseada no conteúdo reescrito."

    def test_empty_faq_list_is_respected(self) -> None:
        result = _normalize('{"rewrittenContent": "a", "faq": []}')
        assert result.faq == []

    def test_all_malformed_case_studies_keep_fetched(self) -> None:
        studies = [CaseStudy(title="Real", description="Caso real")]
        result = _normalize(
            '{"rewrittenContent": "a", "caseStudies": [{"nome": "x"}]}',
            case_studies=studies,
        )

        assert [study.title for study in result.case_studies] == ["Real"]

    def test_limits_enforced(self) -> None:
        faq = ", ".join(f'{{"question": "Q{i}", "answer": "A{i}"}}' for i in range(12))
        studies = ", ".join(f'{{"title": "C{i}", "description": "D{i}"}}' for i in range(5))
        result = _normalize(
            f'{{"rewrittenContent": "x", "metaDescription": "{"m" * 300}",'
            f' "faq": [{faq}], "caseStudies": [{studies}]}}'
        )

        assert len(result.meta_description) == 155
        assert len(result.faq) == 8
        assert [study.title for study in result.case_studies] == ["C0", "C1", "C2"]

    def test_missing_rewritten_content(self) -> None:
        result = _normalize('{"metaDescription": "Meta"}')

        assert result.rewritten_content == ""
        assert result.word_count == 0
        assert result.seo_score == 10

    def test_fetched_case_studies_used_when_reply_has_none(self) -> None:
        studies = [CaseStudy(title="Real", description="Caso real")]
        result = _normalize('{"rewrittenContent": "x"}', case_studies=studies)

        assert [study.title for study in result.case_studies] == ["Real"]

    def test_author_and_cta_only_with_inputs(self) -> None:
        raw = (
            '{"rewrittenContent": "x", "authorBio": "Bio inventada",'
            ' "ctaSection": {"title": "T", "text": "X", "buttonText": "B"}}'
        )

        without = _normalize(raw)
        assert without.author_bio is None
        assert without.cta_section is None

        with_inputs = _normalize(raw, company_name="Acme", author_name="Ana")
        assert with_inputs.author_bio == "Bio inventada"
        assert with_inputs.cta_section.button_text == "B"


class TestNormalizeUnparsed:
    """Normalization when the reply is not a JSON object."""

    def test_raw_text_becomes_content(self) -> None:
        raw = "<p>Texto teste direto</p>"
        result = _normalize(raw)

        assert result.rewritten_content == raw
        assert result.word_count == 3
        assert result.meta_description == "teste - resumo otimizado para SEO"
        assert result.helpfulness_score == 85
        assert result.quality_score == 80
        assert result.eat_score == 75
        assert result.structure_score == 82
        assert result.ai_optimization_score == 78
        assert result.faq[0].question == "O que é teste?"
        assert result.schema_markup.article_schema is True

    def test_defaults_include_optional_sections_with_inputs(self) -> None:
        result = _normalize("não é json", company_name="Acme", author_name="Ana")

        assert result.author_bio == "Biografia do autor Ana"
        assert result.cta_section.title == "Transforme seu negócio com teste"

    def test_json_array_takes_fallback(self) -> None:
        result = _normalize('["teste"]')
        assert result.rewritten_content == '["teste"]'
