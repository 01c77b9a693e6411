"""Tests for the rewrite instruction prompt."""

import json

from seo_rewriter.prompts import (
    QUALITY_CRITERIA,
    WORD_SUBSTITUTIONS,
    RewritePromptInput,
    build_output_example,
    build_rewrite_prompt,
)
from seo_rewriter.prompts.rewrite import render_project_data
from seo_rewriter.schemas.rewrite import CaseStudy, InternalLinkSuggestion


def _extract_schema(prompt: str) -> dict:
    """The JSON example is the trailing block of the prompt."""
    start = prompt.index("{", prompt.index("Responda em formato JSON"))
    return json.loads(prompt[start:])


class TestQualityCriteria:
    """Tests for the fixed rule set."""

    def test_twelve_criteria_in_order(self) -> None:
        assert [c.number for c in QUALITY_CRITERIA] == list(range(1, 13))

    def test_render_includes_rules(self) -> None:
        rendered = QUALITY_CRITERIA[0].render()
        assert rendered.startswith("1. HELPFULNESS (Utilidade):")
        assert "- Soluciona problemas reais" in rendered

    def test_preamble_rendered_after_title(self) -> None:
        lines = QUALITY_CRITERIA[2].render().splitlines()
        assert lines[1].startswith("**UNIVERSAL")


class TestBuildRewritePrompt:
    """Tests for build_rewrite_prompt."""

    def test_deterministic(self) -> None:
        """Identical inputs produce identical prompts."""
        data = RewritePromptInput(content="Texto original.", keyword="teste", company_name="Acme")
        assert build_rewrite_prompt(data) == build_rewrite_prompt(data)

    def test_contains_content_verbatim(self) -> None:
        content = "Linha 1\n\n<p>Linha 2 com {chaves} e \"aspas\"</p>"
        prompt = build_rewrite_prompt(RewritePromptInput(content=content, keyword="teste"))
        assert f"CONTEÚDO ORIGINAL:\n{content}" in prompt

    def test_keyword_and_density(self) -> None:
        prompt = build_rewrite_prompt(RewritePromptInput(content="x", keyword="marketing digital"))
        assert '- Palavra-chave principal: "marketing digital"' in prompt
        assert "- Densidade ideal: 1-3%" in prompt

    def test_all_substitutions_listed(self) -> None:
        prompt = build_rewrite_prompt(RewritePromptInput(content="x", keyword="teste"))
        for old, new in WORD_SUBSTITUTIONS:
            assert f'"{old}" -> "{new}"' in prompt

    def test_schema_is_valid_json(self) -> None:
        prompt = build_rewrite_prompt(RewritePromptInput(content="x", keyword="teste"))
        schema = _extract_schema(prompt)
        assert schema["metaDescription"]
        assert len(schema["faq"]) == 8

    def test_optional_sections_absent_without_inputs(self) -> None:
        """Author and company lines appear only when provided."""
        prompt = build_rewrite_prompt(RewritePromptInput(content="x", keyword="teste"))
        schema = _extract_schema(prompt)

        assert "- Empresa:" not in prompt
        assert "- Autor:" not in prompt
        assert "- Link obrigatório:" not in prompt
        assert "authorBio" not in schema
        assert "ctaSection" not in schema

    def test_optional_sections_present_with_inputs(self) -> None:
        data = RewritePromptInput(
            content="x",
            keyword="teste",
            keyword_link="https://acme.com.br/teste",
            company_name="Acme",
            author_name="Ana",
            author_description="Especialista em SEO",
        )
        prompt = build_rewrite_prompt(data)
        schema = _extract_schema(prompt)

        assert '- Empresa: "Acme"' in prompt
        assert '- Autor: "Ana"' in prompt
        assert '- Bio do autor: "Especialista em SEO"' in prompt
        assert "APENAS na primeira menção" in prompt
        assert schema["authorBio"] == "Mini biografia do autor Ana baseada em: Especialista em SEO"
        assert set(schema["ctaSection"]) == {"title", "text", "buttonText"}
        assert "Acme" in schema["ctaSection"]["buttonText"]

    def test_non_ascii_not_escaped(self) -> None:
        prompt = build_rewrite_prompt(RewritePromptInput(content="x", keyword="ação"))
        assert "\\u" not in prompt


class TestBuildOutputExample:
    """Tests for build_output_example."""

    def test_case_studies_and_links_inline(self) -> None:
        data = RewritePromptInput(
            content="x",
            keyword="teste",
            case_studies=[
                CaseStudy(
                    title="Caso Acme",
                    description="Cresceu",
                    results="+40%",
                    external_link="https://acme.com.br",
                )
            ],
            internal_links=[
                InternalLinkSuggestion(
                    anchor_text="teste",
                    target_page="https://acme.com.br/tag/teste",
                    context="link interno relevante",
                    relevance_score=0.8,
                )
            ],
        )
        example = build_output_example(data)

        assert example["caseStudies"] == [
            {
                "title": "Caso Acme",
                "description": "Cresceu",
                "results": "+40%",
                "externalLink": "https://acme.com.br",
            }
        ]
        assert example["internalLinking"][0]["anchorText"] == "teste"
        assert example["internalLinking"][0]["relevanceScore"] == 0.8

    def test_empty_collaborator_lists(self) -> None:
        example = build_output_example(RewritePromptInput(content="x", keyword="teste"))
        assert example["caseStudies"] == []
        assert example["internalLinking"] == []

    def test_author_bio_without_description(self) -> None:
        example = build_output_example(
            RewritePromptInput(content="x", keyword="teste", author_name="Ana")
        )
        assert example["authorBio"] == "Mini biografia do autor Ana"


class TestRenderProjectData:
    """Tests for render_project_data."""

    def test_minimal(self) -> None:
        rendered = render_project_data(RewritePromptInput(content="x", keyword="teste"))
        assert rendered.splitlines() == [
            "DADOS DO PROJETO:",
            '- Palavra-chave principal: "teste"',
            "- Densidade ideal: 1-3%",
        ]
