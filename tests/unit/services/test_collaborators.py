"""Tests for the lookup collaborators."""

from seo_rewriter.services.collaborators import (
    DynamicCaseStudy,
    InternalLink,
    derive_site_domain,
    generate_internal_links,
    slugify,
)


class TestDeriveSiteDomain:
    """derive_site_domain tests."""

    def test_company_name(self) -> None:
        assert derive_site_domain("Minha Empresa") == "minhaempresa.com.br"

    def test_whitespace_removed(self) -> None:
        assert derive_site_domain("  Acme \t Corp ") == "acmecorp.com.br"

    def test_placeholder_without_company(self) -> None:
        assert derive_site_domain(None) == "exemplo.com.br"
        assert derive_site_domain("") == "exemplo.com.br"


class TestSlugify:
    """slugify tests."""

    def test_accents_folded(self) -> None:
        assert slugify("Gestão de Tráfego") == "gestao-de-trafego"

    def test_punctuation_collapsed(self) -> None:
        assert slugify("  SEO: guia 2024!  ") == "seo-guia-2024"


class TestGenerateInternalLinks:
    """generate_internal_links tests."""

    def test_links_on_domain(self) -> None:
        links = generate_internal_links("Marketing Digital", "conteúdo", "acme.com.br")

        assert [link.url for link in links] == [
            "https://acme.com.br/tag/marketing-digital",
            "https://acme.com.br/blog/marketing-digital",
            "https://acme.com.br/blog",
        ]
        assert links[0].text == "Marketing Digital"

    def test_to_suggestion(self) -> None:
        suggestion = InternalLink(text="seo", url="https://a.com.br/tag/seo").to_suggestion()
        assert suggestion.anchor_text == "seo"
        assert suggestion.target_page == "https://a.com.br/tag/seo"
        assert suggestion.context == "link interno relevante"
        assert suggestion.relevance_score == 0.8


class TestDynamicCaseStudy:
    """DynamicCaseStudy tests."""

    def test_to_case_study(self) -> None:
        study = DynamicCaseStudy.model_validate(
            {
                "title": "Loja X",
                "description": "Dobrou as vendas",
                "growthMetric": "+100%",
                "sourceUrl": "https://fonte.com.br",
            }
        ).to_case_study()

        assert study.results == "+100%"
        assert study.external_link == "https://fonte.com.br"
