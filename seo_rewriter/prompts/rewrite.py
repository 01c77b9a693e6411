"""Instruction prompt for the SEO rewrite.

The prompt is assembled from fixed blocks plus per-call parameters:
1. Quality rules: 12 named content-quality dimensions with bullet sub-rules
2. Project data: keyword, density target, link, company, author, bio
3. Plain-language rules and mandatory word substitutions
4. Original content, verbatim
5. Universal E-E-A-T instruction
6. JSON output schema with example values (case studies and internal links
   serialized inline)

Building is deterministic: identical inputs always produce the same string.
"""

import json
from dataclasses import dataclass, field
from typing import Any

from seo_rewriter.schemas.rewrite import CaseStudy, InternalLinkSuggestion


@dataclass(frozen=True)
class QualityCriterion:
    """One named dimension of the quality rule set."""

    number: int
    title: str
    rules: tuple[str, ...]
    preamble: str | None = None

    def render(self) -> str:
        lines = [f"{self.number}. {self.title}:"]
        if self.preamble:
            lines.append(self.preamble)
        lines.extend(f"- {rule}" for rule in self.rules)
        return "\n".join(lines)


QUALITY_CRITERIA: tuple[QualityCriterion, ...] = (
    QualityCriterion(
        1,
        "HELPFULNESS (Utilidade)",
        (
            "Intenção de busca clara e direta",
            "Respostas objetivas sem rodeios",
            "Valor prático imediato para o leitor",
            "Soluciona problemas reais",
        ),
    ),
    QualityCriterion(
        2,
        "QUALITY (Qualidade)",
        (
            "Conteúdo atualizado e profundo",
            "Informações precisas e verificáveis",
            "Linguagem clara e acessível",
            "Sem erros factuais",
        ),
    ),
    QualityCriterion(
        3,
        "E-E-A-T (Experiência, Expertise, Autoridade, Confiabilidade) - OBRIGATÓRIO PARA TODOS OS NICHOS",
        (
            "SEMPRE demonstre experiência real com exemplos concretos",
            "SEMPRE cite fontes confiáveis (.gov, .edu, empresas estabelecidas)",
            "SEMPRE mencione especialistas reconhecidos do setor",
            "SEMPRE use dados verificáveis e estatísticas oficiais",
            "SEMPRE inclua estudos de caso reais brasileiros",
            "SEMPRE estabeleça autoridade mencionando entidades relevantes",
            "SEMPRE cite organizações confiáveis (SEBRAE, BNDES, universidades)",
            "APLICAÇÃO UNIVERSAL: Funciona para qualquer nicho (saúde, tecnologia, "
            "finanças, culinária, educação, etc.)",
        ),
        preamble="**UNIVERSAL - APLIQUE A QUALQUER TEMA/NICHO:**",
    ),
    QualityCriterion(
        4,
        "ESTRUTURA E FORMATAÇÃO",
        (
            "Chunking (blocos independentes de 2-3 parágrafos)",
            "Parágrafos curtos (máximo 3 linhas)",
            "H2/H3 descritivos e otimizados",
            "Listas numeradas e bullets",
            "Organização visual clara",
        ),
    ),
    QualityCriterion(
        5,
        "PAGE EXPERIENCE",
        (
            "Otimizado para mobile",
            "Carregamento rápido",
            "UX limpa e sem poluição visual",
            "Navegação intuitiva",
        ),
    ),
    QualityCriterion(
        6,
        "CHUNK & ANSWER STRUCTURE",
        (
            "Blocos independentes e completos",
            "Seção Q&A robusta (8+ perguntas)",
            "Resumo executivo no início",
            "Conclusão em 2 parágrafos",
        ),
    ),
    QualityCriterion(
        7,
        "RICH CONTENT",
        (
            "Sugestões de gráficos e tabelas",
            "Descrições de imagens com alt-text otimizado",
            "Cards de informação",
            "Elementos visuais estratégicos",
        ),
    ),
    QualityCriterion(
        8,
        "CITATIONS & EVIDENCE - OBRIGATÓRIO UNIVERSALMENTE",
        (
            "SEMPRE links para fontes confiáveis (.gov, .edu, grandes empresas)",
            "SEMPRE dados estatísticos recentes e verificáveis",
            "SEMPRE estudos de caso reais brasileiros (fornecidos no JSON)",
            "SEMPRE citações de especialistas reconhecidos no Brasil",
            "SEMPRE menções a instituições confiáveis (IBGE, FGV, USP, etc.)",
            "APLICAÇÃO: Saúde (Anvisa, Ministério da Saúde), Educação (MEC, universidades), "
            "Tecnologia (ABINEE, Softex), etc.",
        ),
        preamble="**PARA TODOS OS NICHOS SEM EXCEÇÃO:**",
    ),
    QualityCriterion(
        9,
        "AI-SEARCH OPTIMIZATION",
        (
            "Estrutura indexável por IA",
            "Headings semanticamente claros",
            "Chunking forte para snippets",
            "Linguagem natural e conversacional",
        ),
    ),
    QualityCriterion(
        10,
        "INTERNAL LINKING & CONTEXT",
        (
            "Contexto rico sobre entidades",
            "Links internos relevantes sugeridos",
            "Texto âncora otimizado",
            "Arquitetura de informação clara",
        ),
    ),
    QualityCriterion(
        11,
        "ENTITY OPTIMIZATION - UNIVERSAL PARA TODOS OS NICHOS",
        (
            "SEMPRE mencione marcas brasileiras estabelecidas e reconhecidas",
            "SEMPRE cite pessoas influentes e especialistas do setor no Brasil",
            "SEMPRE inclua locais geográficos relevantes (cidades, regiões, universidades)",
            "SEMPRE explique conceitos técnicos de forma acessível",
            "EXEMPLOS UNIVERSAIS: Sebrae, BNDES, universidades públicas, grandes empresas brasileiras",
            "APLICAÇÃO: Qualquer nicho tem entidades relevantes no Brasil",
        ),
        preamble="**OBRIGATÓRIO INDEPENDENTE DO TEMA:**",
    ),
    QualityCriterion(
        12,
        "SCHEMA MARKUP",
        (
            "Estrutura compatível com dados estruturados",
            "Marcações Article, Author, FAQ",
            "Organization schema",
            "Review e Rating quando aplicável",
        ),
    ),
)

SYSTEM_INTRO = (
    "Você é um especialista em criação de conteúdo que segue rigorosamente os 12 critérios "
    "de qualidade do Google. Sua missão é criar conteúdo que atenda aos mais altos padrões "
    "de E-E-A-T e otimização para IA."
)

PLAIN_LANGUAGE_RULES: tuple[str, ...] = (
    "Use só palavras que todo mundo conhece",
    "Frases de máximo 15 palavras",
    "Tom de conversa amigável",
    "Exemplos do dia a dia",
    "Zero jargões técnicos sem explicação",
)

# (termo proibido, substituto obrigatório)
WORD_SUBSTITUTIONS: tuple[tuple[str, str], ...] = (
    ("Constitui", "É"),
    ("Finalidade", "Objetivo"),
    ("Estabelecer", "Criar"),
    ("Implementar", "Colocar em prática"),
    ("Otimizar", "Melhorar"),
    ("Estratégia", "Plano"),
    ("Metodologia", "Método"),
    ("Fundamentalmente", "Basicamente"),
)

UNIVERSAL_REQUIREMENTS: tuple[str, ...] = (
    "Pelo menos 3 fontes confiáveis brasileiras (.gov, .edu, organizações estabelecidas)",
    "Pelo menos 2 especialistas/autoridades reconhecidas no Brasil",
    "Dados estatísticos verificáveis",
    "Estudos de caso reais brasileiros (fornecidos)",
    "Menções a entidades relevantes (universidades, órgãos públicos, empresas consolidadas)",
    "Esta regra se aplica A QUALQUER TEMA sem exceção",
)

IDEAL_DENSITY = "1-3%"


@dataclass
class RewritePromptInput:
    """Everything the instruction needs for one rewrite."""

    content: str
    keyword: str
    keyword_link: str | None = None
    company_name: str | None = None
    author_name: str | None = None
    author_description: str | None = None
    case_studies: list[CaseStudy] = field(default_factory=list)
    internal_links: list[InternalLinkSuggestion] = field(default_factory=list)


def render_quality_rules() -> str:
    """Intro plus the 12 quality dimensions."""
    criteria = "\n\n".join(criterion.render() for criterion in QUALITY_CRITERIA)
    return f"{SYSTEM_INTRO}\n\nCRITÉRIOS OBRIGATÓRIOS DO GOOGLE (12 PONTOS):\n\n{criteria}"


def render_project_data(data: RewritePromptInput) -> str:
    lines = [
        "DADOS DO PROJETO:",
        f'- Palavra-chave principal: "{data.keyword}"',
        f"- Densidade ideal: {IDEAL_DENSITY}",
    ]
    if data.keyword_link:
        lines.append(
            f'- Link obrigatório: "{data.keyword_link}" (APENAS na primeira menção da palavra-chave)'
        )
    if data.company_name:
        lines.append(f'- Empresa: "{data.company_name}"')
    if data.author_name:
        lines.append(f'- Autor: "{data.author_name}"')
    if data.author_description:
        lines.append(f'- Bio do autor: "{data.author_description}"')
    return "\n".join(lines)


def render_language_rules() -> str:
    rules = "\n".join(f"- {rule}" for rule in PLAIN_LANGUAGE_RULES)
    substitutions = "\n".join(f'"{old}" -> "{new}"' for old, new in WORD_SUBSTITUTIONS)
    return (
        f"LINGUAGEM ULTRA POPULAR (OBRIGATÓRIO):\n{rules}\n\n"
        f"TRANSFORMAÇÕES OBRIGATÓRIAS:\n{substitutions}"
    )


def render_universal_instruction() -> str:
    requirements = "\n".join(f"- {item}" for item in UNIVERSAL_REQUIREMENTS)
    return (
        "INSTRUÇÃO CRÍTICA PARA APLICAÇÃO UNIVERSAL:\n"
        "INDEPENDENTE DO NICHO/TEMA (saúde, educação, tecnologia, culinária, finanças, beleza, "
        "esportes, etc.), você DEVE SEMPRE incluir:\n"
        f"{requirements}"
    )


def build_output_example(data: RewritePromptInput) -> dict[str, Any]:
    """JSON example the model must follow, in wire (camelCase) shape."""
    example: dict[str, Any] = {
        "rewrittenContent": "conteúdo reescrito completo formatado em HTML com estrutura otimizada",
        "metaDescription": "meta description de até 155 caracteres otimizada",
        "wordCount": 1200,
        "keywordDensity": "2.1%",
        "seoScore": 95,
        "readabilityScore": "Muito fácil de ler",
        "helpfulnessScore": 98,
        "qualityScore": 96,
        "eatScore": 94,
        "structureScore": 97,
        "aiOptimizationScore": 95,
        "featuredImage": {
            "title": "título otimizado para a imagem",
            "altText": "alt text com palavra-chave principal",
            "keywords": ["palavra1", "palavra2", "palavra3"],
        },
        "faq": [
            {"question": f"pergunta relevante {i}", "answer": f"resposta concisa e útil {i}"}
            for i in range(1, 9)
        ],
        "caseStudies": [
            study.model_dump(by_alias=True) for study in data.case_studies
        ],
        "richContent": {
            "suggestedGraphics": [
                {
                    "type": "chart",
                    "title": "Gráfico relevante",
                    "description": "Descrição do gráfico",
                    "dataPoints": ["ponto1", "ponto2", "ponto3"],
                },
                {
                    "type": "infographic",
                    "title": "Infográfico sugerido",
                    "description": "Descrição do infográfico",
                    "dataPoints": ["dado1", "dado2"],
                },
            ],
            "suggestedImages": [
                {
                    "position": "início do artigo",
                    "description": "Imagem principal",
                    "altText": "alt text otimizado",
                    "caption": "legenda da imagem",
                },
                {
                    "position": "meio do artigo",
                    "description": "Imagem de apoio",
                    "altText": "alt text descritivo",
                    "caption": "legenda explicativa",
                },
            ],
            "visualElements": [
                {
                    "type": "callout",
                    "content": "Dica importante em destaque",
                    "position": "após segundo parágrafo",
                },
                {
                    "type": "quote",
                    "content": "Citação relevante de especialista",
                    "position": "meio do artigo",
                },
            ],
        },
        "citations": [
            {
                "type": "study",
                "text": "Estudo da [Instituição]",
                "suggestedLink": "https://exemplo.gov.br",
                "credibility": "high",
            },
            {
                "type": "statistic",
                "text": "85% das empresas brasileiras",
                "suggestedLink": "https://ibge.gov.br",
                "credibility": "high",
            },
            {
                "type": "expert",
                "text": "Segundo especialista [Nome]",
                "suggestedLink": "https://linkedin.com/expert",
                "credibility": "medium",
            },
        ],
        "internalLinking": [
            link.model_dump(by_alias=True) for link in data.internal_links
        ],
        "entities": {
            "brands": ["Google", "Facebook", "Instagram", "LinkedIn"],
            "people": ["Neil Patel", "Gary Vaynerchuk"],
            "locations": ["Brasil", "São Paulo", "Rio de Janeiro"],
            "concepts": ["marketing digital", "SEO", "redes sociais"],
        },
        "schemaMarkup": {
            "articleSchema": True,
            "authorSchema": True,
            "faqSchema": True,
            "organizationSchema": True,
            "reviewSchema": False,
        },
    }
    if data.author_name:
        bio = f"Mini biografia do autor {data.author_name}"
        if data.author_description:
            bio += f" baseada em: {data.author_description}"
        example["authorBio"] = bio
    if data.company_name:
        example["ctaSection"] = {
            "title": f"Título persuasivo relacionado ao {data.keyword} para {data.company_name}",
            "text": (
                f"Texto de call-to-action convincente conectando o artigo sobre {data.keyword} "
                f"com os serviços da {data.company_name}"
            ),
            "buttonText": f"Botão de ação relevante para {data.company_name}",
        }
    return example


def build_rewrite_prompt(data: RewritePromptInput) -> str:
    """Assemble the full instruction string for one rewrite."""
    output_schema = json.dumps(build_output_example(data), ensure_ascii=False, indent=2)
    sections = [
        render_quality_rules(),
        "TAREFA ESPECÍFICA:\nReescreva o conteúdo seguindo TODOS os 12 critérios do Google acima.",
        render_project_data(data),
        render_language_rules(),
        f"CONTEÚDO ORIGINAL:\n{data.content}",
        render_universal_instruction(),
        "Responda em formato JSON com esta estrutura COMPLETA seguindo os 12 critérios do Google:\n"
        f"{output_schema}",
    ]
    return "\n\n".join(sections)
