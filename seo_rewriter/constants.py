"""Rewriter Constants

Centralized constants for the rewriter to avoid duplicating literals across the
parse-success and parse-failure paths.
"""

# LLM request parameters
DEFAULT_MODEL = "gpt-4o"
MAX_OUTPUT_TOKENS = 4000
TEMPERATURE = 0.7

# Placeholder key that some deployments ship in their env templates
PLACEHOLDER_API_KEY = "dummy-key"

# Result limits
META_DESCRIPTION_MAX_LENGTH = 155
FAQ_MAX_ITEMS = 8
CASE_STUDY_MAX_ITEMS = 3

# Domain used for internal link suggestions
DOMAIN_TLD = ".com.br"
PLACEHOLDER_DOMAIN = "exemplo.com.br"

# SEO score heuristic
SEO_SCORE_MIN = 1
SEO_SCORE_MAX = 100
SEO_SCORE_PER_OCCURRENCE = 10
SEO_SCORE_LONG_CONTENT_BONUS = 20
SEO_SCORE_SHORT_CONTENT_BONUS = 10
SEO_SCORE_LONG_CONTENT_THRESHOLD = 300

# Readability label (palavras)
READABILITY_GOOD_THRESHOLD = 500
READABILITY_GOOD = "Boa"
READABILITY_REGULAR = "Regular"

# Quality scores used when the model omits or malforms them
DEFAULT_SCORES: dict[str, int] = {
    "helpfulness_score": 85,
    "quality_score": 80,
    "eat_score": 75,
    "structure_score": 82,
    "ai_optimization_score": 78,
}

# Single configuration row identifier
CONFIG_SINGLETON_ID = 1

DEFAULT_HISTORY_LIMIT = 10
