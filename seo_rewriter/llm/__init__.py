"""LLMクライアントモジュール

プロバイダー非依存のインターフェースと OpenAI クライアントを提供。

使用例:
    from seo_rewriter.llm import OpenAIClient, LLMRequestConfig

    client = OpenAIClient(api_key="sk-...")
    response = await client.generate(
        messages=[{"role": "user", "content": "Olá"}],
        config=LLMRequestConfig(response_format="json_object"),
    )
"""

from .base import LLMClientFactory, LLMInterface, get_llm_client
from .exceptions import ErrorCategory, LLMConfigurationError, LLMError
from .openai import OpenAIClient
from .schemas import (
    LLMCallMetadata,
    LLMMessage,
    LLMRequestConfig,
    LLMResponse,
    TokenUsage,
)

__all__ = [
    # Base
    "LLMInterface",
    "LLMClientFactory",
    "get_llm_client",
    # Clients
    "OpenAIClient",
    # Schemas
    "LLMResponse",
    "LLMMessage",
    "LLMRequestConfig",
    "LLMCallMetadata",
    "TokenUsage",
    # Exceptions
    "ErrorCategory",
    "LLMError",
    "LLMConfigurationError",
]
