"""OpenAI API クライアント実装.

リトライ禁止: SDK内部のリトライも無効化し（max_retries=0）、失敗は即座に返す。
エラーは構造化コード（invalid_api_key, insufficient_quota, rate_limit_exceeded等）
付きの LLMError に変換する。
"""

import logging
import os
import time

from openai import (
    APIConnectionError,
    APIStatusError,
    AsyncOpenAI,
    AuthenticationError,
    BadRequestError,
    RateLimitError,
)

from seo_rewriter.constants import DEFAULT_MODEL

from .base import LLMInterface
from .exceptions import ErrorCategory, LLMConfigurationError, LLMError
from .schemas import (
    LLMCallMetadata,
    LLMMessage,
    LLMRequestConfig,
    LLMResponse,
    TokenUsage,
)

logger = logging.getLogger(__name__)

# SDKがコードを返さない場合の既定値
CODE_INVALID_API_KEY = "invalid_api_key"
CODE_RATE_LIMIT = "rate_limit_exceeded"
CODE_CONNECTION = "connection_error"
CODE_EMPTY_RESPONSE = "empty_response"


class OpenAIClient(LLMInterface):
    """OpenAI API クライアント.

    対応モデル: gpt-4o 等
    """

    PROVIDER = "openai"
    DEFAULT_MODEL = DEFAULT_MODEL

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
    ) -> None:
        """初期化.

        Args:
            api_key: OpenAI APIキー（省略時は環境変数から取得）
            model: 使用するモデル名
        """
        resolved_api_key = api_key or os.getenv("OPENAI_API_KEY")
        if not resolved_api_key:
            raise LLMConfigurationError(
                message="OPENAI_API_KEY is not set",
                provider=self.PROVIDER,
            )

        self.client = AsyncOpenAI(api_key=resolved_api_key, max_retries=0)
        self.model = model or self.DEFAULT_MODEL

    @property
    def provider_name(self) -> str:
        """プロバイダー名を返す"""
        return self.PROVIDER

    @property
    def default_model(self) -> str:
        """デフォルトモデルIDを返す"""
        return self.DEFAULT_MODEL

    async def generate(
        self,
        messages: list[dict[str, str]] | list[LLMMessage],
        system_prompt: str | None = None,
        config: LLMRequestConfig | None = None,
        metadata: LLMCallMetadata | None = None,
    ) -> LLMResponse:
        """テキスト生成を実行する（1回のみ、リトライなし）.

        Args:
            messages: 会話履歴（role/content形式）
            system_prompt: システムプロンプト（省略時はメッセージのみ送信）
            config: リクエスト設定
            metadata: 追跡用メタデータ

        Returns:
            LLMResponse: 生成結果とメタデータ

        Raises:
            LLMError: API呼び出しエラー時、または空のレスポンス時
        """
        config = config or LLMRequestConfig()
        full_messages = self._normalize_messages(messages)
        if system_prompt:
            full_messages = [{"role": "system", "content": system_prompt}, *full_messages]

        request_kwargs: dict = {
            "model": self.model,
            "messages": full_messages,
            "temperature": config.temperature,
            "max_tokens": config.max_tokens,
        }
        if config.response_format == "json_object":
            request_kwargs["response_format"] = {"type": "json_object"}

        self._log_request(self.model, config, metadata)
        started = time.monotonic()

        try:
            response = await self.client.chat.completions.create(**request_kwargs)
        except AuthenticationError as e:
            logger.error("OpenAI API authentication error: %s", str(e))
            error = LLMError(
                message=f"OpenAI API authentication failed: {e}",
                category=ErrorCategory.NON_RETRYABLE,
                provider=self.PROVIDER,
                model=self.model,
                original_error=e,
                code=e.code or CODE_INVALID_API_KEY,
                status_code=e.status_code,
            )
            self._log_error(error, metadata)
            raise error from e
        except RateLimitError as e:
            logger.warning("OpenAI API rate limit / quota error: %s", str(e))
            error = LLMError(
                message=f"OpenAI API rate limit: {e}",
                category=ErrorCategory.RETRYABLE,
                provider=self.PROVIDER,
                model=self.model,
                original_error=e,
                code=e.code or CODE_RATE_LIMIT,
                status_code=e.status_code,
            )
            self._log_error(error, metadata)
            raise error from e
        except BadRequestError as e:
            logger.error("OpenAI API bad request: %s", str(e))
            error = LLMError(
                message=f"OpenAI API bad request: {e}",
                category=ErrorCategory.NON_RETRYABLE,
                provider=self.PROVIDER,
                model=self.model,
                original_error=e,
                code=e.code,
                status_code=e.status_code,
            )
            self._log_error(error, metadata)
            raise error from e
        except APIStatusError as e:
            category = (
                ErrorCategory.RETRYABLE if e.status_code >= 500 else ErrorCategory.NON_RETRYABLE
            )
            logger.error("OpenAI API error: status=%d, %s", e.status_code, str(e))
            error = LLMError(
                message=f"OpenAI API error: {e}",
                category=category,
                provider=self.PROVIDER,
                model=self.model,
                original_error=e,
                code=e.code,
                status_code=e.status_code,
            )
            self._log_error(error, metadata)
            raise error from e
        except APIConnectionError as e:
            logger.warning("OpenAI API connection error: %s", str(e))
            error = LLMError(
                message=f"OpenAI API connection failed: {e}",
                category=ErrorCategory.RETRYABLE,
                provider=self.PROVIDER,
                model=self.model,
                original_error=e,
                code=CODE_CONNECTION,
            )
            self._log_error(error, metadata)
            raise error from e

        latency_ms = (time.monotonic() - started) * 1000
        choice = response.choices[0]
        content = choice.message.content
        if not content:
            error = LLMError(
                message="Resposta vazia da API OpenAI",
                category=ErrorCategory.VALIDATION_FAIL,
                provider=self.PROVIDER,
                model=self.model,
                code=CODE_EMPTY_RESPONSE,
            )
            self._log_error(error, metadata)
            raise error

        usage = response.usage
        token_usage = TokenUsage(
            input=usage.prompt_tokens if usage else 0,
            output=usage.completion_tokens if usage else 0,
        )

        result = LLMResponse(
            content=content,
            token_usage=token_usage,
            model=response.model,
            finish_reason=choice.finish_reason,
            provider=self.PROVIDER,
            latency_ms=latency_ms,
        )
        self._log_response(result, metadata)
        return result
