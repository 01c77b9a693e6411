"""LLM共通インターフェース

全プロバイダーが実装すべき抽象基底クラス。
リトライ禁止：失敗は即座に呼び出し元へ返す。
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable

from .schemas import (
    LLMCallMetadata,
    LLMMessage,
    LLMRequestConfig,
    LLMResponse,
)

logger = logging.getLogger(__name__)


class LLMInterface(ABC):
    """LLM共通インターフェース

    重要な設計原則:
    - リトライ禁止: 同一条件の再試行も行わない
    - エラー分類統一: LLMErrorにカテゴリと構造化コードを付与する
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """プロバイダー名を返す"""
        ...

    @property
    @abstractmethod
    def default_model(self) -> str:
        """デフォルトモデルIDを返す"""
        ...

    @abstractmethod
    async def generate(
        self,
        messages: list[dict[str, str]] | list[LLMMessage],
        system_prompt: str | None = None,
        config: LLMRequestConfig | None = None,
        metadata: LLMCallMetadata | None = None,
    ) -> LLMResponse:
        """テキスト生成

        Args:
            messages: 会話履歴（role/contentの辞書リスト、またはLLMMessage）
            system_prompt: システムプロンプト（省略可）
            config: リクエスト設定（temperature, max_tokens, response_format）
            metadata: 追跡用メタデータ

        Returns:
            LLMResponse: 生成結果

        Raises:
            LLMError: API呼び出しエラー（構造化コード付き）
        """
        ...

    def _normalize_messages(
        self, messages: list[dict[str, str]] | list[LLMMessage]
    ) -> list[dict[str, str]]:
        """メッセージを正規化

        LLMMessageリストを辞書リストに変換。
        """
        normalized = []
        for msg in messages:
            if isinstance(msg, LLMMessage):
                normalized.append({"role": msg.role, "content": msg.content})
            else:
                normalized.append(msg)
        return normalized

    def _log_request(
        self,
        model: str,
        config: LLMRequestConfig,
        metadata: LLMCallMetadata | None,
    ) -> None:
        """リクエストログ"""
        logger.info(
            "LLM request",
            extra={
                "provider": self.provider_name,
                "model": model,
                "response_format": config.response_format,
                "max_tokens": config.max_tokens,
                "request_id": metadata.request_id if metadata else None,
                "keyword": metadata.keyword if metadata else None,
            },
        )

    def _log_response(
        self,
        response: LLMResponse,
        metadata: LLMCallMetadata | None,
    ) -> None:
        """レスポンスログ"""
        logger.info(
            "LLM response",
            extra={
                "provider": self.provider_name,
                "model": response.model,
                "input_tokens": response.token_usage.input,
                "output_tokens": response.token_usage.output,
                "latency_ms": response.latency_ms,
                "request_id": metadata.request_id if metadata else None,
            },
        )

    def _log_error(
        self,
        error: Exception,
        metadata: LLMCallMetadata | None,
    ) -> None:
        """エラーログ"""
        from .exceptions import LLMError

        error_info = {}
        if isinstance(error, LLMError):
            error_info = error.to_dict()

        logger.error(
            "LLM error",
            extra={
                "provider": self.provider_name,
                "error_type": type(error).__name__,
                "error_message": str(error),
                "error_info": error_info,
                "request_id": metadata.request_id if metadata else None,
            },
        )


# APIキーとモデル名からクライアントを生成するファクトリの型
LLMClientFactory = Callable[[str, str | None], LLMInterface]


def get_llm_client(provider: str, **kwargs: Any) -> LLMInterface:
    """プロバイダ名からLLMクライアントを取得

    Args:
        provider: プロバイダ名（現在は "openai" のみ）
        **kwargs: クライアント初期化引数

    Returns:
        LLMInterface: 対応するクライアントインスタンス

    Raises:
        ValueError: 不明なプロバイダ
    """
    provider = provider.lower()

    if provider == "openai":
        from .openai import OpenAIClient
        return OpenAIClient(**kwargs)
    else:
        raise ValueError(f"Unknown LLM provider: {provider}")
