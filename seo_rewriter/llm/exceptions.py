"""LLM関連の例外定義."""

from typing import Any

from seo_rewriter.core.errors import ErrorCategory


class LLMError(Exception):
    """LLM API呼び出しエラーの基底クラス."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory,
        provider: str,
        model: str | None = None,
        original_error: Exception | None = None,
        code: str | None = None,
        status_code: int | None = None,
    ) -> None:
        """初期化.

        Args:
            message: エラーメッセージ
            category: エラー分類（RETRYABLE/NON_RETRYABLE/VALIDATION_FAIL）
            provider: プロバイダー名（openai等）
            model: 使用したモデル名
            original_error: 元の例外
            code: プロバイダーが返した構造化エラーコード（invalid_api_key等）
            status_code: HTTPステータスコード
        """
        super().__init__(message)
        self.message = message
        self.category = category
        self.provider = provider
        self.model = model
        self.original_error = original_error
        self.code = code
        self.status_code = status_code

    def is_retryable(self) -> bool:
        """リトライ可能かどうか（情報目的のみ。本システムはリトライしない）."""
        return self.category == ErrorCategory.RETRYABLE

    def to_dict(self) -> dict[str, Any]:
        """ログ出力用の辞書に変換."""
        return {
            "message": self.message,
            "category": self.category.value,
            "provider": self.provider,
            "model": self.model,
            "code": self.code,
            "status_code": self.status_code,
        }

    def __repr__(self) -> str:
        return (
            f"LLMError(message={self.message!r}, category={self.category.value}, "
            f"provider={self.provider!r}, model={self.model!r}, code={self.code!r})"
        )


class LLMConfigurationError(LLMError):
    """クライアント設定エラー（APIキー未設定等）."""

    def __init__(self, message: str, provider: str) -> None:
        super().__init__(
            message=message,
            category=ErrorCategory.NON_RETRYABLE,
            provider=provider,
        )
