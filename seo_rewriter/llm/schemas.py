"""LLM関連の型定義

LLMレスポンス、トークン使用量などの共通スキーマを定義。
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from seo_rewriter.constants import MAX_OUTPUT_TOKENS, TEMPERATURE


class TokenUsage(BaseModel):
    """トークン使用量"""

    model_config = ConfigDict(frozen=True)

    input: int = Field(..., ge=0, description="入力トークン数")
    output: int = Field(..., ge=0, description="出力トークン数")

    @property
    def total(self) -> int:
        """合計トークン数"""
        return self.input + self.output


class LLMResponse(BaseModel):
    """LLMレスポンス

    全プロバイダーで共通のレスポンス形式。
    """

    model_config = ConfigDict(frozen=True)

    content: str = Field(..., description="生成されたテキスト")
    token_usage: TokenUsage = Field(..., description="トークン使用量")
    model: str = Field(..., description="使用したモデルID")
    finish_reason: str | None = Field(
        default=None,
        description="終了理由（stop, length, content_filter等）",
    )
    created_at: datetime = Field(
        default_factory=datetime.now,
        description="レスポンス生成日時",
    )
    provider: str = Field(..., description="プロバイダー名")
    latency_ms: float | None = Field(
        default=None,
        ge=0,
        description="レイテンシ（ミリ秒）",
    )


class LLMMessage(BaseModel):
    """LLMメッセージ

    会話履歴の1メッセージを表す。
    """

    model_config = ConfigDict(frozen=True)

    role: str = Field(..., pattern="^(system|user|assistant)$", description="役割")
    content: str = Field(..., description="メッセージ内容")


class LLMRequestConfig(BaseModel):
    """LLMリクエスト設定

    generate呼び出し時のオプション設定。デフォルト値はリライト用。
    """

    temperature: float = Field(
        default=TEMPERATURE,
        ge=0.0,
        le=2.0,
        description="温度パラメータ（0.0〜2.0）",
    )
    max_tokens: int = Field(
        default=MAX_OUTPUT_TOKENS,
        ge=1,
        le=128000,
        description="最大出力トークン数",
    )
    response_format: Literal["text", "json_object"] = Field(
        default="text",
        description="出力形式（json_objectで厳密なJSON出力を要求）",
    )


class LLMCallMetadata(BaseModel):
    """LLM呼び出しメタデータ

    ログ・追跡用の情報。
    """

    request_id: str | None = Field(default=None, description="リクエストID")
    keyword: str | None = Field(default=None, description="対象キーワード")
