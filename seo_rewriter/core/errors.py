"""Error classification for rewrite requests.

Only two errors ever reach the caller of a rewrite:
- ConfigurationError: no usable API credential
- UpstreamError: the text-generation call failed

Everything else (collaborator failures, malformed model replies) is recovered
locally and degrades to a best-effort result.

ErrorCategory is kept on LLM errors for logging; nothing is retried.
"""

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Classification of provider errors."""

    RETRYABLE = "retryable"
    NON_RETRYABLE = "non_retryable"
    VALIDATION_FAIL = "validation_fail"


class UpstreamErrorKind(str, Enum):
    """User-facing kinds of text-generation failures."""

    CREDENTIAL_REJECTED = "credential_rejected"
    QUOTA_EXCEEDED = "quota_exceeded"
    RATE_LIMITED = "rate_limited"
    UNKNOWN = "unknown"


UPSTREAM_ERROR_MESSAGES: dict[UpstreamErrorKind, str] = {
    UpstreamErrorKind.CREDENTIAL_REJECTED: "Chave da API OpenAI não configurada corretamente",
    UpstreamErrorKind.QUOTA_EXCEEDED: "Limite da API OpenAI excedido. Tente novamente mais tarde",
    UpstreamErrorKind.RATE_LIMITED: "Muitas requisições. Aguarde alguns minutos e tente novamente",
}

UNKNOWN_ERROR_PREFIX = "Erro no processamento do conteúdo: "

MISSING_CREDENTIAL_MESSAGE = (
    "Chave de API do OpenAI não configurada. Configure nas configurações da aplicação."
)


class RewriteError(Exception):
    """Base class for errors surfaced by the rewrite operation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(RewriteError):
    """No usable API credential is available."""

    def __init__(self, message: str = MISSING_CREDENTIAL_MESSAGE) -> None:
        super().__init__(message)


class UpstreamError(RewriteError):
    """The text-generation call failed."""

    def __init__(self, kind: UpstreamErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind

    @classmethod
    def from_kind(cls, kind: UpstreamErrorKind, detail: str = "") -> "UpstreamError":
        """Build an error carrying the user-facing message for ``kind``."""
        if kind == UpstreamErrorKind.UNKNOWN:
            return cls(kind, f"{UNKNOWN_ERROR_PREFIX}{detail or 'Erro desconhecido'}")
        return cls(kind, UPSTREAM_ERROR_MESSAGES[kind])

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {"kind": self.kind.value, "message": self.message}

    def __repr__(self) -> str:
        return f"UpstreamError(kind={self.kind.value}, message={self.message!r})"


class CollaboratorError(RewriteError):
    """A lookup collaborator (case studies, internal links) failed.

    Never raised to callers of the rewrite; used to log the failure.
    """

    def __init__(self, collaborator: str, original_error: Exception) -> None:
        super().__init__(f"{collaborator} failed: {original_error}")
        self.collaborator = collaborator
        self.original_error = original_error
