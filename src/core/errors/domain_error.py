"""Base error type for railway-oriented error handling.

DomainError is the root of every error that travels inside a Result.
It is plain data: it does NOT inherit from Exception and is never raised.

Usage:
    @dataclass(frozen=True, slots=True, kw_only=True)
    class PropertyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code.
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
