from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from app.services.errors import QuoteServiceError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a service operation: either a value or an error, never both."""

    value: Optional[T] = None
    error: Optional[QuoteServiceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: QuoteServiceError) -> "Result[T]":
        return cls(error=error)
