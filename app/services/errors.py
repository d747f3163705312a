"""
Error types returned by the quote service.

Every error carries the HTTP status it maps to and a human readable message,
so the API layer can render it without knowing which operation produced it.
"""
from typing import Any, Dict, Optional


class QuoteServiceError(Exception):
    """Base class for failures reported by quote operations."""

    status: int = 500

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status, "message": self.message}


class ValidationError(QuoteServiceError):
    """Caller input is missing a required field or it is blank."""

    status = 400


class NotFoundError(QuoteServiceError):
    status = 404

    def __init__(self, quote_id: Any):
        super().__init__(f"Could not find quote with id {quote_id}")
        self.quote_id = quote_id


class StoreError(QuoteServiceError):
    """Raised when the persistence layer fails during an operation."""

    def __init__(self, operation: str, reason: str, status: Optional[int] = None):
        super().__init__(reason, status)
        self.operation = operation

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["operation"] = self.operation
        return data


class InternalError(QuoteServiceError):
    status = 500
