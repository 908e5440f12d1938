"""Exceptions shared by the application, infrastructure and front ends."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class QuoteError(Exception):
    """Base class for quote errors."""


class QuoteNotFoundError(QuoteError):
    """Raised when a quote id does not resolve in the store."""

    def __init__(self, quote_id: str) -> None:
        self.quote_id = quote_id
        super().__init__(f"Quote not found: {quote_id}")


class QuoteSaveError(QuoteError):
    """Raised when the store fails to write a quote."""

    def __init__(self, quote_id: str | None, message: str) -> None:
        self.quote_id = quote_id
        self.message = message
        super().__init__(f"Failed to save quote {quote_id}: {message}")


class QuoteFileError(QuoteError):
    """Raised when a stored quote document cannot be read or validated.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, json_parse, validation,
            file_read_error)
        path: Path to the document (if applicable)
        details: Additional error details (line/column for JSON, validation
            errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message
