"""Infrastructure layer - stores, identifiers and formatters."""

from .formatters import QuoteDetailFormatter, QuoteSummaryFormatter
from .ids import UuidIdGenerator
from .repositories import InMemoryQuoteRepository, JsonQuoteRepository

__all__ = [
    "InMemoryQuoteRepository",
    "JsonQuoteRepository",
    "QuoteDetailFormatter",
    "QuoteSummaryFormatter",
    "UuidIdGenerator",
]
