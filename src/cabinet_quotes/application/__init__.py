"""Application layer - editing sessions and orchestration."""

from .dtos import QuoteSummary, SaveResult
from .factory import ServiceFactory, get_factory
from .session import QuoteEditSession

__all__ = [
    "QuoteEditSession",
    "QuoteSummary",
    "SaveResult",
    "ServiceFactory",
    "get_factory",
]
