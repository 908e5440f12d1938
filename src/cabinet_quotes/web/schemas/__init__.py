"""Pydantic schemas for the REST API."""

from cabinet_quotes.web.schemas.requests import (
    AdjustmentRequest,
    ClientFieldUpdateRequest,
    CreateQuoteRequest,
    ItemUpdateRequest,
    SpaceUpdateRequest,
)
from cabinet_quotes.web.schemas.responses import (
    ErrorResponseSchema,
    QuoteFiguresSchema,
    QuoteResponseSchema,
)

__all__ = [
    # Requests
    "AdjustmentRequest",
    "ClientFieldUpdateRequest",
    "CreateQuoteRequest",
    "ItemUpdateRequest",
    "SpaceUpdateRequest",
    # Responses
    "ErrorResponseSchema",
    "QuoteFiguresSchema",
    "QuoteResponseSchema",
]
