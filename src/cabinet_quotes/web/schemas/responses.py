"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from cabinet_quotes.application.config import quote_to_document
from cabinet_quotes.application.dtos import QuoteSummary


class QuoteFiguresSchema(BaseModel):
    """Display figures for a quote."""

    subtotal: float = Field(..., description="Live sum of item prices")
    adjusted_subtotal: float = Field(
        ..., description="Frozen adjusted subtotal, or the live subtotal"
    )
    adjustment_amount: float = Field(..., description="Size of the adjustment")
    tax_rate: float = Field(..., description="Tax rate applied")
    tax: float = Field(..., description="Tax on the adjusted subtotal")
    total: float = Field(..., description="Adjusted subtotal plus tax")


class QuoteResponseSchema(BaseModel):
    """A stored quote with its display figures."""

    quote: dict[str, Any] = Field(..., description="Quote document")
    summary: QuoteFiguresSchema

    @classmethod
    def from_summary(cls, summary: QuoteSummary) -> "QuoteResponseSchema":
        figures = summary.figures
        return cls(
            quote=quote_to_document(summary.quote).to_json_dict(),
            summary=QuoteFiguresSchema(
                subtotal=figures.subtotal,
                adjusted_subtotal=figures.adjusted_subtotal,
                adjustment_amount=figures.adjustment_amount,
                tax_rate=figures.tax_rate,
                tax=figures.tax,
                total=figures.total,
            ),
        )


class ErrorResponseSchema(BaseModel):
    """Error body returned by the exception handlers."""

    error: str
    error_type: str
    details: Any = None
