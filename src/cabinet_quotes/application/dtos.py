"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass

from cabinet_quotes.domain import Quote, QuoteFigures


@dataclass(frozen=True)
class QuoteSummary:
    """A quote snapshot together with its display figures."""

    quote: Quote
    figures: QuoteFigures

    @property
    def has_adjustment(self) -> bool:
        return self.quote.adjustment.is_applied


@dataclass(frozen=True)
class SaveResult:
    """Outcome of saving an editing session.

    Attributes:
        saved: True when the store accepted the snapshot.
        quote_id: Id the snapshot was saved under (None if it has none).
        message: User-facing message for a failed save.
    """

    saved: bool
    quote_id: str | None = None
    message: str | None = None
