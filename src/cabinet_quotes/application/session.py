"""Quote editing session.

A session owns exactly one quote snapshot. Every edit delegates to the pure
mutation functions and replaces the snapshot with the result, in the order
the edits are issued. The store is touched only by ``open`` and ``save``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from cabinet_quotes.contracts.errors import QuoteNotFoundError
from cabinet_quotes.domain.services import mutations, pricing
from cabinet_quotes.domain.value_objects import AdjustmentType, ClientField

from .dtos import QuoteSummary, SaveResult

if TYPE_CHECKING:
    from cabinet_quotes.contracts.protocols import (
        IdGeneratorProtocol,
        QuoteRepositoryProtocol,
        TaxRateProviderProtocol,
    )
    from cabinet_quotes.domain.entities import Quote

logger = logging.getLogger(__name__)

SAVE_FAILED_MESSAGE = "Failed to save changes. Please try again."


class QuoteEditSession:
    """Editing session over one quote.

    Besides the snapshot, the session holds the adjustment draft: the type
    and percentage the user is preparing. The draft only reaches the quote
    through ``apply_adjustment``.

    Example:
        session = QuoteEditSession.open(repository, "abc123")
        space_id = session.add_space().spaces[-1].id
        session.add_item(space_id)
        session.set_adjustment_percentage(10)
        session.apply_adjustment()
        result = session.save()
    """

    def __init__(
        self,
        quote: Quote,
        repository: QuoteRepositoryProtocol,
        id_generator: IdGeneratorProtocol | None = None,
        tax_rates: TaxRateProviderProtocol | None = None,
    ) -> None:
        if id_generator is None:
            from cabinet_quotes.infrastructure.ids import UuidIdGenerator

            id_generator = UuidIdGenerator()
        self._quote = quote
        self._saved_quote = quote
        self._repository = repository
        self._ids = id_generator
        self._tax_rates = tax_rates or pricing.FixedTaxRate()
        self.adjustment_type = quote.adjustment_type or AdjustmentType.DISCOUNT
        self.adjustment_percentage = quote.adjustment_percentage or 0.0

    @classmethod
    def open(
        cls,
        repository: QuoteRepositoryProtocol,
        quote_id: str,
        id_generator: IdGeneratorProtocol | None = None,
        tax_rates: TaxRateProviderProtocol | None = None,
    ) -> QuoteEditSession:
        """Start a session on a stored quote.

        Raises:
            QuoteNotFoundError: If the store has no quote with this id.
        """
        quote = repository.load(quote_id)
        if quote is None:
            logger.debug(f"Quote {quote_id} not found, session not started")
            raise QuoteNotFoundError(quote_id)
        logger.debug(f"Opened session on quote {quote_id}")
        return cls(quote, repository, id_generator=id_generator, tax_rates=tax_rates)

    @property
    def quote(self) -> Quote:
        """Current snapshot."""
        return self._quote

    @property
    def is_dirty(self) -> bool:
        """True if the snapshot differs from the last loaded or saved one."""
        return self._quote != self._saved_quote

    @property
    def tax_rate(self) -> float:
        return self._tax_rates.rate_for(self._quote)

    def _commit(self, quote: Quote, action: str) -> Quote:
        if quote is self._quote:
            logger.debug(f"{action}: no matching target, quote unchanged")
        else:
            logger.debug(f"{action}: quote {self._quote.id} updated")
        self._quote = quote
        return quote

    # Spaces

    def add_space(self) -> Quote:
        return self._commit(
            mutations.add_space(self._quote, new_id=self._ids.new_id), "add_space"
        )

    def update_space(self, space_id: str, changes: Mapping[str, Any]) -> Quote:
        return self._commit(
            mutations.update_space(self._quote, space_id, changes), "update_space"
        )

    def rename_space(self, space_id: str, name: str) -> Quote:
        return self.update_space(space_id, {"name": name})

    def delete_space(self, space_id: str) -> Quote:
        return self._commit(
            mutations.delete_space(self._quote, space_id), "delete_space"
        )

    # Items

    def add_item(self, space_id: str) -> Quote:
        return self._commit(
            mutations.add_item(self._quote, space_id, new_id=self._ids.new_id),
            "add_item",
        )

    def update_item(
        self, space_id: str, item_id: str, changes: Mapping[str, Any]
    ) -> Quote:
        return self._commit(
            mutations.update_item(self._quote, space_id, item_id, changes),
            "update_item",
        )

    def delete_item(self, space_id: str, item_id: str) -> Quote:
        return self._commit(
            mutations.delete_item(self._quote, space_id, item_id), "delete_item"
        )

    # Client details

    def update_client_field(self, field_name: ClientField | str, value: str) -> Quote:
        return self._commit(
            mutations.update_client_field(self._quote, field_name, value),
            "update_client_field",
        )

    # Adjustment

    def set_adjustment_type(self, adjustment_type: AdjustmentType | str) -> None:
        self.adjustment_type = AdjustmentType(adjustment_type)

    def set_adjustment_percentage(self, percentage: float) -> None:
        self.adjustment_percentage = float(percentage)

    def apply_adjustment(self) -> Quote:
        """Commit the adjustment draft, freezing adjusted subtotal and total."""
        return self._commit(
            pricing.apply_adjustment(
                self._quote,
                self.adjustment_type,
                self.adjustment_percentage,
                tax_rate=self.tax_rate,
            ),
            "apply_adjustment",
        )

    # Reading and saving

    def summary(self) -> QuoteSummary:
        return QuoteSummary(
            quote=self._quote,
            figures=pricing.summarize(self._quote, tax_rate=self.tax_rate),
        )

    def save(self) -> SaveResult:
        """Write the snapshot back to the store.

        Failures are reported in the result, never raised. The snapshot is
        kept as is so the save can be retried.
        """
        quote_id = self._quote.id
        if not quote_id:
            logger.warning("Cannot save a quote that has no id")
            return SaveResult(saved=False, quote_id=None, message=SAVE_FAILED_MESSAGE)

        try:
            self._repository.save(quote_id, self._quote)
        except Exception as e:
            logger.warning(f"Saving quote {quote_id} failed: {e}")
            return SaveResult(saved=False, quote_id=quote_id, message=SAVE_FAILED_MESSAGE)

        self._saved_quote = self._quote
        logger.debug(f"Saved quote {quote_id}")
        return SaveResult(saved=True, quote_id=quote_id)
