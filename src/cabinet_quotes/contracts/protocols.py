"""Service protocols for the collaborators of an editing session.

The quote store, the identifier source and the tax rate lookup live outside
the pricing core. Sessions and front ends depend on these protocols so any
implementation can be injected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cabinet_quotes.domain.entities import Quote


@runtime_checkable
class IdGeneratorProtocol(Protocol):
    """Source of globally unique identifiers for new spaces and items."""

    def new_id(self) -> str:
        """Return a new unique identifier."""
        ...


@runtime_checkable
class QuoteRepositoryProtocol(Protocol):
    """Protocol for the quote store.

    Example:
        ```python
        class DictRepository:
            def load(self, quote_id: str) -> Quote | None: ...
            def save(self, quote_id: str, quote: Quote) -> None: ...
            def create(self, quote: Quote) -> Quote: ...
        ```
    """

    def load(self, quote_id: str) -> Quote | None:
        """Load a quote by id.

        Returns:
            The stored quote, or None if no quote has this id.
        """
        ...

    def save(self, quote_id: str, quote: Quote) -> None:
        """Store a quote under an id.

        Raises:
            QuoteSaveError: If the write fails.
        """
        ...

    def create(self, quote: Quote) -> Quote:
        """Assign an id to a new quote and store it.

        Returns:
            The stored quote carrying its new id.
        """
        ...


@runtime_checkable
class TaxRateProviderProtocol(Protocol):
    """Lookup of the tax rate applied to a quote."""

    def rate_for(self, quote: Quote) -> float:
        """Return the tax rate (e.g. 0.13) for the quote."""
        ...
