"""Service factory for dependency injection."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cabinet_quotes.application.session import QuoteEditSession
    from cabinet_quotes.contracts.protocols import (
        IdGeneratorProtocol,
        QuoteRepositoryProtocol,
        TaxRateProviderProtocol,
    )

STORE_ENV_VAR = "CABINET_QUOTES_STORE"
DEFAULT_STORE = Path("quotes")


def default_store_directory() -> Path:
    """Store directory from CABINET_QUOTES_STORE, or ./quotes."""
    return Path(os.environ.get(STORE_ENV_VAR) or DEFAULT_STORE)


@dataclass
class ServiceFactory:
    """Factory for the collaborators of an editing session.

    Services are created lazily and cached. Tests inject replacements by
    passing a repository or by calling the ``set_*`` methods.

    Attributes:
        store_directory: Directory for the JSON quote store. Ignored when a
            repository is supplied.
        repository: Quote store to use instead of the JSON store.
    """

    store_directory: Path | None = None
    repository: "QuoteRepositoryProtocol | None" = None
    _id_generator: "IdGeneratorProtocol | None" = field(
        default=None, init=False, repr=False
    )
    _tax_rates: "TaxRateProviderProtocol | None" = field(
        default=None, init=False, repr=False
    )

    def get_id_generator(self) -> "IdGeneratorProtocol":
        """Get or create the identifier source."""
        if self._id_generator is None:
            from cabinet_quotes.infrastructure.ids import UuidIdGenerator

            self._id_generator = UuidIdGenerator()
        return self._id_generator

    def get_tax_rates(self) -> "TaxRateProviderProtocol":
        """Get or create the tax rate provider."""
        if self._tax_rates is None:
            from cabinet_quotes.domain.services.pricing import FixedTaxRate

            self._tax_rates = FixedTaxRate()
        return self._tax_rates

    def get_repository(self) -> "QuoteRepositoryProtocol":
        """Get or create the quote store."""
        if self.repository is None:
            from cabinet_quotes.infrastructure.repositories import JsonQuoteRepository

            self.repository = JsonQuoteRepository(
                self.store_directory or default_store_directory(),
                id_generator=self.get_id_generator(),
            )
        return self.repository

    def set_id_generator(self, id_generator: "IdGeneratorProtocol") -> None:
        self._id_generator = id_generator

    def set_tax_rates(self, tax_rates: "TaxRateProviderProtocol") -> None:
        self._tax_rates = tax_rates

    def open_session(self, quote_id: str) -> "QuoteEditSession":
        """Open an editing session on a stored quote.

        Raises:
            QuoteNotFoundError: If the quote does not exist.
        """
        from cabinet_quotes.application.session import QuoteEditSession

        return QuoteEditSession.open(
            self.get_repository(),
            quote_id,
            id_generator=self.get_id_generator(),
            tax_rates=self.get_tax_rates(),
        )


# Default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
