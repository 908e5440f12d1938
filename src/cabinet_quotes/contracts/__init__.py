"""Contracts module - protocols and errors for cross-layer communication.

Example:
    ```python
    from cabinet_quotes.contracts import QuoteRepositoryProtocol

    def reopen(repository: QuoteRepositoryProtocol, quote_id: str) -> Quote:
        ...
    ```
"""

from .errors import (
    QuoteError as QuoteError,
    QuoteFileError as QuoteFileError,
    QuoteNotFoundError as QuoteNotFoundError,
    QuoteSaveError as QuoteSaveError,
)
from .protocols import (
    IdGeneratorProtocol as IdGeneratorProtocol,
    QuoteRepositoryProtocol as QuoteRepositoryProtocol,
    TaxRateProviderProtocol as TaxRateProviderProtocol,
)

__all__ = [
    "IdGeneratorProtocol",
    "QuoteError",
    "QuoteFileError",
    "QuoteNotFoundError",
    "QuoteRepositoryProtocol",
    "QuoteSaveError",
    "TaxRateProviderProtocol",
]
