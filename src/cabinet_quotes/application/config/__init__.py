"""Quote document schema, loading and conversion.

Example:
    >>> from pathlib import Path
    >>> from cabinet_quotes.application.config import load_quote_document, document_to_quote
    >>> quote = document_to_quote(load_quote_document(Path("quotes/abc.json")))
"""

from cabinet_quotes.application.config.adapter import (
    document_to_quote,
    quote_to_document,
)
from cabinet_quotes.application.config.loader import (
    load_quote_document,
    load_quote_document_from_dict,
)
from cabinet_quotes.application.config.schema import (
    CabinetItemDocument,
    QuoteDocument,
    SpaceDocument,
)

__all__ = [
    "CabinetItemDocument",
    "QuoteDocument",
    "SpaceDocument",
    "document_to_quote",
    "load_quote_document",
    "load_quote_document_from_dict",
    "quote_to_document",
]
