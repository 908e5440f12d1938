"""Quote store implementations.

Both repositories implement QuoteRepositoryProtocol. ``load`` returns None
for an unknown id; write failures surface as QuoteSaveError.
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING

from cabinet_quotes.application.config import (
    document_to_quote,
    load_quote_document,
    quote_to_document,
)
from cabinet_quotes.contracts.errors import QuoteSaveError
from cabinet_quotes.infrastructure.ids import UuidIdGenerator

if TYPE_CHECKING:
    from cabinet_quotes.contracts.protocols import IdGeneratorProtocol
    from cabinet_quotes.domain.entities import Quote

logger = logging.getLogger(__name__)


class InMemoryQuoteRepository:
    """Dictionary backed quote store."""

    def __init__(
        self,
        quotes: dict[str, Quote] | None = None,
        id_generator: IdGeneratorProtocol | None = None,
    ) -> None:
        self._quotes: dict[str, Quote] = dict(quotes or {})
        self._ids = id_generator or UuidIdGenerator()

    def load(self, quote_id: str) -> Quote | None:
        return self._quotes.get(quote_id)

    def save(self, quote_id: str, quote: Quote) -> None:
        self._quotes[quote_id] = quote
        logger.debug(f"Stored quote {quote_id} in memory")

    def create(self, quote: Quote) -> Quote:
        created = replace(quote, id=self._ids.new_id())
        assert created.id is not None
        self.save(created.id, created)
        return created

    def __contains__(self, quote_id: object) -> bool:
        return quote_id in self._quotes

    def __len__(self) -> int:
        return len(self._quotes)


class JsonQuoteRepository:
    """Stores each quote as ``<id>.json`` in a directory.

    Example:
        repository = JsonQuoteRepository(Path("quotes"))
        quote = repository.create(Quote(client_name="Ada"))
        assert repository.load(quote.id) == quote
    """

    def __init__(
        self,
        directory: Path,
        id_generator: IdGeneratorProtocol | None = None,
    ) -> None:
        self.directory = Path(directory)
        self._ids = id_generator or UuidIdGenerator()

    def path_for(self, quote_id: str) -> Path:
        if not quote_id or "/" in quote_id or "\\" in quote_id or quote_id in (".", ".."):
            raise ValueError(f"Invalid quote id: {quote_id!r}")
        return self.directory / f"{quote_id}.json"

    def load(self, quote_id: str) -> Quote | None:
        """Load a quote document.

        Raises:
            QuoteFileError: If the file exists but cannot be read or validated.
        """
        try:
            path = self.path_for(quote_id)
        except ValueError:
            return None
        if not path.exists():
            logger.debug(f"No quote file at {path}")
            return None
        quote = document_to_quote(load_quote_document(path))
        logger.debug(f"Loaded quote {quote_id} from {path}")
        return quote

    def save(self, quote_id: str, quote: Quote) -> None:
        try:
            path = self.path_for(quote_id)
        except ValueError as e:
            raise QuoteSaveError(quote_id, str(e)) from e

        document = quote_to_document(replace(quote, id=quote_id))
        content = json.dumps(document.to_json_dict(), indent=2)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(content + "\n", encoding="utf-8")
            tmp_path.replace(path)
        except OSError as e:
            raise QuoteSaveError(quote_id, str(e)) from e
        logger.debug(f"Wrote quote {quote_id} to {path}")

    def create(self, quote: Quote) -> Quote:
        created = replace(quote, id=self._ids.new_id())
        assert created.id is not None
        self.save(created.id, created)
        return created

    def list_ids(self) -> list[str]:
        if not self.directory.is_dir():
            return []
        return sorted(p.stem for p in self.directory.glob("*.json"))
