"""Unit tests for the quote stores."""

import json
from pathlib import Path

import pytest

from cabinet_quotes.contracts import (
    IdGeneratorProtocol,
    QuoteFileError,
    QuoteRepositoryProtocol,
    QuoteSaveError,
)
from cabinet_quotes.domain import AdjustmentType, Quote
from cabinet_quotes.domain.services.pricing import apply_adjustment
from cabinet_quotes.infrastructure import (
    InMemoryQuoteRepository,
    JsonQuoteRepository,
    UuidIdGenerator,
)


class TestUuidIdGenerator:
    """Tests for UuidIdGenerator."""

    def test_ids_are_unique(self) -> None:
        generator = UuidIdGenerator()
        assert len({generator.new_id() for _ in range(100)}) == 100

    def test_implements_protocol(self) -> None:
        assert isinstance(UuidIdGenerator(), IdGeneratorProtocol)


class TestInMemoryQuoteRepository:
    """Tests for InMemoryQuoteRepository."""

    def test_load_missing_returns_none(self) -> None:
        assert InMemoryQuoteRepository().load("x") is None

    def test_create_assigns_id(self, ids) -> None:
        repository = InMemoryQuoteRepository(id_generator=ids)
        created = repository.create(Quote(client_name="Ada"))
        assert created.id == "id-1"
        assert repository.load("id-1") == created
        assert "id-1" in repository

    def test_implements_protocol(self) -> None:
        assert isinstance(InMemoryQuoteRepository(), QuoteRepositoryProtocol)


class TestJsonQuoteRepository:
    """Tests for JsonQuoteRepository."""

    @pytest.fixture
    def store(self, tmp_path: Path, ids) -> JsonQuoteRepository:
        return JsonQuoteRepository(tmp_path / "quotes", id_generator=ids)

    def test_round_trip(self, store: JsonQuoteRepository, two_space_quote: Quote) -> None:
        store.save("quote-1", two_space_quote)
        assert store.load("quote-1") == two_space_quote

    def test_round_trip_with_adjustment(
        self, store: JsonQuoteRepository, two_space_quote: Quote
    ) -> None:
        adjusted = apply_adjustment(two_space_quote, AdjustmentType.DISCOUNT, 10)
        store.save("quote-1", adjusted)
        loaded = store.load("quote-1")
        assert loaded == adjusted
        assert loaded.adjusted_total == pytest.approx(539.982)  # type: ignore[union-attr]

    def test_file_uses_store_keys(self, store: JsonQuoteRepository, two_space_quote: Quote) -> None:
        store.save("quote-1", apply_adjustment(two_space_quote, "surcharge", 5))
        data = json.loads(store.path_for("quote-1").read_text(encoding="utf-8"))

        assert data["clientName"] == "Ada Lovelace"
        assert data["installationAddress"] == "12 Analytical Way"
        assert data["spaces"][0]["items"][0] == {
            "id": "item-a",
            "width": 30.0,
            "height": 30.0,
            "depth": 24.0,
            "price": 299.99,
        }
        assert data["adjustmentType"] == "surcharge"
        assert data["adjustmentPercentage"] == 5

    def test_unadjusted_file_has_no_adjustment_keys(
        self, store: JsonQuoteRepository, two_space_quote: Quote
    ) -> None:
        store.save("quote-1", two_space_quote)
        data = json.loads(store.path_for("quote-1").read_text(encoding="utf-8"))
        assert "adjustmentType" not in data
        assert "adjustedTotal" not in data
        assert "total" not in data

    def test_missing_returns_none(self, store: JsonQuoteRepository) -> None:
        assert store.load("nothing-here") is None

    def test_path_like_id_returns_none(self, store: JsonQuoteRepository) -> None:
        assert store.load("../etc/passwd") is None

    def test_extra_fields_preserved(self, store: JsonQuoteRepository) -> None:
        store.directory.mkdir(parents=True)
        store.path_for("legacy").write_text(
            json.dumps(
                {
                    "id": "legacy",
                    "clientName": "Ada",
                    "createdAt": "2024-03-01T10:00:00Z",
                    "status": "draft",
                    "archivedAt": None,
                    "spaces": [],
                }
            ),
            encoding="utf-8",
        )

        quote = store.load("legacy")
        assert quote.metadata == {  # type: ignore[union-attr]
            "createdAt": "2024-03-01T10:00:00Z",
            "status": "draft",
            "archivedAt": None,
        }

        store.save("legacy", quote)  # type: ignore[arg-type]
        data = json.loads(store.path_for("legacy").read_text(encoding="utf-8"))
        assert data["createdAt"] == "2024-03-01T10:00:00Z"
        assert data["status"] == "draft"
        assert "archivedAt" in data
        assert data["archivedAt"] is None
        assert "adjustmentType" not in data

    def test_corrupt_file_raises_file_error(self, store: JsonQuoteRepository) -> None:
        store.directory.mkdir(parents=True)
        store.path_for("bad").write_text("{not json", encoding="utf-8")
        with pytest.raises(QuoteFileError) as exc_info:
            store.load("bad")
        assert exc_info.value.error_type == "json_parse"

    def test_create_assigns_id_and_writes(self, store: JsonQuoteRepository) -> None:
        created = store.create(Quote(client_name="Ada"))
        assert created.id == "id-1"
        assert store.path_for("id-1").exists()
        assert store.list_ids() == ["id-1"]

    def test_save_failure_raises_save_error(self, tmp_path: Path, two_space_quote: Quote) -> None:
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("", encoding="utf-8")
        store = JsonQuoteRepository(blocker)
        with pytest.raises(QuoteSaveError) as exc_info:
            store.save("quote-1", two_space_quote)
        assert exc_info.value.quote_id == "quote-1"

    def test_invalid_id_on_save_raises_save_error(
        self, store: JsonQuoteRepository, two_space_quote: Quote
    ) -> None:
        with pytest.raises(QuoteSaveError):
            store.save("a/b", two_space_quote)

    def test_list_ids_on_missing_directory(self, tmp_path: Path) -> None:
        assert JsonQuoteRepository(tmp_path / "absent").list_ids() == []

    def test_implements_protocol(self, store: JsonQuoteRepository) -> None:
        assert isinstance(store, QuoteRepositoryProtocol)
