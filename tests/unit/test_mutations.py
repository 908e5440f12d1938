"""Unit tests for quote mutation functions."""

import pytest

from cabinet_quotes.domain import DEFAULT_ITEM, ClientField, ItemDefaults, Quote, Space
from cabinet_quotes.domain.services.mutations import (
    add_item,
    add_space,
    delete_item,
    delete_space,
    update_client_field,
    update_item,
    update_space,
)


class TestAddSpace:
    """Tests for add_space."""

    def test_first_space_is_named_space_1(self, ids) -> None:
        quote = add_space(Quote(), new_id=ids)
        assert len(quote.spaces) == 1
        assert quote.spaces[0].name == "Space #1"
        assert quote.spaces[0].id == "id-1"
        assert quote.spaces[0].items == ()

    def test_name_follows_current_count(self, ids) -> None:
        quote = Quote(spaces=(Space("existing", "Kitchen"),))
        result = add_space(quote, new_id=ids)
        assert result.spaces[-1].name == "Space #2"

    def test_appends_to_end(self, two_space_quote: Quote, ids) -> None:
        result = add_space(two_space_quote, new_id=ids)
        assert [s.id for s in result.spaces] == ["space-a", "space-b", "id-1"]

    def test_default_id_source_gives_unique_ids(self) -> None:
        quote = add_space(add_space(Quote()))
        assert quote.spaces[0].id != quote.spaces[1].id

    def test_input_unchanged(self, two_space_quote: Quote, ids) -> None:
        add_space(two_space_quote, new_id=ids)
        assert len(two_space_quote.spaces) == 2


class TestUpdateSpace:
    """Tests for update_space."""

    def test_renames_matching_space(self, two_space_quote: Quote) -> None:
        result = update_space(two_space_quote, "space-b", {"name": "Pantry"})
        assert result.find_space("space-b").name == "Pantry"  # type: ignore[union-attr]
        assert result.find_space("space-a").name == "Space #1"  # type: ignore[union-attr]

    def test_unknown_space_returns_input(self, two_space_quote: Quote) -> None:
        result = update_space(two_space_quote, "missing", {"name": "Pantry"})
        assert result is two_space_quote

    def test_id_cannot_change(self, two_space_quote: Quote) -> None:
        with pytest.raises(ValueError) as exc_info:
            update_space(two_space_quote, "space-a", {"id": "other"})
        assert "cannot be changed" in str(exc_info.value)

    def test_unknown_field_rejected(self, two_space_quote: Quote) -> None:
        with pytest.raises(ValueError) as exc_info:
            update_space(two_space_quote, "space-a", {"colour": "red"})
        assert "colour" in str(exc_info.value)

    def test_input_unchanged(self, two_space_quote: Quote) -> None:
        update_space(two_space_quote, "space-a", {"name": "Pantry"})
        assert two_space_quote.spaces[0].name == "Space #1"


class TestDeleteSpace:
    """Tests for delete_space."""

    def test_removes_space_and_items(self, two_space_quote: Quote) -> None:
        result = delete_space(two_space_quote, "space-a")
        assert [s.id for s in result.spaces] == ["space-b"]
        assert result.item_count == 1

    def test_unknown_space_returns_input(self, two_space_quote: Quote) -> None:
        assert delete_space(two_space_quote, "missing") is two_space_quote


class TestAddItem:
    """Tests for add_item."""

    def test_appends_default_item(self, two_space_quote: Quote, ids) -> None:
        result = add_item(two_space_quote, "space-a", new_id=ids)
        items = result.find_space("space-a").items  # type: ignore[union-attr]
        assert len(items) == 2
        new_item = items[-1]
        assert new_item.id == "id-1"
        assert new_item.width == DEFAULT_ITEM.width
        assert new_item.height == DEFAULT_ITEM.height
        assert new_item.depth == DEFAULT_ITEM.depth
        assert new_item.price == DEFAULT_ITEM.price

    def test_custom_defaults(self, two_space_quote: Quote, ids) -> None:
        result = add_item(
            two_space_quote, "space-b", new_id=ids, defaults=ItemDefaults(price=0)
        )
        assert result.find_space("space-b").items[-1].price == 0  # type: ignore[union-attr]

    def test_unknown_space_returns_input(self, two_space_quote: Quote, ids) -> None:
        assert add_item(two_space_quote, "missing", new_id=ids) is two_space_quote
        assert ids.count == 0

    def test_other_spaces_untouched(self, two_space_quote: Quote, ids) -> None:
        result = add_item(two_space_quote, "space-a", new_id=ids)
        assert result.find_space("space-b") is two_space_quote.find_space("space-b")


class TestUpdateItem:
    """Tests for update_item."""

    def test_partial_update(self, two_space_quote: Quote) -> None:
        result = update_item(two_space_quote, "space-a", "item-a", {"price": 450.0})
        item = result.find_space("space-a").find_item("item-a")  # type: ignore[union-attr]
        assert item.price == 450.0  # type: ignore[union-attr]
        assert item.width == 30  # type: ignore[union-attr]

    def test_update_is_idempotent(self, two_space_quote: Quote) -> None:
        changes = {"width": 36.0, "price": 410.0}
        once = update_item(two_space_quote, "space-a", "item-a", changes)
        twice = update_item(once, "space-a", "item-a", changes)
        assert once == twice

    def test_unknown_space_returns_input(self, two_space_quote: Quote) -> None:
        result = update_item(two_space_quote, "missing", "item-a", {"price": 1.0})
        assert result is two_space_quote

    def test_item_in_other_space_returns_input(self, two_space_quote: Quote) -> None:
        result = update_item(two_space_quote, "space-a", "item-b", {"price": 1.0})
        assert result is two_space_quote

    def test_invalid_value_rejected(self, two_space_quote: Quote) -> None:
        with pytest.raises(ValueError):
            update_item(two_space_quote, "space-a", "item-a", {"price": -5.0})

    def test_nan_dimension_rejected(self, two_space_quote: Quote) -> None:
        with pytest.raises(ValueError):
            update_item(two_space_quote, "space-a", "item-a", {"width": float("nan")})

    def test_id_cannot_change(self, two_space_quote: Quote) -> None:
        with pytest.raises(ValueError):
            update_item(two_space_quote, "space-a", "item-a", {"id": "x"})

    def test_unknown_field_rejected(self, two_space_quote: Quote) -> None:
        with pytest.raises(ValueError):
            update_item(two_space_quote, "space-a", "item-a", {"finish": "oak"})


class TestDeleteItem:
    """Tests for delete_item."""

    def test_removes_item(self, two_space_quote: Quote) -> None:
        result = delete_item(two_space_quote, "space-a", "item-a")
        assert result.find_space("space-a").items == ()  # type: ignore[union-attr]
        assert result.item_count == 1

    def test_unknown_item_returns_input(self, two_space_quote: Quote) -> None:
        assert delete_item(two_space_quote, "space-a", "missing") is two_space_quote

    def test_unknown_space_returns_input(self, two_space_quote: Quote) -> None:
        assert delete_item(two_space_quote, "missing", "item-a") is two_space_quote


class TestUpdateClientField:
    """Tests for update_client_field."""

    def test_by_enum(self, two_space_quote: Quote) -> None:
        result = update_client_field(two_space_quote, ClientField.PHONE, "555-0199")
        assert result.phone == "555-0199"
        assert two_space_quote.phone == "555-0100"

    def test_by_document_key(self, two_space_quote: Quote) -> None:
        result = update_client_field(two_space_quote, "installationAddress", "1 Main St")
        assert result.installation_address == "1 Main St"

    def test_values_are_not_validated(self, two_space_quote: Quote) -> None:
        result = update_client_field(two_space_quote, ClientField.EMAIL, "not an email")
        assert result.email == "not an email"

    def test_unknown_field_rejected(self, two_space_quote: Quote) -> None:
        with pytest.raises(ValueError):
            update_client_field(two_space_quote, "spaces", "x")


class TestOrdering:
    """Edits applied in sequence observe each previous result."""

    def test_sequence(self, ids) -> None:
        quote = add_space(Quote(id="q"), new_id=ids)
        space_id = quote.spaces[0].id
        quote = add_item(quote, space_id, new_id=ids)
        item_id = quote.spaces[0].items[0].id
        quote = update_item(quote, space_id, item_id, {"price": 10.0})
        quote = add_space(quote, new_id=ids)

        assert [s.name for s in quote.spaces] == ["Space #1", "Space #2"]
        assert quote.spaces[0].items[0].price == 10.0
