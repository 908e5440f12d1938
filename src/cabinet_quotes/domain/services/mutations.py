"""Quote mutation functions.

Each function takes a Quote snapshot and returns a new snapshot reflecting
one edit. Inputs are never modified. Edits that reference an unknown space
or item id return the input quote unchanged.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable, Mapping
from dataclasses import replace
from typing import Any

from ..entities import CabinetItem, Quote, Space
from ..value_objects import DEFAULT_ITEM, ClientField, ItemDefaults

__all__ = [
    "ITEM_FIELDS",
    "SPACE_FIELDS",
    "add_item",
    "add_space",
    "delete_item",
    "delete_space",
    "update_client_field",
    "update_item",
    "update_space",
]

IdSource = Callable[[], str]

ITEM_FIELDS = frozenset({"width", "height", "depth", "price"})
SPACE_FIELDS = frozenset({"name", "items"})


def _random_id() -> str:
    return str(uuid.uuid4())


def _check_fields(changes: Mapping[str, Any], allowed: frozenset[str], kind: str) -> None:
    if "id" in changes:
        raise ValueError(f"{kind} id cannot be changed")
    unknown = sorted(set(changes) - allowed)
    if unknown:
        raise ValueError(f"Unknown {kind.lower()} field(s): {', '.join(unknown)}")


def _replace_space(quote: Quote, space_id: str, new_space: Space) -> Quote:
    return replace(
        quote,
        spaces=tuple(new_space if s.id == space_id else s for s in quote.spaces),
    )


def add_space(quote: Quote, new_id: IdSource = _random_id) -> Quote:
    """Append an empty space named ``Space #<n>``.

    n is the number of spaces after the add.
    """
    space = Space(id=new_id(), name=f"Space #{len(quote.spaces) + 1}")
    return replace(quote, spaces=quote.spaces + (space,))


def update_space(quote: Quote, space_id: str, changes: Mapping[str, Any]) -> Quote:
    """Replace fields of the matching space.

    Raises:
        ValueError: If changes name an unknown field or the id.
    """
    _check_fields(changes, SPACE_FIELDS, "Space")
    space = quote.find_space(space_id)
    if space is None:
        return quote
    return _replace_space(quote, space_id, replace(space, **changes))


def delete_space(quote: Quote, space_id: str) -> Quote:
    """Remove the matching space together with its items."""
    if quote.find_space(space_id) is None:
        return quote
    return replace(quote, spaces=tuple(s for s in quote.spaces if s.id != space_id))


def add_item(
    quote: Quote,
    space_id: str,
    new_id: IdSource = _random_id,
    defaults: ItemDefaults = DEFAULT_ITEM,
) -> Quote:
    """Append an item with default dimensions and price to a space."""
    space = quote.find_space(space_id)
    if space is None:
        return quote
    item = CabinetItem(id=new_id(), **defaults.as_dict())
    return _replace_space(quote, space_id, replace(space, items=space.items + (item,)))


def update_item(
    quote: Quote, space_id: str, item_id: str, changes: Mapping[str, Any]
) -> Quote:
    """Replace fields of the matching item.

    Raises:
        ValueError: If changes name an unknown field or the id, or produce
            invalid dimensions or price.
    """
    _check_fields(changes, ITEM_FIELDS, "Item")
    space = quote.find_space(space_id)
    if space is None:
        return quote
    item = space.find_item(item_id)
    if item is None:
        return quote
    updated = replace(item, **changes)
    items = tuple(updated if i.id == item_id else i for i in space.items)
    return _replace_space(quote, space_id, replace(space, items=items))


def delete_item(quote: Quote, space_id: str, item_id: str) -> Quote:
    space = quote.find_space(space_id)
    if space is None or space.find_item(item_id) is None:
        return quote
    items = tuple(i for i in space.items if i.id != item_id)
    return _replace_space(quote, space_id, replace(space, items=items))


def update_client_field(quote: Quote, field_name: ClientField | str, value: str) -> Quote:
    """Replace one client metadata field.

    Args:
        quote: Current snapshot.
        field_name: A ClientField or its document key (e.g. ``"clientName"``).
        value: New value, stored as given.

    Raises:
        ValueError: If field_name is not a client field.
    """
    client_field = ClientField(field_name)
    return replace(quote, **{client_field.attribute: value})
