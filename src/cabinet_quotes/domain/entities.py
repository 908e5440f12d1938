"""Domain entities for cabinet quotes.

All entities are frozen. Collections are stored as tuples so a Quote is a
self-contained immutable snapshot; edits produce new snapshots through the
functions in ``cabinet_quotes.domain.services.mutations``.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .value_objects import (
    Adjustment,
    AdjustmentType,
    AppliedAdjustment,
    NoAdjustment,
)


@dataclass(frozen=True)
class CabinetItem:
    """A single priced line item with physical dimensions.

    Attributes:
        id: Opaque identifier, unique within the owning space.
        width: Width, must be positive.
        height: Height, must be positive.
        depth: Depth, must be positive.
        price: Price in the quote currency, must be non-negative.
    """

    id: str
    width: float
    height: float
    depth: float
    price: float

    def __post_init__(self) -> None:
        for dimension in (self.width, self.height, self.depth):
            if not math.isfinite(dimension) or dimension <= 0:
                raise ValueError("All item dimensions must be positive")
        if not math.isfinite(self.price) or self.price < 0:
            raise ValueError("Item price must be non-negative")


@dataclass(frozen=True)
class Space:
    """A named, ordered group of cabinet items (e.g. a room).

    Attributes:
        id: Opaque identifier, unique within the owning quote.
        name: Display label.
        items: Items in display order.
    """

    id: str
    name: str
    items: tuple[CabinetItem, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))
        ids = [item.id for item in self.items]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate item id in space {self.id}")

    @property
    def subtotal(self) -> float:
        """Sum of item prices in this space."""
        return sum((item.price for item in self.items), 0.0)

    def find_item(self, item_id: str) -> CabinetItem | None:
        for item in self.items:
            if item.id == item_id:
                return item
        return None


@dataclass(frozen=True)
class Quote:
    """Root aggregate for one customer proposal.

    Attributes:
        id: Identifier assigned by the quote store; None until persisted.
        client_name: Free-form client name.
        email: Free-form email, not validated.
        phone: Free-form phone number, not validated.
        project_name: Free-form project name.
        installation_address: Free-form address.
        spaces: Spaces in display order.
        adjustment: NoAdjustment, or the last committed AppliedAdjustment.
        metadata: Additional store fields (created date, status, ...) carried
            through unchanged. Read-only.
    """

    id: str | None = None
    client_name: str = ""
    email: str = ""
    phone: str = ""
    project_name: str = ""
    installation_address: str = ""
    spaces: tuple[Space, ...] = ()
    adjustment: Adjustment = field(default_factory=NoAdjustment)
    metadata: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        if not isinstance(self.spaces, tuple):
            object.__setattr__(self, "spaces", tuple(self.spaces))
        ids = [space.id for space in self.spaces]
        if len(ids) != len(set(ids)):
            raise ValueError("Duplicate space id in quote")

    @property
    def short_id(self) -> str:
        """First 8 characters of the id, for headers."""
        return (self.id or "")[:8]

    @property
    def item_count(self) -> int:
        return sum(len(space.items) for space in self.spaces)

    @property
    def adjustment_type(self) -> AdjustmentType | None:
        if isinstance(self.adjustment, AppliedAdjustment):
            return self.adjustment.adjustment_type
        return None

    @property
    def adjustment_percentage(self) -> float | None:
        if isinstance(self.adjustment, AppliedAdjustment):
            return self.adjustment.percentage
        return None

    @property
    def adjusted_total(self) -> float | None:
        """Frozen adjusted subtotal from the last applied adjustment."""
        if isinstance(self.adjustment, AppliedAdjustment):
            return self.adjustment.adjusted_subtotal
        return None

    @property
    def total(self) -> float | None:
        """Frozen grand total from the last applied adjustment."""
        if isinstance(self.adjustment, AppliedAdjustment):
            return self.adjustment.total
        return None

    def find_space(self, space_id: str) -> Space | None:
        for space in self.spaces:
            if space.id == space_id:
                return space
        return None
