"""Domain layer - quote model, pricing and edits."""

from .entities import CabinetItem, Quote, Space
from .value_objects import (
    DEFAULT_ITEM,
    Adjustment,
    AdjustmentType,
    AppliedAdjustment,
    ClientField,
    ItemDefaults,
    NoAdjustment,
    QuoteFigures,
)

__all__ = [
    "Adjustment",
    "AdjustmentType",
    "AppliedAdjustment",
    "CabinetItem",
    "ClientField",
    "DEFAULT_ITEM",
    "ItemDefaults",
    "NoAdjustment",
    "Quote",
    "QuoteFigures",
    "Space",
]
