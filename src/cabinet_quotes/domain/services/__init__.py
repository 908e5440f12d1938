"""Domain services for quote pricing and editing."""

from .mutations import (
    add_item,
    add_space,
    delete_item,
    delete_space,
    update_client_field,
    update_item,
    update_space,
)
from .pricing import (
    TAX_RATE,
    FixedTaxRate,
    apply_adjustment,
    compute_adjusted_subtotal,
    compute_subtotal,
    compute_tax,
    compute_total,
    summarize,
)

__all__ = [
    "FixedTaxRate",
    "TAX_RATE",
    "add_item",
    "add_space",
    "apply_adjustment",
    "compute_adjusted_subtotal",
    "compute_subtotal",
    "compute_tax",
    "compute_total",
    "delete_item",
    "delete_space",
    "summarize",
    "update_client_field",
    "update_item",
    "update_space",
]
