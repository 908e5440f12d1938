"""Quote pricing engine.

Pure functions over quote snapshots. Nothing here mutates its inputs.

Display figures follow a two-state rule: once an adjustment has been applied,
the frozen adjusted subtotal is shown even if items changed afterwards;
before that, the live subtotal is used.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from ..value_objects import (
    AdjustmentType,
    AppliedAdjustment,
    QuoteFigures,
)

if TYPE_CHECKING:
    from ..entities import Quote

__all__ = [
    "TAX_RATE",
    "FixedTaxRate",
    "apply_adjustment",
    "compute_adjusted_subtotal",
    "compute_subtotal",
    "compute_tax",
    "compute_total",
    "summarize",
]

# Placeholder until rates come from pricing presets; see FixedTaxRate.
TAX_RATE = 0.13


@dataclass(frozen=True)
class FixedTaxRate:
    """Tax rate provider returning the same rate for every quote.

    Implements TaxRateProviderProtocol. A preset-aware provider can replace
    it without changing the pricing functions, which only take a rate.
    """

    rate: float = TAX_RATE

    def rate_for(self, quote: Quote) -> float:
        return self.rate


def compute_subtotal(quote: Quote) -> float:
    """Sum of item prices across all spaces. Empty spaces contribute 0."""
    return sum((space.subtotal for space in quote.spaces), 0.0)


def compute_adjusted_subtotal(
    subtotal: float, adjustment_type: AdjustmentType | str, percentage: float
) -> float:
    """Apply a discount or surcharge percentage to a subtotal.

    The percentage is not clamped; callers constrain input ranges.
    """
    adjustment_type = AdjustmentType(adjustment_type)
    if adjustment_type is AdjustmentType.DISCOUNT:
        return subtotal * (100 - percentage) / 100
    return subtotal * (100 + percentage) / 100


def compute_tax(adjusted_subtotal: float, rate: float = TAX_RATE) -> float:
    return adjusted_subtotal * rate


def compute_total(adjusted_subtotal: float, tax: float) -> float:
    return adjusted_subtotal + tax


def apply_adjustment(
    quote: Quote,
    adjustment_type: AdjustmentType | str,
    percentage: float,
    tax_rate: float = TAX_RATE,
) -> Quote:
    """Commit an adjustment computed from the current subtotal.

    Args:
        quote: Current snapshot.
        adjustment_type: Discount or surcharge.
        percentage: Adjustment percentage.
        tax_rate: Rate used for the frozen total.

    Returns:
        A new Quote whose adjustment holds the frozen adjusted subtotal and
        total. These values are not kept in sync with later edits.
    """
    adjustment_type = AdjustmentType(adjustment_type)
    subtotal = compute_subtotal(quote)
    adjusted = compute_adjusted_subtotal(subtotal, adjustment_type, percentage)
    tax = compute_tax(adjusted, tax_rate)
    return replace(
        quote,
        adjustment=AppliedAdjustment(
            adjustment_type=adjustment_type,
            percentage=percentage,
            adjusted_subtotal=adjusted,
            total=compute_total(adjusted, tax),
        ),
    )


def summarize(quote: Quote, tax_rate: float = TAX_RATE) -> QuoteFigures:
    """Derive the display figures for a quote snapshot."""
    subtotal = compute_subtotal(quote)
    frozen = quote.adjusted_total
    adjusted = frozen if frozen is not None else subtotal
    tax = compute_tax(adjusted, tax_rate)
    return QuoteFigures(
        subtotal=subtotal,
        adjusted_subtotal=adjusted,
        adjustment_amount=abs(subtotal - adjusted),
        tax=tax,
        total=compute_total(adjusted, tax),
        tax_rate=tax_rate,
    )
