"""Value objects for the quote domain."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union


class AdjustmentType(str, Enum):
    """Kinds of percentage adjustment applied to a quote subtotal."""

    DISCOUNT = "discount"
    SURCHARGE = "surcharge"


class ClientField(str, Enum):
    """Client metadata fields that can be edited on a quote.

    Values are the document keys used by the quote store.
    """

    CLIENT_NAME = "clientName"
    EMAIL = "email"
    PHONE = "phone"
    PROJECT_NAME = "projectName"
    INSTALLATION_ADDRESS = "installationAddress"

    @property
    def attribute(self) -> str:
        """Name of the matching attribute on the Quote entity."""
        return _CLIENT_ATTRIBUTES[self]


_CLIENT_ATTRIBUTES: dict[ClientField, str] = {
    ClientField.CLIENT_NAME: "client_name",
    ClientField.EMAIL: "email",
    ClientField.PHONE: "phone",
    ClientField.PROJECT_NAME: "project_name",
    ClientField.INSTALLATION_ADDRESS: "installation_address",
}


@dataclass(frozen=True)
class ItemDefaults:
    """Field values given to a newly added cabinet item."""

    width: float = 30
    height: float = 30
    depth: float = 24
    price: float = 299.99

    def as_dict(self) -> dict[str, float]:
        return {
            "width": self.width,
            "height": self.height,
            "depth": self.depth,
            "price": self.price,
        }


DEFAULT_ITEM = ItemDefaults()


@dataclass(frozen=True)
class NoAdjustment:
    """Marker for a quote on which no adjustment has ever been applied."""

    @property
    def is_applied(self) -> bool:
        return False


@dataclass(frozen=True)
class AppliedAdjustment:
    """An adjustment committed by an explicit apply action.

    The adjusted subtotal and total are frozen at the moment of the apply
    and are not recomputed when items change afterwards.

    Attributes:
        adjustment_type: Discount or surcharge.
        percentage: Percentage applied. Not clamped to [0, 100].
        adjusted_subtotal: Subtotal after the adjustment, at apply time.
        total: Adjusted subtotal plus tax, at apply time.
    """

    adjustment_type: AdjustmentType
    percentage: float
    adjusted_subtotal: float
    total: float

    def __post_init__(self) -> None:
        if not isinstance(self.adjustment_type, AdjustmentType):
            object.__setattr__(
                self, "adjustment_type", AdjustmentType(self.adjustment_type)
            )
        if not math.isfinite(self.percentage):
            raise ValueError("Adjustment percentage must be a finite number")

    @property
    def is_applied(self) -> bool:
        return True


Adjustment = Union[NoAdjustment, AppliedAdjustment]


@dataclass(frozen=True)
class QuoteFigures:
    """Display figures derived from a quote snapshot.

    Attributes:
        subtotal: Live sum of all item prices.
        adjusted_subtotal: Frozen adjusted subtotal, or the live subtotal
            when no adjustment has been applied.
        adjustment_amount: Absolute difference between subtotal and
            adjusted_subtotal.
        tax: Tax on the adjusted subtotal.
        total: Adjusted subtotal plus tax.
        tax_rate: Rate used to compute tax.
    """

    subtotal: float
    adjusted_subtotal: float
    adjustment_amount: float
    tax: float
    total: float
    tax_rate: float
