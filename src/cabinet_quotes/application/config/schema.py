"""Pydantic schema for stored quote documents.

Documents use the camelCase keys of the quote store. Unknown top-level keys
(creation date, status, ...) are allowed and carried through; spaces and
items are strict.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from cabinet_quotes.domain.value_objects import AdjustmentType


# Model fields left out of the stored document while unset.
_OPTIONAL_FIELDS = (
    "id",
    "adjustment_type",
    "adjustment_percentage",
    "adjusted_total",
    "total",
)


class CabinetItemDocument(BaseModel):
    """A priced line item."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1, description="Item identifier")
    width: float = Field(..., gt=0, allow_inf_nan=False, description="Item width")
    height: float = Field(..., gt=0, allow_inf_nan=False, description="Item height")
    depth: float = Field(..., gt=0, allow_inf_nan=False, description="Item depth")
    price: float = Field(..., ge=0, allow_inf_nan=False, description="Item price")


class SpaceDocument(BaseModel):
    """A named group of items."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1, description="Space identifier")
    name: str = Field(default="", description="Display label")
    items: list[CabinetItemDocument] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_item_ids(self) -> "SpaceDocument":
        ids = [item.id for item in self.items]
        if len(ids) != len(set(ids)):
            raise ValueError("item ids must be unique within a space")
        return self


class QuoteDocument(BaseModel):
    """A stored quote.

    Adjustment keys are written together by an apply action, so
    ``adjustmentType``, ``adjustedTotal`` and ``total`` must either all be
    present or all be absent.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | None = Field(default=None, description="Quote identifier")
    client_name: str = Field(default="", alias="clientName")
    email: str = Field(default="")
    phone: str = Field(default="")
    project_name: str = Field(default="", alias="projectName")
    installation_address: str = Field(default="", alias="installationAddress")
    spaces: list[SpaceDocument] = Field(default_factory=list)
    adjustment_type: AdjustmentType | None = Field(default=None, alias="adjustmentType")
    adjustment_percentage: float | None = Field(
        default=None, alias="adjustmentPercentage", allow_inf_nan=False
    )
    adjusted_total: float | None = Field(default=None, alias="adjustedTotal")
    total: float | None = Field(default=None)

    @model_validator(mode="after")
    def validate_adjustment_fields(self) -> "QuoteDocument":
        present = [
            self.adjustment_type is not None,
            self.adjusted_total is not None,
            self.total is not None,
        ]
        if any(present) and not all(present):
            raise ValueError(
                "adjustmentType, adjustedTotal and total must be set together"
            )
        return self

    @model_validator(mode="after")
    def validate_unique_space_ids(self) -> "QuoteDocument":
        ids = [space.id for space in self.spaces]
        if len(ids) != len(set(ids)):
            raise ValueError("space ids must be unique within a quote")
        return self

    @property
    def extra_fields(self) -> dict[str, Any]:
        return dict(self.model_extra or {})

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize with store keys, omitting unset adjustment keys.

        Extra keys are written as they were read, null values included.
        """
        exclude = {name for name in _OPTIONAL_FIELDS if getattr(self, name) is None}
        return self.model_dump(mode="json", by_alias=True, exclude=exclude)
