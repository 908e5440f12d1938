"""Pydantic request schemas for the REST API."""

from pydantic import BaseModel, ConfigDict, Field

from cabinet_quotes.domain.value_objects import AdjustmentType, ClientField


class CreateQuoteRequest(BaseModel):
    """Client details for a new quote."""

    model_config = ConfigDict(populate_by_name=True)

    client_name: str = Field(default="", alias="clientName")
    email: str = Field(default="")
    phone: str = Field(default="")
    project_name: str = Field(default="", alias="projectName")
    installation_address: str = Field(default="", alias="installationAddress")


class ClientFieldUpdateRequest(BaseModel):
    """Change one client detail."""

    field: ClientField = Field(..., description="Client field name")
    value: str = Field(..., description="New value")


class SpaceUpdateRequest(BaseModel):
    """Partial update of a space."""

    name: str = Field(..., description="New display label")


class ItemUpdateRequest(BaseModel):
    """Partial update of an item. Omitted fields are left unchanged."""

    model_config = ConfigDict(extra="forbid")

    width: float | None = Field(default=None, gt=0, description="Item width")
    height: float | None = Field(default=None, gt=0, description="Item height")
    depth: float | None = Field(default=None, gt=0, description="Item depth")
    price: float | None = Field(default=None, ge=0, description="Item price")


class AdjustmentRequest(BaseModel):
    """Adjustment to apply to the current subtotal."""

    model_config = ConfigDict(populate_by_name=True)

    adjustment_type: AdjustmentType = Field(
        default=AdjustmentType.DISCOUNT, alias="adjustmentType"
    )
    percentage: float = Field(..., ge=0, le=100, description="Percentage 0-100")
