# backend/materials_service/schemas/material.py
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr

# Reference ids are passed through unconverted; ReferenceData decides validity
ReferenceId = StrictInt | StrictStr | StrictFloat | StrictBool | None


class MaterialPayload(BaseModel):
    """Body of create and update requests.

    Every field is optional here; the service decides what counts as missing.
    """

    model_config = ConfigDict(populate_by_name=True)

    batch_number: str | None = Field(None, alias="batchNumber")
    material_name: str | None = Field(None, alias="materialName")
    alert_quantity: float | None = Field(None, alias="alertQuantity")
    unit_id: ReferenceId = Field(None, alias="unitId")
    tax_rate_id: ReferenceId = Field(None, alias="taxRateId")


class MaterialResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    batch_number: str
    material_name: str
    alert_quantity: float
    unit_id: int
    tax_rate_id: int


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
