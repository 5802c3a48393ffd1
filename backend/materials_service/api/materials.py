"""REST API endpoints for materials."""

from fastapi import APIRouter, Depends, status

from materials_service.api.deps import get_material_service
from materials_service.schemas.material import (
    ErrorResponse,
    MaterialPayload,
    MaterialResponse,
    MessageResponse,
)
from materials_service.services.material_service import MaterialService

router = APIRouter(prefix="/materials", tags=["materials"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing field or unknown reference id"},
    409: {"model": ErrorResponse, "description": "Duplicate batchNumber + materialName"},
    500: {"model": ErrorResponse, "description": "Database failure"},
}


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
async def create_material(
    payload: MaterialPayload | None = None,
    service: MaterialService = Depends(get_material_service),
) -> MessageResponse:
    """Create a material.

    All five fields are required; a zero alertQuantity counts as missing.
    """
    # An absent or null body is treated as an empty object
    await service.create(payload or MaterialPayload())
    return MessageResponse(message="Material added")


@router.get("", response_model=list[MaterialResponse], responses={500: ERROR_RESPONSES[500]})
async def list_materials(
    service: MaterialService = Depends(get_material_service),
) -> list[MaterialResponse]:
    """List every material."""
    materials = await service.list_all()
    return [MaterialResponse.model_validate(m) for m in materials]


@router.put("/{material_id}", response_model=MessageResponse, responses=ERROR_RESPONSES)
async def update_material(
    material_id: int,
    payload: MaterialPayload | None = None,
    service: MaterialService = Depends(get_material_service),
) -> MessageResponse:
    """Replace every field of a material.

    Reports success even when no material has this ID.
    """
    await service.update(material_id, payload or MaterialPayload())
    return MessageResponse(message="Material updated")


@router.delete("/{material_id}", response_model=MessageResponse, responses={500: ERROR_RESPONSES[500]})
async def delete_material(
    material_id: int,
    service: MaterialService = Depends(get_material_service),
) -> MessageResponse:
    """Delete a material. Reports success even when no material has this ID."""
    await service.delete(material_id)
    return MessageResponse(message="Material deleted")
