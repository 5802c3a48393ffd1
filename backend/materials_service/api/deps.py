# backend/materials_service/api/deps.py
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from materials_service.core.database import get_db
from materials_service.core.exceptions import InternalError
from materials_service.core.reference_data import ReferenceData
from materials_service.services.material_service import MaterialService


def get_reference_data(request: Request) -> ReferenceData:
    """Reference tables loaded at startup and kept on app.state."""
    reference_data = getattr(request.app.state, "reference_data", None)
    if reference_data is None:
        raise InternalError("Reference data not initialized")
    return reference_data


def get_material_service(
    db: AsyncSession = Depends(get_db),
    reference_data: ReferenceData = Depends(get_reference_data),
) -> MaterialService:
    return MaterialService(db, reference_data)
