# backend/materials_service/services/material_service.py
"""Validation, duplicate detection and CRUD for materials."""

import logging
from typing import List, NoReturn, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from materials_service.core.exceptions import ConflictError, InternalError, ValidationError
from materials_service.core.reference_data import ReferenceData
from materials_service.models.material import Material
from materials_service.repositories.material_repository import MaterialRepository
from materials_service.schemas.material import MaterialPayload

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "Duplicate batchNumber + materialName"


def _db_message(exc: SQLAlchemyError) -> str:
    """Driver-level message of a database error, without SQLAlchemy's SQL dump."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class MaterialService:
    """Material CRUD on top of MaterialRepository.

    The duplicate check is a plain read before the write, so two concurrent
    writers can both pass it; the unique constraint on the table catches the
    loser and it is reported as a conflict as well.
    """

    def __init__(self, session: AsyncSession, reference_data: ReferenceData):
        self.repo = MaterialRepository(session)
        self.reference_data = reference_data

    def _check_references(self, payload: MaterialPayload) -> None:
        if not self.reference_data.is_valid_unit_id(payload.unit_id):
            raise ValidationError("Invalid unitId")
        if not self.reference_data.is_valid_tax_rate_id(payload.tax_rate_id):
            raise ValidationError("Invalid taxRateId")

    async def _raise_write_error(
        self,
        operation: str,
        payload: MaterialPayload,
        exc: SQLAlchemyError,
        exclude_id: Optional[int] = None,
    ) -> NoReturn:
        """Turn a failed write into ConflictError or InternalError."""
        if isinstance(exc, IntegrityError):
            try:
                duplicate = await self.repo.find_duplicate(
                    payload.batch_number, payload.material_name, exclude_id=exclude_id
                )
            except SQLAlchemyError:
                duplicate = None
            if duplicate is not None:
                logger.info(f"{operation}: lost duplicate race against material {duplicate.id}")
                raise ConflictError(DUPLICATE_MESSAGE) from exc

        logger.error(f"{operation} failed: {_db_message(exc)}")
        raise InternalError(_db_message(exc)) from exc

    async def create(self, payload: MaterialPayload) -> Material:
        """Validate and insert a new material.

        Zero alert quantity and empty strings count as missing.

        Raises:
            ValidationError: Missing field or unknown unit / tax rate
            ConflictError: Batch number + name already used
            InternalError: Database failure
        """
        if not (
            payload.batch_number
            and payload.material_name
            and payload.alert_quantity
            and payload.unit_id
            and payload.tax_rate_id
        ):
            raise ValidationError("Missing required fields")
        self._check_references(payload)

        try:
            existing = await self.repo.find_duplicate(payload.batch_number, payload.material_name)
        except SQLAlchemyError as e:
            await self._raise_write_error("create", payload, e)
        if existing is not None:
            raise ConflictError(DUPLICATE_MESSAGE)

        try:
            material = await self.repo.create(
                batch_number=payload.batch_number,
                material_name=payload.material_name,
                alert_quantity=payload.alert_quantity,
                unit_id=payload.unit_id,
                tax_rate_id=payload.tax_rate_id,
            )
        except SQLAlchemyError as e:
            await self._raise_write_error("create", payload, e)

        logger.info(
            f"Created material {material.id} ({material.batch_number!r}, {material.material_name!r})"
        )
        return material

    async def list_all(self) -> List[Material]:
        """Return every material.

        Raises:
            InternalError: Database failure
        """
        try:
            return await self.repo.list_all()
        except SQLAlchemyError as e:
            logger.error(f"list failed: {_db_message(e)}")
            raise InternalError(_db_message(e)) from e

    async def update(self, material_id: int, payload: MaterialPayload) -> None:
        """Overwrite all mutable fields of a material.

        Only the unit and tax-rate references are validated; missing fields
        reach the database as NULL and fail there. An unknown ID is not an
        error.

        Raises:
            ValidationError: Unknown unit / tax rate
            ConflictError: Another material already uses batch number + name
            InternalError: Database failure
        """
        self._check_references(payload)

        try:
            conflict = await self.repo.find_duplicate(
                payload.batch_number, payload.material_name, exclude_id=material_id
            )
        except SQLAlchemyError as e:
            await self._raise_write_error("update", payload, e, exclude_id=material_id)
        if conflict is not None:
            raise ConflictError(DUPLICATE_MESSAGE)

        try:
            affected = await self.repo.update(
                material_id,
                batch_number=payload.batch_number,
                material_name=payload.material_name,
                alert_quantity=payload.alert_quantity,
                unit_id=payload.unit_id,
                tax_rate_id=payload.tax_rate_id,
            )
        except SQLAlchemyError as e:
            await self._raise_write_error("update", payload, e, exclude_id=material_id)

        if affected == 0:
            logger.warning(f"Update of material {material_id}: no such material")
        else:
            logger.info(f"Updated material {material_id}")

    async def delete(self, material_id: int) -> None:
        """Delete a material. Deleting an unknown ID is not an error.

        Raises:
            InternalError: Database failure
        """
        try:
            affected = await self.repo.delete(material_id)
        except SQLAlchemyError as e:
            logger.error(f"delete failed: {_db_message(e)}")
            raise InternalError(_db_message(e)) from e

        if affected == 0:
            logger.warning(f"Delete of material {material_id}: no such material")
        else:
            logger.info(f"Deleted material {material_id}")
