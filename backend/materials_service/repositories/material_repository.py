"""Repository for material database operations."""

from typing import List, Optional
from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from materials_service.models.material import Material


class MaterialRepository:
    """Repository for Material database operations.

    All SQL against the ``materials`` table lives here. Writes commit
    straight away; a failed write rolls the session back and re-raises.
    """

    def __init__(self, session: AsyncSession):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_duplicate(
        self,
        batch_number: str,
        material_name: str,
        exclude_id: Optional[int] = None
    ) -> Optional[Material]:
        """Find a material holding the same batch number and name.

        Args:
            batch_number: Batch number to match exactly
            material_name: Material name to match exactly
            exclude_id: Material ID to ignore (the record being updated)

        Returns:
            The first matching Material or None
        """
        stmt = select(Material).where(
            Material.batch_number == batch_number,
            Material.material_name == material_name
        )
        if exclude_id is not None:
            stmt = stmt.where(Material.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.scalar_one_or_none()

    async def create(
        self,
        batch_number: str,
        material_name: str,
        alert_quantity: float,
        unit_id: int,
        tax_rate_id: int
    ) -> Material:
        """Insert a new material.

        Returns:
            Created Material instance with its assigned ID
        """
        material = Material(
            batch_number=batch_number,
            material_name=material_name,
            alert_quantity=alert_quantity,
            unit_id=unit_id,
            tax_rate_id=tax_rate_id
        )
        self.session.add(material)
        try:
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        await self.session.refresh(material)
        return material

    async def list_all(self) -> List[Material]:
        """List all materials in ID order."""
        result = await self.session.execute(select(Material).order_by(Material.id))
        return list(result.scalars().all())

    async def update(
        self,
        material_id: int,
        batch_number: str,
        material_name: str,
        alert_quantity: float,
        unit_id: int,
        tax_rate_id: int
    ) -> int:
        """Overwrite every mutable field of a material.

        Returns:
            Number of rows affected (0 if the ID does not exist)
        """
        stmt = (
            update(Material)
            .where(Material.id == material_id)
            .values(
                batch_number=batch_number,
                material_name=material_name,
                alert_quantity=alert_quantity,
                unit_id=unit_id,
                tax_rate_id=tax_rate_id
            )
        )
        return await self._execute_write(stmt)

    async def delete(self, material_id: int) -> int:
        """Delete a material by ID.

        Returns:
            Number of rows affected (0 if the ID does not exist)
        """
        stmt = delete(Material).where(Material.id == material_id)
        return await self._execute_write(stmt)

    async def _execute_write(self, stmt) -> int:
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        return int(result.rowcount or 0)
