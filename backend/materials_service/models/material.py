# backend/materials_service/models/material.py
from sqlalchemy import Float, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from materials_service.core.database import Base


class Material(Base):
    """An inventory material tracked by batch number and name."""
    __tablename__ = "materials"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    batch_number: Mapped[str] = mapped_column(String(100), nullable=False)
    material_name: Mapped[str] = mapped_column(String(255), nullable=False)
    alert_quantity: Mapped[float] = mapped_column(Float, nullable=False)  # low-stock threshold
    unit_id: Mapped[int] = mapped_column(Integer, nullable=False)  # id from units.json
    tax_rate_id: Mapped[int] = mapped_column(Integer, nullable=False)  # id from taxRates.json

    __table_args__ = (
        UniqueConstraint(
            "batch_number",
            "material_name",
            name="uq_materials_batch_number_material_name",
        ),
    )
