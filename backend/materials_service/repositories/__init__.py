"""Repository layer for database operations.

This module provides the repository class for the materials table.
"""

from materials_service.repositories.material_repository import MaterialRepository

__all__ = [
    "MaterialRepository",
]
