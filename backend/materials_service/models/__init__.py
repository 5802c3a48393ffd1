# Database models
from materials_service.models.material import Material

__all__ = [
    "Material",
]
