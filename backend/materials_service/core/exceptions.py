# backend/materials_service/core/exceptions.py
"""Error types raised by the material service and rendered as ``{"error": ...}``."""


class MaterialServiceError(Exception):
    """Base exception for material operations."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(MaterialServiceError):
    """Raised when a payload is incomplete or references an unknown unit / tax rate."""

    status_code = 400


class ConflictError(MaterialServiceError):
    """Raised when another material already uses the batch number + name pair."""

    status_code = 409


class InternalError(MaterialServiceError):
    """Raised when the database fails; carries the driver's message as-is."""

    status_code = 500
