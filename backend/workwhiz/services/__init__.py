"""Service layer."""

from .transform_service import TransformService, transform_service
from .validation_service import ValidationService, validation_service

__all__ = [
    "TransformService",
    "ValidationService",
    "transform_service",
    "validation_service",
]
