"""Pydantic schemas for API responses."""

from .api import (
    ErrorResponse,
    HealthResponse,
    RegistrationAccepted,
    ValidationResponse,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "RegistrationAccepted",
    "ValidationResponse",
]
