"""Pydantic Schemas for API Responses.

Request bodies are accepted as raw JSON and validated by the validation
pipeline, so only response shapes are declared here.
"""

from typing import Any

from pydantic import BaseModel, Field

from ..domain.roles import Role


class ValidationResponse(BaseModel):
    """Outcome of a validation request."""
    is_valid: bool
    errors: list[str] | None = Field(default=None, description="Messages, in field order")
    validated_data: dict[str, Any] | None = Field(default=None, description="Coerced input")


class RegistrationAccepted(BaseModel):
    """Registration accepted; the password setup email is queued."""
    role: Role
    validated_data: dict[str, Any]
    job_id: str | None = None


class ErrorResponse(BaseModel):
    """Error payload returned for configuration and transformation failures."""
    error: str
    detail: str | None = None
    request_id: str | None = None


class HealthResponse(BaseModel):
    status: str
    application: str
    version: str
    environment: str
