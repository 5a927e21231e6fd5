"""Validation Service Layer.

Entry point used by the API (and by other services) to validate raw input.
Keeps the endpoints free of schema lookups and role handling.
"""

from typing import Any

from ..core.logging import get_logger
from ..domain.entities import EntityKind
from ..domain.pipeline import ValidationPipeline, ValidationResult, validation_pipeline
from ..domain.roles import Role
from ..domain.schemas.registry import REGISTRATION_KINDS

logger = get_logger(__name__)


class ValidationService:
    """Service for validating raw input against registered schemas."""

    def __init__(self, pipeline: ValidationPipeline = validation_pipeline):
        self.pipeline = pipeline

    def validate(self, entity_kind: EntityKind | str, raw_input: Any) -> ValidationResult:
        """Validate raw input against the schema of an entity kind.

        Args:
            entity_kind: Registered entity kind (e.g. "candidate")
            raw_input: Untrusted input, usually a decoded JSON body

        Returns:
            ValidationResult with either errors or validated data

        Raises:
            UnknownSchemaError: If the entity kind has no schema
        """
        return self.pipeline.validate(entity_kind, raw_input)

    async def validate_async(self, entity_kind: EntityKind | str, raw_input: Any) -> ValidationResult:
        return await self.pipeline.validate_async(entity_kind, raw_input)

    async def validate_registration(self, role: Role, raw_input: Any) -> ValidationResult:
        """Validate a registration form for the given role."""
        entity_kind = REGISTRATION_KINDS[role]
        logger.debug(
            "Validating registration",
            extra={'role': role.value, 'entity_kind': entity_kind.value}
        )
        return await self.pipeline.validate_async(entity_kind, raw_input)


validation_service = ValidationService()
