"""Validation Pipeline.

Turns raw, untrusted input into a ValidationResult:

1. Coerce the input into a candidate shaped by the schema. Unknown keys are
   ignored, missing fields become None and string values are trimmed unless
   the field opts out.
2. Evaluate every field's constraints through the ConstraintEngine.
3. Flatten the messages in field-declaration order, then constraint order.
4. Return either the errors or the validated candidate.

Validation failures are data, never exceptions. Only configuration errors
(such as an unknown entity kind) are raised.
"""

import asyncio
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from pydantic import BaseModel, Field, model_validator

from ..core.constants import ConstraintNames, ValidationMessages
from ..core.logging import get_logger
from ..core.metrics import constraint_violations_total, validations_total
from ..utils.strings import sanitize_string
from .entities import EntityKind
from .schemas.base import EntitySchema, FieldSpec
from .schemas.registry import SchemaRegistry, schema_registry
from .validators.engine import ConstraintContext, ConstraintEngine, ConstraintViolation

logger = get_logger(__name__)


class ValidationResult(BaseModel):
    """Outcome of validating one input.

    Exactly one of ``errors`` and ``validated_data`` is populated. The
    structured violations (with constraint names) stay available to callers
    but are not serialized.
    """
    is_valid: bool
    errors: list[str] | None = None
    validated_data: dict[str, Any] | None = None
    violations: list[ConstraintViolation] = Field(default_factory=list, exclude=True)

    @model_validator(mode='after')
    def check_exclusive_payload(self):
        if self.is_valid:
            if self.errors is not None or self.validated_data is None:
                raise ValueError("A valid result carries validated_data and no errors")
        elif not self.errors or self.validated_data is not None:
            raise ValueError("An invalid result carries errors and no validated_data")
        return self

    @property
    def failed_constraints(self) -> list[str]:
        return [violation.constraint for violation in self.violations]


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


class ValidationPipeline:
    """Validates raw input against the schemas of a SchemaRegistry."""

    def __init__(self, registry: SchemaRegistry = schema_registry):
        self.registry = registry

    def _resolve(self, target: EntitySchema | EntityKind | str) -> EntitySchema:
        if isinstance(target, EntitySchema):
            return target
        return self.registry.get_schema(target)

    def coerce(self, schema: EntitySchema, raw_input: Any) -> dict[str, Any]:
        """Build a candidate holding exactly the schema's fields.

        The raw input is never modified.
        """
        if raw_input is None:
            raw_input = {}
        elif isinstance(raw_input, BaseModel):
            raw_input = raw_input.model_dump()
        elif not isinstance(raw_input, Mapping):
            logger.warning(
                "Non-mapping input treated as empty",
                extra={'schema': schema.name, 'input_type': type(raw_input).__name__}
            )
            raw_input = {}

        candidate = {}
        for spec in schema:
            value = raw_input.get(spec.name)
            if spec.nested is not None and isinstance(value, Mapping):
                value = self.coerce(spec.nested, value)
            elif spec.strip:
                value = sanitize_string(value)
            candidate[spec.name] = value
        return candidate

    def _field_violations(
        self,
        spec: FieldSpec,
        value: Any,
        candidate: Mapping[str, Any],
        path: str | None = None
    ) -> list[ConstraintViolation]:
        field_path = f"{path}.{spec.name}" if path else spec.name
        context = ConstraintContext(field_name=spec.name, candidate=candidate)

        violations = []
        if spec.required and _is_missing(value):
            violations.append(
                ConstraintViolation(
                    field=field_path,
                    constraint=ConstraintNames.REQUIRED,
                    message=ValidationMessages.REQUIRED.format(field=spec.name),
                )
            )

        violations.extend(
            replace(violation, field=field_path)
            for violation in ConstraintEngine.evaluate_violations(
                spec.name, value, spec.constraints, context
            )
        )

        if spec.nested is not None and isinstance(value, Mapping):
            for nested_spec in spec.nested:
                violations.extend(
                    self._field_violations(
                        nested_spec, value.get(nested_spec.name), value, field_path
                    )
                )

        return violations

    def collect_violations(
        self,
        schema: EntitySchema,
        candidate: Mapping[str, Any]
    ) -> list[ConstraintViolation]:
        """Violations of every field, in declaration order."""
        violations = []
        for spec in schema:
            violations.extend(self._field_violations(spec, candidate.get(spec.name), candidate))
        return violations

    def _build_result(
        self,
        schema: EntitySchema,
        candidate: dict[str, Any],
        violations: list[ConstraintViolation]
    ) -> ValidationResult:
        if violations:
            validations_total.labels(entity_kind=schema.name, result="invalid").inc()
            for violation in violations:
                constraint_violations_total.labels(
                    entity_kind=schema.name, constraint=violation.constraint
                ).inc()

            logger.info(
                "Validation failed",
                extra={
                    'schema': schema.name,
                    'error_count': len(violations),
                    'fields': sorted({violation.field for violation in violations}),
                }
            )
            return ValidationResult(
                is_valid=False,
                errors=[violation.message for violation in violations],
                violations=violations,
            )

        validations_total.labels(entity_kind=schema.name, result="valid").inc()
        logger.debug("Validation passed", extra={'schema': schema.name})
        return ValidationResult(is_valid=True, validated_data=candidate)

    def validate(self, target: EntitySchema | EntityKind | str, raw_input: Any) -> ValidationResult:
        """Validate raw input against a schema or a registered entity kind.

        Raises:
            UnknownSchemaError: If ``target`` names no registered schema
        """
        schema = self._resolve(target)
        candidate = self.coerce(schema, raw_input)
        return self._build_result(schema, candidate, self.collect_violations(schema, candidate))

    async def validate_async(
        self,
        target: EntitySchema | EntityKind | str,
        raw_input: Any
    ) -> ValidationResult:
        """Validate with fields evaluated concurrently.

        Results are gathered in completion order and then sorted by field
        position, so the errors match ``validate`` exactly.
        """
        schema = self._resolve(target)
        candidate = self.coerce(schema, raw_input)

        async def evaluate_field(position: int, spec: FieldSpec):
            return position, self._field_violations(spec, candidate.get(spec.name), candidate)

        outcomes = []
        for completed in asyncio.as_completed(
            [evaluate_field(position, spec) for position, spec in enumerate(schema)]
        ):
            outcomes.append(await completed)
        outcomes.sort(key=lambda outcome: outcome[0])

        violations = [violation for _, field_violations in outcomes for violation in field_violations]
        return self._build_result(schema, candidate, violations)


validation_pipeline = ValidationPipeline()
