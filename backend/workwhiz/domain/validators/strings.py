"""Generic string constraints.

Each factory returns a FieldConstraint. Messages name the field being
validated unless a custom message is supplied.
"""

from typing import Any

from ...core.constants import ConstraintNames, ValidationMessages
from .engine import ConstraintContext, FieldConstraint


def _fixed_or(message: str | None, template: str, **params):
    def build(value: Any, context: ConstraintContext) -> str:
        if message is not None:
            return message
        return template.format(field=context.field_name, **params)
    return build


def is_string(message: str | None = None) -> FieldConstraint:
    return FieldConstraint(
        name=ConstraintNames.IS_STRING,
        validate_fn=lambda value, context: isinstance(value, str),
        message_fn=_fixed_or(message, ValidationMessages.NOT_A_STRING),
    )


def is_not_empty(message: str | None = None) -> FieldConstraint:
    """Fails for None and the empty string only."""
    return FieldConstraint(
        name=ConstraintNames.IS_NOT_EMPTY,
        validate_fn=lambda value, context: value is not None and value != "",
        message_fn=_fixed_or(message, ValidationMessages.NOT_EMPTY),
    )


def min_length(length: int, message: str | None = None) -> FieldConstraint:
    """String of at least ``length`` characters; non-strings fail."""
    return FieldConstraint(
        name=ConstraintNames.MIN_LENGTH,
        validate_fn=lambda value, context: isinstance(value, str) and len(value) >= length,
        message_fn=_fixed_or(message, ValidationMessages.MIN_LENGTH, length=length),
    )


def max_length(length: int, message: str | None = None) -> FieldConstraint:
    """String of at most ``length`` characters; non-strings fail."""
    return FieldConstraint(
        name=ConstraintNames.MAX_LENGTH,
        validate_fn=lambda value, context: isinstance(value, str) and len(value) <= length,
        message_fn=_fixed_or(message, ValidationMessages.MAX_LENGTH, length=length),
    )
