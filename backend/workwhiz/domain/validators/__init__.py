"""Field validators and the constraint engine that evaluates them."""

from .email import (
    IS_ALLOWED_EMAIL,
    allowed_email,
    allowed_email_message,
    is_allowed_email,
    is_blocked_domain,
)
from .engine import (
    ConstraintContext,
    ConstraintEngine,
    ConstraintViolation,
    FieldConstraint,
)
from .input import validate_input
from .password import IS_STRONG_PASSWORD, PASSWORD_CONSTRAINTS, check_password, is_strong_password
from .phone import get_country_pattern, phone_number, validate_phone_number
from .strings import is_not_empty, is_string, max_length, min_length

__all__ = [
    "ConstraintContext",
    "ConstraintEngine",
    "ConstraintViolation",
    "FieldConstraint",
    "IS_ALLOWED_EMAIL",
    "allowed_email",
    "allowed_email_message",
    "is_allowed_email",
    "is_blocked_domain",
    "get_country_pattern",
    "phone_number",
    "validate_phone_number",
    "IS_STRONG_PASSWORD",
    "PASSWORD_CONSTRAINTS",
    "check_password",
    "is_strong_password",
    "is_not_empty",
    "is_string",
    "max_length",
    "min_length",
    "validate_input",
]
