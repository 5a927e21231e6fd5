"""Registration and password schemas.

Every registration role shares the base fields (email, phone). Phone numbers
are South African for all roles.
"""

from ...core.constants import (
    ConstraintNames,
    PhonePatterns,
    ValidationLimits,
    ValidationMessages,
)
from ..validators import (
    IS_ALLOWED_EMAIL,
    PASSWORD_CONSTRAINTS,
    is_string,
    min_length,
    phone_number,
    validate_input,
)
from .base import EntitySchema


def build_base_registration_schema() -> EntitySchema:
    return (
        EntitySchema("base_registration")
        .add_field("email", IS_ALLOWED_EMAIL)
        .add_field("phone", phone_number(PhonePatterns.SOUTH_AFRICA))
    )


def _add_name_fields(schema: EntitySchema) -> EntitySchema:
    return (
        schema
        .add_field("first_name", is_string(), min_length(ValidationLimits.MIN_NAME_LENGTH))
        .add_field("last_name", is_string(), min_length(ValidationLimits.MIN_NAME_LENGTH))
    )


def build_admin_registration_schema(base: EntitySchema) -> EntitySchema:
    return _add_name_fields(EntitySchema("admin_registration", base=base))


def build_candidate_registration_schema(base: EntitySchema) -> EntitySchema:
    schema = _add_name_fields(EntitySchema("candidate_registration", base=base))
    return schema.add_field(
        "title", is_string(), min_length(ValidationLimits.MIN_TITLE_LENGTH)
    )


def build_employer_registration_schema(base: EntitySchema) -> EntitySchema:
    return (
        EntitySchema("employer_registration", base=base)
        .add_field("company", is_string(), min_length(ValidationLimits.MIN_COMPANY_LENGTH))
        .add_field("industry", is_string(), min_length(ValidationLimits.MIN_INDUSTRY_LENGTH))
    )


def build_password_schema() -> EntitySchema:
    # Passwords are validated exactly as typed
    return EntitySchema("password").add_field("password", *PASSWORD_CONSTRAINTS, strip=False)


def build_password_update_schema(base: EntitySchema) -> EntitySchema:
    """Password plus a confirmation that must repeat it."""
    schema = EntitySchema("password_update", base=base)
    schema.register_constraint(
        ConstraintNames.PASSWORDS_MATCH,
        lambda value, context: validate_input(value, context.candidate.get("password")),
        lambda value, context: ValidationMessages.PASSWORDS_DO_NOT_MATCH,
    )
    return schema.add_field(
        "password_confirmation", ConstraintNames.PASSWORDS_MATCH, strip=False
    )
