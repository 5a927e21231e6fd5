"""Country-aware phone number rule.

The standalone check and the schema constraint share one pattern table.
Unknown country codes fall back to a generic international pattern.
"""

import re

from ...core.constants import ConstraintNames, PhonePatterns, ValidationMessages
from .engine import ConstraintContext, FieldConstraint

_PATTERNS: dict[str, re.Pattern] = {
    country_code: re.compile(pattern)
    for country_code, pattern in PhonePatterns.PATTERNS.items()
}
_FALLBACK = re.compile(PhonePatterns.FALLBACK_PATTERN)


def get_country_pattern(country_code: str) -> re.Pattern:
    """Compiled pattern for an ISO 3166-1 alpha-2 code, or the fallback."""
    return _PATTERNS.get((country_code or "").upper(), _FALLBACK)


def validate_phone_number(phone, country_code: str = PhonePatterns.DEFAULT_COUNTRY) -> bool:
    """Validate a phone number against the country's pattern.

    Examples:
        >>> validate_phone_number("+27821234567", "ZA")
        True
        >>> validate_phone_number("0821234567", "ZA")
        True
        >>> validate_phone_number("+44821234567", "ZA")
        False
        >>> validate_phone_number("+1234567890", "XX")
        True
    """
    if not phone or not isinstance(phone, str):
        return False
    return get_country_pattern(country_code).fullmatch(phone) is not None


def phone_number(
    country_code: str = PhonePatterns.DEFAULT_COUNTRY,
    message: str | None = None
) -> FieldConstraint:
    """Constraint accepting only phone numbers valid for ``country_code``."""
    def build_message(value, context: ConstraintContext) -> str:
        if message is not None:
            return message
        return ValidationMessages.PHONE_INVALID.format(
            field=context.field_name, country_code=country_code
        )

    return FieldConstraint(
        name=ConstraintNames.IS_VALID_PHONE_NUMBER,
        validate_fn=lambda value, context: validate_phone_number(value, country_code),
        message_fn=build_message,
    )
