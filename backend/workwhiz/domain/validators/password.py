"""Strong password policy.

Four independent rules, each with its own message:
not empty, at least 12 characters, at most 64 characters, and one character
of each class (lowercase, uppercase, digit, special) drawn only from letters,
digits and the allowed special characters.
"""

import re

from ...core.constants import ConstraintNames, PasswordPolicy, ValidationMessages
from .engine import ConstraintContext, ConstraintEngine, FieldConstraint
from .strings import is_not_empty, max_length, min_length

_STRONG_RE = re.compile(PasswordPolicy.STRONG_PATTERN, re.ASCII)


def is_strong_password(password) -> bool:
    """Check the character-class rule.

    Examples:
        >>> is_strong_password("Str0ngP@ssw0rd!")
        True
        >>> is_strong_password("onlylowercaseletters")
        False
    """
    return (
        bool(password)
        and isinstance(password, str)
        and _STRONG_RE.fullmatch(password) is not None
    )


IS_STRONG_PASSWORD = FieldConstraint(
    name=ConstraintNames.IS_STRONG_PASSWORD,
    validate_fn=lambda value, context: is_strong_password(value),
    message_fn=lambda value, context: ValidationMessages.PASSWORD_WEAK,
)

PASSWORD_CONSTRAINTS: tuple[FieldConstraint, ...] = (
    is_not_empty(ValidationMessages.PASSWORD_EMPTY),
    min_length(PasswordPolicy.MIN_LENGTH, ValidationMessages.PASSWORD_TOO_SHORT),
    max_length(PasswordPolicy.MAX_LENGTH, ValidationMessages.PASSWORD_TOO_LONG),
    IS_STRONG_PASSWORD,
)


def check_password(password) -> list[str]:
    """Every password policy message that applies to ``password``."""
    return ConstraintEngine.evaluate(
        "password",
        password,
        PASSWORD_CONSTRAINTS,
        ConstraintContext(field_name="password", candidate={"password": password}),
    )
