"""Allowed-email rule.

An address is allowed when it has a valid shape, its domain is not a blocked
provider (or a sub-domain of one) and its top-level domain is deliverable.
The message explains the most important reason first:
required -> malformed -> blocked provider -> generic.
"""

import re

from ...core.constants import ConstraintNames, EmailRules, ValidationMessages
from .engine import FieldConstraint

_EMAIL_RE = re.compile(EmailRules.EMAIL_PATTERN)


def _is_well_formed(email) -> bool:
    return isinstance(email, str) and _EMAIL_RE.fullmatch(email) is not None


def _domain_of(email: str) -> str:
    return email.rsplit("@", 1)[1].lower()


def is_blocked_domain(domain: str) -> bool:
    """True for a blocked provider domain or any of its sub-domains.

    Examples:
        >>> is_blocked_domain("protonmail.com")
        True
        >>> is_blocked_domain("mail.ProtonMail.com")
        True
        >>> is_blocked_domain("notprotonmail.com")
        False
    """
    domain = domain.lower()
    return any(
        domain == blocked or domain.endswith(f".{blocked}")
        for blocked in EmailRules.BLOCKED_DOMAINS
    )


def is_allowed_email(email) -> bool:
    """Check an address against the shape, provider and TLD rules.

    Examples:
        >>> is_allowed_email("valid@gmail.com")
        True
        >>> is_allowed_email("test@protonmail.com")
        False
        >>> is_allowed_email("test@example.invalidtld")
        False
    """
    if not email or not _is_well_formed(email):
        return False

    domain = _domain_of(email)
    if is_blocked_domain(domain):
        return False

    tld = domain.rsplit(".", 1)[-1]
    return tld not in EmailRules.INVALID_TLDS


def allowed_email_message(email) -> str:
    """Pick the message explaining why ``email`` is not allowed."""
    if not email:
        return ValidationMessages.EMAIL_REQUIRED
    if not _is_well_formed(email):
        return ValidationMessages.EMAIL_INVALID_FORMAT
    if is_blocked_domain(_domain_of(email)):
        return ValidationMessages.EMAIL_PROVIDER_BLOCKED
    return ValidationMessages.EMAIL_INVALID


def allowed_email(message: str | None = None) -> FieldConstraint:
    return FieldConstraint(
        name=ConstraintNames.IS_ALLOWED_EMAIL,
        validate_fn=lambda value, context: is_allowed_email(value),
        message_fn=lambda value, context: message or allowed_email_message(value),
    )


IS_ALLOWED_EMAIL = allowed_email()
