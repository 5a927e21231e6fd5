"""String manipulation utilities."""

from typing import Any

from ..core.constants import Security


def sanitize_string(value: Any) -> Any:
    """Trim leading and trailing whitespace from string values.

    Non-string values are returned untouched so that type constraints can
    still report them.

    Examples:
        >>> sanitize_string("  hello world  ")
        'hello world'
        >>> sanitize_string(42)
        42
    """
    if isinstance(value, str):
        return value.strip()
    return value


def mask_email(email: str) -> str:
    """Mask the local part of an email address for logging.

    Examples:
        >>> mask_email("john.doe@gmail.com")
        'jo****@gmail.com'
        >>> mask_email("invalid")
        '****'
    """
    if not email or not isinstance(email, str) or "@" not in email:
        return Security.MASK

    local, _, domain = email.partition("@")
    visible = local[:Security.EMAIL_VISIBLE_CHARS]
    return f"{visible}{Security.MASK}@{domain}"


def mask_phone(phone: str) -> str:
    """Mask a phone number, keeping only its last digits.

    Examples:
        >>> mask_phone("+27821234567")
        '****567'
    """
    if not phone or not isinstance(phone, str):
        return Security.MASK

    if len(phone) <= Security.PHONE_VISIBLE_CHARS:
        return Security.MASK

    return Security.MASK + phone[-Security.PHONE_VISIBLE_CHARS:]


def sanitize_log_data(data: dict[str, Any]) -> dict[str, Any]:
    """Sanitize log data by masking PII and removing secrets.

    Fields that are treated as sensitive:
    - password, password_confirmation and MFA/OTP secrets: replaced entirely
    - email: local part masked
    - phone: all but the last digits masked

    Nested dictionaries and lists of dictionaries are sanitized recursively.

    Examples:
        >>> sanitize_log_data({'email': 'john@gmail.com', 'password': 'S3cret!'})
        {'email': 'jo****@gmail.com', 'password': '[REDACTED]'}
    """
    if not data or not isinstance(data, dict):
        return data

    sanitized = data.copy()

    for key in Security.REDACTED_LOG_KEYS:
        if key in sanitized:
            sanitized[key] = Security.REDACTED

    if sanitized.get('email'):
        sanitized['email'] = mask_email(sanitized['email'])

    if sanitized.get('phone'):
        sanitized['phone'] = mask_phone(sanitized['phone'])

    for key, value in sanitized.items():
        if isinstance(value, dict):
            sanitized[key] = sanitize_log_data(value)
        elif isinstance(value, list):
            sanitized[key] = [
                sanitize_log_data(item) if isinstance(item, dict) else item
                for item in value
            ]

    return sanitized
