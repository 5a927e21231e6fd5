"""DateTime parsing utilities."""

from datetime import UTC, datetime


def parse_timestamp(value) -> datetime | None:
    """Parse a stored timestamp into an aware datetime.

    Accepts datetime objects and ISO-8601 strings (a trailing ``Z`` is read
    as UTC). Naive values are assumed to be UTC.

    Returns:
        Datetime object or None if the value cannot be parsed

    Examples:
        >>> parse_timestamp("2024-01-15T10:30:00Z")
        datetime.datetime(2024, 1, 15, 10, 30, tzinfo=datetime.timezone.utc)
        >>> parse_timestamp("not-a-date") is None
        True
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
