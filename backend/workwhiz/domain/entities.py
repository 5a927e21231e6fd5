"""Entity kinds understood by the validation and transformation core."""

import enum

from ..core.exceptions import UnknownSchemaError


class EntityKind(str, enum.Enum):
    """Kinds of input schemas and domain records."""
    # Input schemas
    BASE = "base"
    ADMIN = "admin"
    CANDIDATE = "candidate"
    EMPLOYER = "employer"
    PASSWORD = "password"
    PASSWORD_UPDATE = "password_update"
    # Records
    USER = "user"
    AUTHENTICATION = "authentication"


class TransformMode(str, enum.Enum):
    """Which DTO variant a transformer produces."""
    INTERNAL = "internal"
    RESPONSE = "response"


def parse_entity_kind(kind: "EntityKind | str", known: list[str] | None = None) -> EntityKind:
    """Convert a kind (or its string value) into an EntityKind.

    Raises:
        UnknownSchemaError: If the value names no entity kind
    """
    if isinstance(kind, EntityKind):
        return kind
    try:
        return EntityKind(str(kind).lower())
    except ValueError:
        raise UnknownSchemaError(str(kind), known) from None
