"""User transformer.

The internal DTO keeps the password hash for inter-service use. It never
leaves the process: response DTOs drop it, and users nested inside other
entities are always stripped of it.
"""

from ...core.constants import SensitiveFields
from ..roles import Role
from .base import (
    EntityTransformer,
    TransformSpec,
    flag,
    nullable,
    optional,
    required,
    timestamp,
)
from .computed import account_status


def to_role(value) -> str:
    return Role(value).value


USER_INTERNAL = TransformSpec(
    fields={
        "id": required(str),
        "avatar_url": optional(),
        "email": required(),
        "phone": nullable(),
        SensitiveFields.PASSWORD: optional(),
        "role": required(to_role),
        "is_verified": flag(),
        "is_active": flag(),
        "is_locked": flag(),
        "created_at": timestamp(),
        "updated_at": timestamp(),
    }
)

USER_RESPONSE = USER_INTERNAL.derive(
    exclude=(SensitiveFields.PASSWORD,),
    computed={"status": account_status},
)

user_transformer = EntityTransformer(
    "user",
    internal=USER_INTERNAL,
    response=USER_RESPONSE,
    sensitive=SensitiveFields.USER,
)
