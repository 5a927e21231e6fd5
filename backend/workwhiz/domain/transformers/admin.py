"""Admin transformer."""

from ...core.constants import Permissions
from .base import (
    EntityTransformer,
    TransformSpec,
    associated,
    collection,
    optional,
    required,
    timestamp,
    to_string_list,
)
from .computed import full_name
from .user import user_transformer


def to_permissions(value) -> list[str]:
    permissions = to_string_list(value)
    unknown = [permission for permission in permissions if permission not in Permissions.ALL_PERMISSIONS]
    if unknown:
        raise ValueError(f"unknown permissions: {', '.join(unknown)}")
    return permissions


ADMIN_INTERNAL = TransformSpec(
    fields={
        "id": required(str),
        "first_name": optional(),
        "last_name": optional(),
        "permissions": collection(to_permissions),
        "user_id": optional(str),
        "user": associated(user_transformer),
        "created_at": timestamp(),
        "updated_at": timestamp(),
    }
)

ADMIN_RESPONSE = ADMIN_INTERNAL.derive(
    exclude=("user_id",),
    computed={"full_name": full_name},
)

admin_transformer = EntityTransformer(
    "admin",
    internal=ADMIN_INTERNAL,
    response=ADMIN_RESPONSE,
)
