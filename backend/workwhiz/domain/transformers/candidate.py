"""Candidate transformer."""

from .base import (
    EntityTransformer,
    TransformSpec,
    associated,
    collection,
    flag,
    optional,
    required,
    timestamp,
)
from .computed import full_name
from .user import user_transformer

CANDIDATE_INTERNAL = TransformSpec(
    fields={
        "id": required(str),
        "first_name": optional(),
        "last_name": optional(),
        "title": optional(),
        "skills": collection(),
        "is_employed": flag(),
        "user_id": optional(str),
        "user": associated(user_transformer),
        "created_at": timestamp(),
        "updated_at": timestamp(),
    }
)

CANDIDATE_RESPONSE = CANDIDATE_INTERNAL.derive(
    exclude=("user_id",),
    computed={"full_name": full_name},
)

candidate_transformer = EntityTransformer(
    "candidate",
    internal=CANDIDATE_INTERNAL,
    response=CANDIDATE_RESPONSE,
)
