"""Employer transformer."""

from .base import (
    EntityTransformer,
    TransformSpec,
    associated,
    flag,
    optional,
    required,
    timestamp,
    to_int,
)
from .computed import company_info
from .user import user_transformer

EMPLOYER_INTERNAL = TransformSpec(
    fields={
        "id": required(str),
        "name": optional(),
        "industry": optional(),
        "website_url": optional(),
        "location": optional(),
        "description": optional(),
        "size": optional(to_int),
        "founded_in": optional(to_int),
        "is_verified": flag(),
        "user_id": optional(str),
        "user": associated(user_transformer),
        "created_at": timestamp(),
        "updated_at": timestamp(),
    }
)

EMPLOYER_RESPONSE = EMPLOYER_INTERNAL.derive(
    exclude=("user_id",),
    computed={"company_info": company_info},
)

employer_transformer = EntityTransformer(
    "employer",
    internal=EMPLOYER_INTERNAL,
    response=EMPLOYER_RESPONSE,
)
