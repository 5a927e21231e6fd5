"""Data transformers.

Convert domain records (mappings, pydantic models or ORM objects) into
internal DTOs and role-safe response DTOs.
"""

from .admin import admin_transformer
from .authentication import authentication_transformer
from .base import EntityTransformer, FieldRule, Inclusion, TransformSpec
from .candidate import candidate_transformer
from .employer import employer_transformer
from .registry import TRANSFORMERS, get_transformer
from .user import user_transformer

__all__ = [
    "EntityTransformer",
    "FieldRule",
    "Inclusion",
    "TransformSpec",
    "TRANSFORMERS",
    "get_transformer",
    "admin_transformer",
    "authentication_transformer",
    "candidate_transformer",
    "employer_transformer",
    "user_transformer",
]
