"""Per-entity validation schemas and the registry that serves them."""

from .base import EntitySchema, FieldSpec
from .registry import (
    REGISTRATION_KINDS,
    SchemaRegistry,
    build_default_registry,
    get_registration_schema,
    get_schema,
    schema_registry,
)

__all__ = [
    "EntitySchema",
    "FieldSpec",
    "REGISTRATION_KINDS",
    "SchemaRegistry",
    "build_default_registry",
    "get_registration_schema",
    "get_schema",
    "schema_registry",
]
