"""Schema Registry.

Maps entity kinds to their frozen EntitySchema. The default registry is built
once at import time and shared by every request.
"""

from ...core.exceptions import SchemaConfigurationError, UnknownSchemaError
from ...core.logging import get_logger
from ..entities import EntityKind, parse_entity_kind
from ..roles import Role
from .base import EntitySchema
from .registration import (
    build_admin_registration_schema,
    build_base_registration_schema,
    build_candidate_registration_schema,
    build_employer_registration_schema,
    build_password_schema,
    build_password_update_schema,
)

logger = get_logger(__name__)

REGISTRATION_KINDS: dict[Role, EntityKind] = {
    Role.ADMIN: EntityKind.ADMIN,
    Role.CANDIDATE: EntityKind.CANDIDATE,
    Role.EMPLOYER: EntityKind.EMPLOYER,
}


class SchemaRegistry:
    """Lookup table from entity kind to schema.

    Usage:
        schema = schema_registry.get_schema("candidate")
        schema.field_names  # ['email', 'phone', 'first_name', 'last_name', 'title']
    """

    def __init__(self):
        self._schemas: dict[EntityKind, EntitySchema] = {}

    def register(self, kind: EntityKind, schema: EntitySchema) -> EntitySchema:
        """Register and freeze a schema.

        Raises:
            SchemaConfigurationError: If a schema is already registered for the kind
        """
        if kind in self._schemas:
            raise SchemaConfigurationError(f"Schema for '{kind.value}' is already registered")
        self._schemas[kind] = schema.freeze()
        return schema

    def get_schema(self, kind: EntityKind | str) -> EntitySchema:
        """Get the schema registered for an entity kind.

        Raises:
            UnknownSchemaError: If no schema is registered for the kind
        """
        entity_kind = parse_entity_kind(kind, self.kinds)
        schema = self._schemas.get(entity_kind)
        if schema is None:
            raise UnknownSchemaError(entity_kind.value, self.kinds)
        return schema

    @property
    def kinds(self) -> list[str]:
        return [kind.value for kind in self._schemas]

    def __contains__(self, kind: object) -> bool:
        return kind in self._schemas


def build_default_registry() -> SchemaRegistry:
    registry = SchemaRegistry()

    base = registry.register(EntityKind.BASE, build_base_registration_schema())
    registry.register(EntityKind.ADMIN, build_admin_registration_schema(base))
    registry.register(EntityKind.CANDIDATE, build_candidate_registration_schema(base))
    registry.register(EntityKind.EMPLOYER, build_employer_registration_schema(base))

    password = registry.register(EntityKind.PASSWORD, build_password_schema())
    registry.register(EntityKind.PASSWORD_UPDATE, build_password_update_schema(password))

    logger.debug("Schema registry built", extra={'kinds': registry.kinds})
    return registry


schema_registry = build_default_registry()


def get_schema(kind: EntityKind | str) -> EntitySchema:
    """Get a schema from the default registry."""
    return schema_registry.get_schema(kind)


def get_registration_schema(role: Role) -> EntitySchema:
    return schema_registry.get_schema(REGISTRATION_KINDS[role])
