"""Transformer lookup by entity kind."""

from ...core.exceptions import UnknownSchemaError
from ..entities import EntityKind, parse_entity_kind
from .admin import admin_transformer
from .authentication import authentication_transformer
from .base import EntityTransformer
from .candidate import candidate_transformer
from .employer import employer_transformer
from .user import user_transformer

TRANSFORMERS: dict[EntityKind, EntityTransformer] = {
    EntityKind.USER: user_transformer,
    EntityKind.ADMIN: admin_transformer,
    EntityKind.CANDIDATE: candidate_transformer,
    EntityKind.EMPLOYER: employer_transformer,
    EntityKind.AUTHENTICATION: authentication_transformer,
}


def get_transformer(kind: EntityKind | str) -> EntityTransformer:
    """Get the transformer for an entity kind.

    Raises:
        UnknownSchemaError: If no transformer is registered for the kind
    """
    known = [entity_kind.value for entity_kind in TRANSFORMERS]
    transformer = TRANSFORMERS.get(parse_entity_kind(kind, known))
    if transformer is None:
        raise UnknownSchemaError(str(getattr(kind, "value", kind)), known)
    return transformer
