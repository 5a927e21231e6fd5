"""Entity Schemas.

An EntitySchema is an ordered mapping from field name to FieldSpec. A schema
built on a base starts with the base's fields in the base's order, and owns
a constraint scope that inherits the base's named rules. Redefining an
inherited field replaces it in place.

Schemas are built once at import time and frozen; a frozen schema rejects
any further change.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ...core.exceptions import DuplicateConstraintError, SchemaConfigurationError
from ..validators.engine import (
    ConstraintEngine,
    FieldConstraint,
    MessageFn,
    ValidateFn,
)


@dataclass(frozen=True)
class FieldSpec:
    """Validation shape of one field.

    Attributes:
        name: Field name as it appears in the input
        constraints: Constraints evaluated in order, all of them ANDed
        nested: Schema applied to a mapping value (associated objects)
        required: Report a missing value before running the constraints
        strip: Trim surrounding whitespace from string input during coercion
    """
    name: str
    constraints: tuple[FieldConstraint, ...] = ()
    nested: "EntitySchema | None" = None
    required: bool = False
    strip: bool = True

    @property
    def constraint_names(self) -> list[str]:
        return [constraint.name for constraint in self.constraints]


class EntitySchema:
    """Ordered field-to-constraints mapping for one kind of input."""

    def __init__(self, name: str, base: "EntitySchema | None" = None):
        self.name = name
        self.base = base
        self.engine = base.engine.extend(name) if base is not None else ConstraintEngine(name)
        self._fields: dict[str, FieldSpec] = dict(base._fields) if base is not None else {}
        self._frozen = False

    def _ensure_mutable(self, action: str):
        if self._frozen:
            raise SchemaConfigurationError(
                f"Cannot {action}: schema '{self.name}' is frozen"
            )

    def register_constraint(
        self,
        name: str,
        validate_fn: ValidateFn,
        message_fn: MessageFn
    ) -> FieldConstraint:
        """Register a named rule local to this schema (and schemas built on it)."""
        self._ensure_mutable(f"register constraint '{name}'")
        return self.engine.register_constraint(name, validate_fn, message_fn)

    def add_field(
        self,
        name: str,
        *constraints: FieldConstraint | str,
        nested: "EntitySchema | None" = None,
        required: bool = False,
        strip: bool = True
    ) -> "EntitySchema":
        """Declare (or override) a field. Returns the schema for chaining.

        Constraints may be FieldConstraint objects or names of rules
        registered in this schema's scope.

        Raises:
            DuplicateConstraintError: If two constraints on the field share a name
            SchemaConfigurationError: If a named rule is unknown or the schema is frozen
        """
        self._ensure_mutable(f"add field '{name}'")

        resolved = tuple(
            self.engine.get_constraint(constraint) if isinstance(constraint, str) else constraint
            for constraint in constraints
        )

        seen = set()
        for constraint in resolved:
            if constraint.name in seen:
                raise DuplicateConstraintError(constraint.name, f"{self.name}.{name}")
            seen.add(constraint.name)

        self._fields[name] = FieldSpec(
            name=name,
            constraints=resolved,
            nested=nested,
            required=required,
            strip=strip,
        )
        return self

    def freeze(self) -> "EntitySchema":
        self.engine.freeze()
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def fields(self) -> Mapping[str, FieldSpec]:
        return MappingProxyType(self._fields)

    @property
    def field_names(self) -> list[str]:
        return list(self._fields)

    def get_field(self, name: str) -> FieldSpec:
        return self._fields[name]

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[FieldSpec]:
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"EntitySchema(name={self.name!r}, fields={self.field_names!r})"
