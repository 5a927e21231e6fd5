"""Declarative record-to-DTO transformation.

A TransformSpec lists, for one DTO shape, how each field is carried over
from the domain record:

- ALWAYS: always present; a missing value takes the field's default, and a
  missing value without a default is a TransformationError
- IF_PRESENT: present only when the record has a (non-None) value
- NEVER: never present

Computed getters run on the finished DTO and are appended after the
declared fields. Each entity has an internal spec (for inter-service use)
and a response spec (for API consumers). Passwords and MFA/OTP secrets,
plus any extra fields in the transformer's sensitive set, are removed from
response DTOs after everything else has run, so no spec can put them back.
"""

import enum
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel

from ...core.constants import SensitiveFields, TransformDefaults
from ...core.exceptions import SchemaConfigurationError, TransformationError
from ...utils.datetime import parse_timestamp
from ..entities import TransformMode

ComputedGetter = Callable[[Mapping[str, Any]], Any]


class Inclusion(str, enum.Enum):
    """Inclusion policy of a DTO field."""
    ALWAYS = "always"
    IF_PRESENT = "if_present"
    NEVER = "never"


@dataclass(frozen=True)
class FieldRule:
    """How one record field becomes a DTO field."""
    include: Inclusion = Inclusion.ALWAYS
    default: Callable[[], Any] | None = None
    transform: Callable[[Any], Any] | None = None
    nested: "EntityTransformer | None" = None


@dataclass(frozen=True)
class TransformSpec:
    """Field rules and computed getters of one DTO shape."""
    fields: Mapping[str, FieldRule]
    computed: Mapping[str, ComputedGetter] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        object.__setattr__(self, "computed", MappingProxyType(dict(self.computed)))

    def derive(
        self,
        *,
        exclude: tuple[str, ...] = (),
        computed: Mapping[str, ComputedGetter] | None = None
    ) -> "TransformSpec":
        """A new spec without ``exclude`` and with extra computed getters."""
        return TransformSpec(
            fields={name: rule for name, rule in self.fields.items() if name not in exclude},
            computed={**self.computed, **(computed or {})},
        )


# ============================================================================
# Field rule helpers
# ============================================================================

def to_datetime(value):
    parsed = parse_timestamp(value)
    if parsed is None:
        raise ValueError(f"'{value}' is not a valid timestamp")
    return parsed


def to_string_list(value):
    if not isinstance(value, (list, tuple, set, frozenset)):
        raise ValueError("expected a list of strings")
    items = list(value)
    if not all(isinstance(item, str) for item in items):
        raise ValueError("expected a list of strings")
    return items


def to_int(value):
    if isinstance(value, bool):
        raise ValueError("expected a number")
    return int(value)


def required(transform: Callable[[Any], Any] | None = None) -> FieldRule:
    """Must be present in the record."""
    return FieldRule(Inclusion.ALWAYS, transform=transform)


def optional(transform: Callable[[Any], Any] | None = None) -> FieldRule:
    return FieldRule(Inclusion.IF_PRESENT, transform=transform)


def nullable(transform: Callable[[Any], Any] | None = None) -> FieldRule:
    """Always present, None when missing."""
    return FieldRule(Inclusion.ALWAYS, default=lambda: None, transform=transform)


def flag() -> FieldRule:
    return FieldRule(Inclusion.ALWAYS, default=lambda: False, transform=bool)


def counter() -> FieldRule:
    return FieldRule(Inclusion.ALWAYS, default=lambda: 0, transform=to_int)


def collection(transform: Callable[[Any], Any] = to_string_list) -> FieldRule:
    return FieldRule(Inclusion.ALWAYS, default=list, transform=transform)


def timestamp() -> FieldRule:
    """Always present, the Unix epoch when missing."""
    return FieldRule(Inclusion.ALWAYS, default=lambda: TransformDefaults.EPOCH, transform=to_datetime)


def associated(transformer: "EntityTransformer") -> FieldRule:
    return FieldRule(Inclusion.IF_PRESENT, nested=transformer)


def never() -> FieldRule:
    return FieldRule(Inclusion.NEVER)


# ============================================================================
# Transformer
# ============================================================================

def _read(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


class EntityTransformer:
    """Produces internal and response DTOs for one entity.

    Usage:
        candidate_transformer.to_internal({"id": "c-1", "first_name": "John"})
        candidate_transformer.to_response({"id": "c-1", "first_name": "John"})
    """

    def __init__(
        self,
        entity: str,
        internal: TransformSpec,
        response: TransformSpec,
        sensitive: frozenset[str] = frozenset()
    ):
        extra = set(response.fields) - set(internal.fields)
        if extra:
            raise SchemaConfigurationError(
                f"Response DTO of '{entity}' declares fields missing from its internal DTO: "
                f"{', '.join(sorted(extra))}"
            )
        self.entity = entity
        self.internal = internal
        self.response = response
        self.sensitive = SensitiveFields.ALWAYS | frozenset(sensitive)

    def _field_value(self, name: str, rule: FieldRule, record: Any, mode: TransformMode):
        value = _read(record, name)

        if value is None:
            if rule.include is Inclusion.IF_PRESENT:
                return None, False
            if rule.default is None:
                raise TransformationError(self.entity, name, "required field is missing")
            return rule.default(), True

        if rule.nested is not None:
            if isinstance(value, BaseModel):
                value = value.model_dump()
            if mode is TransformMode.RESPONSE:
                return rule.nested.to_response(value), True
            return rule.nested.to_internal(value, strip_sensitive=True), True

        if rule.transform is not None:
            try:
                value = rule.transform(value)
            except (TypeError, ValueError) as e:
                raise TransformationError(self.entity, name, str(e)) from e

        return value, True

    def _apply(self, spec: TransformSpec, record: Any, mode: TransformMode) -> dict[str, Any]:
        if record is None:
            raise TransformationError(self.entity, "*", "record is missing")
        if isinstance(record, BaseModel):
            record = record.model_dump()

        dto: dict[str, Any] = {}
        for name, rule in spec.fields.items():
            if rule.include is Inclusion.NEVER:
                continue
            value, present = self._field_value(name, rule, record, mode)
            if present:
                dto[name] = value

        for name, getter in spec.computed.items():
            try:
                dto[name] = getter(MappingProxyType(dto))
            except (TypeError, ValueError) as e:
                raise TransformationError(self.entity, name, str(e)) from e

        return dto

    def to_internal(self, record: Any, *, strip_sensitive: bool = False) -> dict[str, Any]:
        """Near-complete DTO with per-field defaults applied.

        Raises:
            TransformationError: If a required field is missing or malformed
        """
        dto = self._apply(self.internal, record, TransformMode.INTERNAL)
        if strip_sensitive:
            for name in self.sensitive:
                dto.pop(name, None)
        return dto

    def to_response(self, record: Any) -> dict[str, Any]:
        """Whitelisted DTO with computed fields and no sensitive fields.

        Raises:
            TransformationError: If a required field is missing or malformed
        """
        dto = self._apply(self.response, record, TransformMode.RESPONSE)
        for name in self.sensitive:
            dto.pop(name, None)
        return dto

    def transform(self, record: Any, mode: TransformMode | str = TransformMode.RESPONSE) -> dict[str, Any]:
        if TransformMode(mode) is TransformMode.INTERNAL:
            return self.to_internal(record)
        return self.to_response(record)

    def __repr__(self) -> str:
        return f"EntityTransformer(entity={self.entity!r})"
