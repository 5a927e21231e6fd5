"""Constraint Engine.

A constraint is a named predicate plus a message builder. Constraints are
attached to schema fields and evaluated against the coerced input value.
Every constraint on a field is evaluated, so a single pass reports every
problem with the value instead of only the first one.

Named rules can also be registered in an engine scope. Each schema owns a
scope; a derived schema's scope inherits its base's rules and may shadow
them, while registering the same name twice in one scope is a configuration
error.
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ...core.exceptions import DuplicateConstraintError, SchemaConfigurationError
from ...core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ConstraintContext:
    """What a constraint may know besides the value itself."""
    field_name: str
    candidate: Mapping[str, Any] = field(default_factory=dict)


ValidateFn = Callable[[Any, ConstraintContext], bool]
MessageFn = Callable[[Any, ConstraintContext], str]


@dataclass(frozen=True)
class FieldConstraint:
    """Named, stateless validation rule for one field value."""
    name: str
    validate_fn: ValidateFn
    message_fn: MessageFn

    def validate(self, value: Any, context: ConstraintContext) -> bool:
        return bool(self.validate_fn(value, context))

    def message(self, value: Any, context: ConstraintContext) -> str:
        return self.message_fn(value, context)


@dataclass(frozen=True)
class ConstraintViolation:
    """A failed constraint, keeping the constraint name for programmatic use."""
    field: str
    constraint: str
    message: str


class ConstraintEngine:
    """Registry of named constraints for one schema scope, plus the evaluator.

    Usage:
        engine = ConstraintEngine("password_update")
        matches = engine.register_constraint(
            "passwordsMatch",
            lambda value, ctx: value == ctx.candidate.get("password"),
            lambda value, ctx: "Passwords do not match",
        )
        errors = ConstraintEngine.evaluate("password_confirmation", "x", [matches], ctx)
    """

    def __init__(self, scope: str, parent: "ConstraintEngine | None" = None):
        self.scope = scope
        self._parent = parent
        self._constraints: dict[str, FieldConstraint] = {}
        self._frozen = False

    def register_constraint(
        self,
        name: str,
        validate_fn: ValidateFn,
        message_fn: MessageFn
    ) -> FieldConstraint:
        """Register a reusable named rule in this scope.

        Raises:
            DuplicateConstraintError: If the name is already registered in this scope
            SchemaConfigurationError: If the scope has been frozen
        """
        if self._frozen:
            raise SchemaConfigurationError(
                f"Cannot register constraint '{name}': scope '{self.scope}' is frozen"
            )
        if name in self._constraints:
            raise DuplicateConstraintError(name, self.scope)

        constraint = FieldConstraint(name=name, validate_fn=validate_fn, message_fn=message_fn)
        self._constraints[name] = constraint

        logger.debug(
            "Constraint registered",
            extra={'constraint': name, 'scope': self.scope}
        )
        return constraint

    def get_constraint(self, name: str) -> FieldConstraint:
        """Look a rule up in this scope, then in the inherited scopes."""
        if name in self._constraints:
            return self._constraints[name]
        if self._parent is not None:
            return self._parent.get_constraint(name)
        raise SchemaConfigurationError(
            f"Constraint '{name}' is not registered in scope '{self.scope}'"
        )

    def has_constraint(self, name: str) -> bool:
        if name in self._constraints:
            return True
        return self._parent is not None and self._parent.has_constraint(name)

    @property
    def constraint_names(self) -> list[str]:
        inherited = self._parent.constraint_names if self._parent is not None else []
        own = [name for name in self._constraints if name not in inherited]
        return inherited + own

    def extend(self, scope: str) -> "ConstraintEngine":
        """Create a child scope that inherits this scope's rules."""
        return ConstraintEngine(scope, parent=self)

    def freeze(self) -> "ConstraintEngine":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @staticmethod
    def evaluate_violations(
        field_name: str,
        value: Any,
        constraints: Iterable[FieldConstraint],
        context: ConstraintContext
    ) -> list[ConstraintViolation]:
        """Run every constraint in declaration order and collect the failures."""
        violations = []
        for constraint in constraints:
            if not constraint.validate(value, context):
                violations.append(
                    ConstraintViolation(
                        field=field_name,
                        constraint=constraint.name,
                        message=constraint.message(value, context),
                    )
                )
        return violations

    @staticmethod
    def evaluate(
        field_name: str,
        value: Any,
        constraints: Iterable[FieldConstraint],
        context: ConstraintContext
    ) -> list[str]:
        """Messages of every failed constraint, in declaration order."""
        return [
            violation.message
            for violation in ConstraintEngine.evaluate_violations(
                field_name, value, constraints, context
            )
        ]
