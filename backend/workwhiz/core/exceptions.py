"""Custom Exceptions.

Validation failures are never raised: they are returned as data in a
ValidationResult. The exceptions below signal programmer or configuration
defects, which fail loudly, and worker errors, which tell ARQ whether a job
is worth retrying.

Configuration errors are raised at import/registration time:
- Duplicate constraint names in one schema scope
- Unknown entity kinds
- Mutating a schema after it has been frozen

Transformation errors are raised when a record lacks a field that has no
default and is not optional.
"""


class CoreError(Exception):
    """Base exception for all validation/transformation core errors."""
    pass


class SchemaConfigurationError(CoreError):
    """Schema or constraint registry was configured incorrectly."""
    pass


class DuplicateConstraintError(SchemaConfigurationError):
    """A constraint name was registered twice in the same scope."""

    def __init__(self, name: str, scope: str):
        self.name = name
        self.scope = scope
        super().__init__(f"Constraint '{name}' is already registered in scope '{scope}'")


class UnknownSchemaError(SchemaConfigurationError):
    """No schema or transformer is registered for the requested entity kind."""

    def __init__(self, kind: str, known: list[str] | None = None):
        self.kind = kind
        self.known = known or []
        message = f"Unknown entity kind '{kind}'"
        if self.known:
            message += f". Known kinds: {', '.join(self.known)}"
        super().__init__(message)


class TransformationError(CoreError):
    """A record could not be mapped into a DTO."""

    def __init__(self, entity: str, field: str, reason: str):
        self.entity = entity
        self.field = field
        self.reason = reason
        super().__init__(f"Cannot transform {entity}.{field}: {reason}")


class WorkerError(Exception):
    """Base exception for all worker-related errors."""
    pass


class RecoverableError(WorkerError):
    """Error that may be resolved on retry.

    These errors are typically transient:
    - SMTP server unavailable
    - Network timeouts

    ARQ should retry these errors.
    """
    pass


class PermanentError(WorkerError):
    """Error that won't be resolved on retry.

    ARQ should NOT retry these errors.
    """
    pass


class EmailDeliveryError(RecoverableError):
    """The mail server refused or dropped the message."""
    pass


class InvalidEmailJobError(PermanentError):
    """Email job payload is missing required data."""
    pass
