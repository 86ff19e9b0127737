"""Domain exceptions.

Each error carries a ``kind`` that the application layer turns into a
typed failure result. Messages are user-facing.
"""


class DomainError(Exception):
    """Base exception for domain rule violations."""

    kind = "business_rule"


class DomainValidationError(DomainError):
    """An entity or value object rejected its input."""

    kind = "validation"


class EntityNotFoundError(DomainError):
    """Entity was not found in its repository."""

    kind = "not_found"

    def __init__(self, entity: str, identifier: object):
        """Initialize with entity name and identifier.

        Args:
            entity: Entity name used in the message ("Club", "User", ...)
            identifier: Identifier that was looked up
        """
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} with ID '{identifier}' not found.")


class ConflictError(DomainError):
    """Operation would break a uniqueness constraint."""

    kind = "conflict"


class BusinessRuleError(DomainError):
    """Operation is not allowed in the current state."""

    kind = "business_rule"


class AuthenticationError(DomainError):
    """Credentials or token were rejected."""

    kind = "unauthorized"


class AuthorizationError(DomainError):
    """Authenticated principal may not perform the operation."""

    kind = "forbidden"
