"""
Errors raised by domain rules.

Routers translate these into HTTP responses: not found to 404, authorization
to 403, conflict to 409, and anything else derived from DomainError to 400.
"""


class DomainError(Exception):
    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return f"{self.message} - {self.details}" if self.details else self.message


class ValidationError(DomainError):
    """An attribute value is outside what the entity accepts, such as a blank name."""

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details = {
            key: item for key, item in (("field", field), ("value", value)) if item is not None
        }
        super().__init__(message, details)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    def __init__(self, entity_type: str, entity_id: object) -> None:
        super().__init__(
            f"{entity_type} with id {entity_id} not found",
            {"entity_type": entity_type, "entity_id": entity_id},
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


class ConflictError(DomainError):
    """The write collides with existing state: duplicate names, items or nesting."""


class AuthorizationError(DomainError):
    """The requester may not see or change the resource."""

    def __init__(self, message: str = "Not authorized to perform this action") -> None:
        super().__init__(message)
