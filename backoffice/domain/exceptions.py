"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class ReferencedEntityError(Exception):
    """Raised when deleting an entity that other records still point to."""

    def __init__(self, entity_type: str, entity_id: str, referenced_by: str, count: int):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.referenced_by = referenced_by
        self.count = count
        super().__init__(
            f"{entity_type} '{entity_id}' is still referenced by {count} {referenced_by}"
        )


class BusinessRuleError(Exception):
    """Raised when a request is well-formed but violates a domain rule."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class RemoteRequestError(Exception):
    """Raised by the dashboard client when the API rejects or fails a call.

    ``message`` carries the server's ``detail`` when one was sent, otherwise
    a generic fallback suitable for a notification.
    """

    def __init__(self, status_code: int | None, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}" if status_code else message)


class RemoteNotFoundError(RemoteRequestError):
    """The API answered 404."""


class RemoteConflictError(RemoteRequestError):
    """The API answered 409 (duplicate key or entity still referenced)."""


class RemoteValidationError(RemoteRequestError):
    """The API answered 400 or 422."""
