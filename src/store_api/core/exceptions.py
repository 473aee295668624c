"""
Error taxonomy of the store.

Every error carries a machine-readable code, a message, a details mapping and
the HTTP status the API answers with.
"""

from typing import Any, ClassVar


class BaseApplicationException(Exception):
    status_code: ClassVar[int] = 500
    default_message: ClassVar[str] = "Unexpected store error"

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.error_code = error_code or type(self).__name__
        self.details: dict[str, Any] = dict(details or {})
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Error body returned by the API."""
        return {"error": self.error_code, "message": self.message, "details": self.details}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.error_code!r}, {self.message!r})"


class ConfigurationException(BaseApplicationException):
    default_message = "Invalid configuration"


class ValidationException(BaseApplicationException):
    """Caller input was rejected. Never retried."""

    status_code = 400
    default_message = "Invalid input"

    def __init__(
        self,
        message: str | None = None,
        field: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        if field:
            self.details["field"] = field
        if value is not None:
            self.details["value"] = str(value)


class FieldNotFoundException(ValidationException):
    """The requested sort field is not sortable on the entity."""

    def __init__(self, entity: str, field_name: str, allowed: list[str] | None = None) -> None:
        details: dict[str, Any] = {"entity": entity}
        if allowed:
            details["allowed"] = allowed
        super().__init__(
            f"Field '{field_name}' is not a sortable field of {entity}",
            field="sort_field",
            value=field_name,
            details=details,
        )


class InvalidPaginationException(ValidationException):
    default_message = "Invalid page window"


class NotFoundException(BaseApplicationException):
    """A point lookup by identifier had no match."""

    status_code = 404
    default_message = "Resource not found"


class DatabaseException(BaseApplicationException):
    default_message = "Database operation failed"


class StorageUnavailableException(DatabaseException):
    """The database could not be reached. Raised once, not retried."""

    status_code = 503
    default_message = "Storage unavailable"


class RepositoryException(DatabaseException):
    """A write broke a uniqueness or reference constraint."""

    status_code = 409
    default_message = "Conflicting write"
