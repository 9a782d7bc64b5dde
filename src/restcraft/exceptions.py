"""Domain exception hierarchy and the error code catalogue.

Collaborator layers (services, query parsing) raise these; the HTTP
boundary translates them into the error envelope in exactly one place
(``restcraft.api.errors.error_to_envelope``).

Hierarchy::

    RestcraftError (base)       -> 500
    ├── ValidationError         -> 400, carries a source pointer or parameter
    ├── NotFoundError           -> 404, no source
    └── SerializationError      -> 500, entity could not be presented
"""

from __future__ import annotations

from typing import Any


class ErrorCode:
    """Machine-readable ``ERR-<n>`` codes used in error envelopes."""

    NOT_FOUND = "ERR-1"
    INVALID_ATTRIBUTE = "ERR-2"
    INVALID_PARAMETER = "ERR-3"
    HTTP_ERROR = "ERR-4"
    INTERNAL = "ERR-5"


class RestcraftError(Exception):
    """Base exception for all application errors.

    Attributes:
        message: Human-readable description, safe to show to clients for 4xx.
        context: Extra debugging details. Logged, never serialized.
    """

    status_code = 500
    code = ErrorCode.INTERNAL
    title = "Internal server error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(RestcraftError):
    """Client input failed validation.

    Body attributes are identified by ``pointer`` (a JSON pointer such as
    ``/data/attributes/title``); query and path input by ``parameter``.
    """

    status_code = 400
    code = ErrorCode.INVALID_ATTRIBUTE
    title = "Invalid input"

    def __init__(
        self,
        message: str = "Validation failed",
        pointer: str | None = None,
        parameter: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, context=context)
        self.pointer = pointer
        self.parameter = parameter
        if parameter is not None and pointer is None:
            self.code = ErrorCode.INVALID_PARAMETER
            self.title = "Invalid parameter"

    @classmethod
    def for_attribute(cls, field: str, message: str) -> ValidationError:
        """Build a validation error pointing at ``/data/attributes/<field>``."""
        return cls(message=message, pointer=f"/data/attributes/{field}")


class NotFoundError(RestcraftError):
    """The requested resource does not exist."""

    status_code = 404
    code = ErrorCode.NOT_FOUND
    title = "Not found"

    def __init__(
        self,
        resource: str = "resource",
        resource_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource.capitalize()} with UUID '{resource_id}' was not found"
        ctx = dict(context or {})
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class SerializationError(RestcraftError):
    """An entity is missing a field its public view requires.

    Signals a data-integrity or programming defect. It is fatal to the
    response being built and is never retried.
    """

    def __init__(
        self,
        entity: str,
        fields: list[str] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        fields = fields or []
        message = f"Cannot present {entity}"
        if fields:
            message = f"Cannot present {entity}: missing or invalid {', '.join(fields)}"
        ctx = dict(context or {})
        ctx["entity"] = entity
        ctx["fields"] = fields
        super().__init__(message=message, context=ctx)
        self.entity = entity
        self.fields = fields
