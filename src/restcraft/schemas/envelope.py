"""Response and request envelope models using Pydantic v2.

Every successful response is ``{"data": ..., "metadata": {...}}`` where
``data`` is a single view or a list of views, never a mix: single and
collection endpoints use distinct envelope types. Every error response is
``{"errors": [...]}`` regardless of where the error originated.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")
ViewT = TypeVar("ViewT")


class WireModel(BaseModel):
    """Base for everything that goes over the wire."""

    def dump(self) -> dict[str, Any]:
        """Return the JSON-compatible wire form (aliases applied, ``None`` fields dropped)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Request wrappers
# ---------------------------------------------------------------------------


class ResourceRequestData(BaseModel, Generic[T]):
    """The ``data`` object inside a request body."""

    type: str
    attributes: T


class ResourceRequest(BaseModel, Generic[T]):
    """Request envelope wrapping ``{ data: { type, attributes } }``."""

    data: ResourceRequestData[T]


# ---------------------------------------------------------------------------
# Success envelopes
# ---------------------------------------------------------------------------


class SingleEnvelope(WireModel, Generic[ViewT]):
    """Response envelope containing exactly one view."""

    data: ViewT
    metadata: dict[str, Any] = Field(default_factory=dict)


class CollectionEnvelope(WireModel, Generic[ViewT]):
    """Response envelope containing an ordered list of views."""

    data: list[ViewT]
    metadata: dict[str, Any] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Error envelope
# ---------------------------------------------------------------------------


class ErrorSource(WireModel):
    """Identifies the offending input: a body pointer or a query/path parameter."""

    pointer: str | None = None
    parameter: str | None = None


class ErrorDetail(WireModel):
    """A single error object."""

    code: str
    title: str
    detail: str
    status: str
    source: ErrorSource | None = None


class ErrorEnvelope(WireModel):
    """Response envelope containing a list of errors."""

    errors: list[ErrorDetail] = Field(default_factory=list)
