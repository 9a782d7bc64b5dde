"""Pydantic schemas for API request/response models."""

from restcraft.schemas.envelope import (
    CollectionEnvelope,
    ErrorDetail,
    ErrorEnvelope,
    ErrorSource,
    ResourceRequest,
    SingleEnvelope,
)
from restcraft.schemas.post import MediaView, PostView

__all__ = [
    "CollectionEnvelope",
    "ErrorDetail",
    "ErrorEnvelope",
    "ErrorSource",
    "MediaView",
    "PostView",
    "ResourceRequest",
    "SingleEnvelope",
]
