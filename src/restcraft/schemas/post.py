"""Pydantic v2 schemas for posts and media.

``PostView`` and ``MediaView`` are the only public representations of the
ORM models. They list the exposable fields explicitly and reject anything
else, so the internal integer ``id`` can never end up in a response.
Embedding policy: a post includes its media unless the client passes
``exclude=media``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from restcraft.schemas.envelope import WireModel


class MediaView(WireModel):
    """Public representation of a media item."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    uuid: str = Field(..., min_length=1)
    source: str = Field(..., min_length=1)
    links: dict[str, str] | None = Field(default=None, alias="_links")


class PostView(WireModel):
    """Public representation of a post.

    ``media`` is ``None`` (omitted on the wire) when embedding is disabled
    or the relation was not loaded, and a possibly empty list otherwise.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    uuid: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: str
    media: list[MediaView] | None = None
    links: dict[str, str] | None = Field(default=None, alias="_links")


class CreateMediaRequest(BaseModel):
    """A media item supplied inline when creating a post."""

    source: str = Field(..., min_length=1, max_length=2048)


class CreatePostRequest(BaseModel):
    """Request body attributes for creating a post.

    ``title`` is the only required field. Media items keep the order in
    which they are given.
    """

    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    media: list[CreateMediaRequest] = Field(default_factory=list)
