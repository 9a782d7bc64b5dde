"""Public post endpoints returning data/metadata envelopes.

Handlers fetch entities through ``PostService`` and hand them to the
presenters; errors are raised, never formatted here. Media is embedded in
post views unless the client passes ``exclude=media``.
"""

from __future__ import annotations

from collections.abc import Callable
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from restcraft.api.deps import get_post_service
from restcraft.api.query import resolve_include_media
from restcraft.config import Settings, get_settings
from restcraft.exceptions import ValidationError
from restcraft.models.post import Post
from restcraft.presenters import (
    post_relations,
    present_collection,
    present_links,
    present_media,
    present_one,
    present_post,
)
from restcraft.schemas.envelope import (
    CollectionEnvelope,
    ResourceRequest,
    SingleEnvelope,
)
from restcraft.schemas.post import CreatePostRequest, MediaView, PostView
from restcraft.services.post_service import PostService

RESOURCE_TYPE = "posts"

router = APIRouter()


# ---------------------------------------------------------------------------
# Presentation helpers
# ---------------------------------------------------------------------------


def _post_presenter(
    settings: Settings, include_media: bool
) -> Callable[[Post], PostView]:
    """Build the per-request post presenter, adding links in HATEOAS mode."""
    relations = post_relations(settings.api_prefix) if settings.hateoas_links else None

    def _present(post: Post) -> PostView:
        view = present_post(post, include_media=include_media)
        if relations:
            view = present_links(view, relations)
        return view

    return _present


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.get("", response_model_exclude_none=True)
async def list_posts(
    search: str | None = Query(default=None),
    include: str | None = Query(default=None),
    exclude: str | None = Query(default=None),
    service: PostService = Depends(get_post_service),
    settings: Settings = Depends(get_settings),
) -> CollectionEnvelope[PostView]:
    """List posts, optionally filtered by ``search``."""
    include_media = resolve_include_media(include, exclude)
    search = (search or "").strip() or None
    posts = await service.get_all(search=search, include_media=include_media)

    metadata: dict = {"total": len(posts)}
    if search:
        metadata["search"] = search
    return present_collection(
        posts, metadata, presenter=_post_presenter(settings, include_media)
    )


@router.post("", status_code=201, response_model_exclude_none=True)
async def create_post(
    body: ResourceRequest[CreatePostRequest],
    service: PostService = Depends(get_post_service),
    settings: Settings = Depends(get_settings),
) -> SingleEnvelope[PostView]:
    """Create a post with its media."""
    if body.data.type != RESOURCE_TYPE:
        raise ValidationError(
            message=f"Resource type must be '{RESOURCE_TYPE}', got '{body.data.type}'",
            pointer="/data/type",
        )
    attrs = body.data.attributes
    post = await service.create_post(
        title=attrs.title,
        description=attrs.description,
        media_sources=[m.source for m in attrs.media],
    )
    return present_one(post, presenter=_post_presenter(settings, include_media=True))


@router.get("/{post_uuid}", response_model_exclude_none=True)
async def get_post(
    post_uuid: UUID,
    include: str | None = Query(default=None),
    exclude: str | None = Query(default=None),
    service: PostService = Depends(get_post_service),
    settings: Settings = Depends(get_settings),
) -> SingleEnvelope[PostView]:
    """Get a single post by UUID."""
    include_media = resolve_include_media(include, exclude)
    post = await service.get_by_uuid(str(post_uuid), include_media=include_media)
    return present_one(post, presenter=_post_presenter(settings, include_media))


@router.get("/{post_uuid}/media", response_model_exclude_none=True)
async def list_post_media(
    post_uuid: UUID,
    service: PostService = Depends(get_post_service),
) -> CollectionEnvelope[MediaView]:
    """List the media of a post in order."""
    media = await service.list_media(str(post_uuid))
    return present_collection(media, {"total": len(media)}, presenter=present_media)
