"""Presentation layer: domain entities to views, views to envelopes.

All functions here are pure and synchronous. They never perform I/O and
never decide whether an entity exists; lookups and "not found" handling
belong to the service layer.

Entities may be ORM instances (``Post``, ``Media``) or plain mappings with
the same keys. Views are built through explicit field mappings, so only
the exposable fields are ever read.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from http import HTTPStatus
from typing import Any

import pydantic

from restcraft.exceptions import SerializationError
from restcraft.models.post import Media, Post
from restcraft.schemas.envelope import (
    CollectionEnvelope,
    ErrorDetail,
    ErrorEnvelope,
    ErrorSource,
    SingleEnvelope,
)
from restcraft.schemas.post import MediaView, PostView

View = PostView | MediaView
Presenter = Callable[[Any], View]


# ---------------------------------------------------------------------------
# Field access helpers
# ---------------------------------------------------------------------------


def _field(entity: Any, name: str) -> Any:
    """Read one field from an ORM instance or a mapping, ``None`` if absent."""
    if isinstance(entity, Mapping):
        return entity.get(name)
    return getattr(entity, name, None)


def _text(value: Any) -> str | None:
    """Stringify identifiers such as ``uuid.UUID`` while keeping ``None``."""
    return None if value is None else str(value)


def _build(view_cls: type[View], entity: str, values: dict[str, Any]) -> View:
    """Construct a view, turning validation failures into ``SerializationError``."""
    try:
        return view_cls(**values)
    except pydantic.ValidationError as exc:
        fields = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
        raise SerializationError(entity, fields) from exc


# ---------------------------------------------------------------------------
# Entity -> view
# ---------------------------------------------------------------------------


def present_media(media: Any) -> MediaView:
    """Map a Media entity to its public view."""
    return _build(
        MediaView,
        "media",
        {
            "uuid": _text(_field(media, "uuid")),
            "source": _field(media, "source"),
        },
    )


def present_post(post: Any, *, include_media: bool = True) -> PostView:
    """Map a Post entity to its public view.

    Media is embedded by default. With ``include_media=False`` the relation
    is not read at all, which keeps lazy ORM relations untouched.
    """
    values: dict[str, Any] = {
        "uuid": _text(_field(post, "uuid")),
        "title": _field(post, "title"),
        "description": _field(post, "description"),
    }
    if include_media:
        related = _field(post, "media")
        if related is not None:
            values["media"] = [present_media(m) for m in related]
    return _build(PostView, "post", values)


def present(entity: Any, *, include_media: bool = True) -> View:
    """Map any supported entity to its public view.

    ORM instances dispatch on their class. Mappings dispatch on shape: a
    ``source`` key marks a media record, anything else is read as a post.

    Raises:
        SerializationError: If the entity type has no view, or a required
            exposable field is missing.
    """
    if isinstance(entity, Post):
        return present_post(entity, include_media=include_media)
    if isinstance(entity, Media):
        return present_media(entity)
    if isinstance(entity, Mapping):
        if "source" in entity:
            return present_media(entity)
        return present_post(entity, include_media=include_media)
    raise SerializationError(
        type(entity).__name__, context={"reason": "no view registered for type"}
    )


# ---------------------------------------------------------------------------
# View -> envelope
# ---------------------------------------------------------------------------


def present_collection(
    entities: Sequence[Any],
    metadata: Mapping[str, Any] | None = None,
    *,
    include_media: bool = True,
    presenter: Presenter | None = None,
) -> CollectionEnvelope:
    """Wrap an ordered sequence of entities in a collection envelope.

    Order and length are preserved. An empty sequence is not an error.
    ``presenter`` overrides the type dispatch of :func:`present`; it takes
    the entity only, so it must already carry its own embedding choice.
    """
    if presenter is None:
        views = [present(e, include_media=include_media) for e in entities]
    else:
        views = [presenter(e) for e in entities]
    return CollectionEnvelope(data=views, metadata=dict(metadata or {}))


def present_one(
    entity: Any,
    metadata: Mapping[str, Any] | None = None,
    *,
    include_media: bool = True,
    presenter: Presenter | None = None,
) -> SingleEnvelope:
    """Wrap one entity in a single-resource envelope.

    The caller has already established that the entity exists.
    """
    if presenter is None:
        view = present(entity, include_media=include_media)
    else:
        view = presenter(entity)
    return SingleEnvelope(data=view, metadata=dict(metadata or {}))


# ---------------------------------------------------------------------------
# Hypermedia
# ---------------------------------------------------------------------------


def post_relations(prefix: str = "") -> dict[str, str]:
    """Return the link relation templates for a post under ``prefix``."""
    base = f"{prefix.rstrip('/')}/posts"
    return {
        "self": f"{base}/{{uuid}}",
        "media": f"{base}/{{uuid}}/media",
        "posts": base,
    }


def present_links(view: View, relations: Mapping[str, str]) -> View:
    """Return a copy of ``view`` with ``_links`` resolved from URI templates.

    Each template may contain a ``{uuid}`` placeholder, replaced by the
    view's UUID. Templates without it are used verbatim.
    """
    links = {
        relation: template.replace("{uuid}", view.uuid)
        for relation, template in relations.items()
    }
    return view.model_copy(update={"links": links})


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


def present_error(
    code: str,
    title: str,
    detail: str,
    status: int | str | HTTPStatus,
    source_pointer: str | None = None,
    *,
    source_parameter: str | None = None,
    envelope: ErrorEnvelope | None = None,
) -> ErrorEnvelope:
    """Build one error detail and wrap it in an error envelope.

    When ``envelope`` is given the result holds its errors followed by the
    new one; the given envelope is left unchanged. ``status`` is always
    rendered as a string.

    Raises:
        SerializationError: If ``status`` is not a known HTTP status code.
    """
    try:
        status_text = str(HTTPStatus(int(status)).value)
    except ValueError as exc:
        raise SerializationError(
            "error", ["status"], context={"status": status}
        ) from exc
    source = None
    if source_pointer is not None or source_parameter is not None:
        source = ErrorSource(pointer=source_pointer, parameter=source_parameter)
    error = ErrorDetail(
        code=code,
        title=title,
        detail=detail,
        status=status_text,
        source=source,
    )
    previous = list(envelope.errors) if envelope is not None else []
    return ErrorEnvelope(errors=[*previous, error])
