"""Post lookup and creation service layer.

The service returns ORM entities and raises domain errors; it knows
nothing about envelopes or HTTP. Presentation happens in the routers via
``restcraft.presenters``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from uuid import uuid4

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from restcraft.exceptions import NotFoundError
from restcraft.models.post import Media, Post

logger = logging.getLogger(__name__)


class PostService:
    """Service for post lookups and creation.

    Args:
        db: Async SQLAlchemy session for database operations.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_uuid(self, post_uuid: str, include_media: bool = True) -> Post:
        """Get a post by its public UUID.

        Args:
            post_uuid: Public UUID of the post.
            include_media: Eager-load the media relation.

        Returns:
            The Post record.

        Raises:
            NotFoundError: If no post has this UUID.
        """
        query = select(Post).where(Post.uuid == post_uuid)
        if include_media:
            query = query.options(selectinload(Post.media))
        result = await self.db.execute(query)
        post = result.scalar_one_or_none()
        if post is None:
            raise NotFoundError("post", post_uuid)
        return post

    async def get_all(
        self,
        search: str | None = None,
        include_media: bool = True,
    ) -> list[Post]:
        """List posts, oldest first.

        Args:
            search: Case-insensitive substring matched against title and
                description. Blank values are ignored.
            include_media: Eager-load the media relation.

        Returns:
            Posts ordered by creation time, then internal id.
        """
        query = select(Post)
        if search and search.strip():
            pattern = f"%{search.strip()}%"
            query = query.where(
                or_(Post.title.ilike(pattern), Post.description.ilike(pattern))
            )
        if include_media:
            query = query.options(selectinload(Post.media))
        query = query.order_by(Post.created_at.asc(), Post.id.asc())

        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def create_post(
        self,
        title: str,
        description: str = "",
        media_sources: Sequence[str] = (),
    ) -> Post:
        """Create a post together with its media, keeping the given media order.

        Returns:
            The created Post, reloaded with its media.
        """
        post = Post(
            uuid=str(uuid4()),
            title=title,
            description=description,
            media=[
                Media(uuid=str(uuid4()), source=source, position=position)
                for position, source in enumerate(media_sources)
            ],
        )
        self.db.add(post)
        await self.db.commit()
        logger.info("Created post %s with %d media item(s)", post.uuid, len(media_sources))
        return await self.get_by_uuid(post.uuid)

    async def list_media(self, post_uuid: str) -> list[Media]:
        """List the media of a post in position order.

        Raises:
            NotFoundError: If no post has this UUID.
        """
        post = await self.get_by_uuid(post_uuid, include_media=True)
        return list(post.media)
