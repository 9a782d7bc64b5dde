"""Shared pytest fixtures.

No database is needed: unit tests build transient ORM instances or use a
mocked ``AsyncSession``, and API tests swap ``PostService`` for an
in-memory fake through FastAPI dependency overrides.
"""

from collections.abc import AsyncGenerator, Sequence
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from restcraft.api.deps import get_post_service
from restcraft.app import create_app
from restcraft.config import Settings, get_settings
from restcraft.exceptions import NotFoundError
from restcraft.models.post import Media, Post

POST_UUID = "00000000-0000-0000-0000-000000000001"
OTHER_POST_UUID = "00000000-0000-0000-0000-000000000002"
MISSING_UUID = "00000000-0000-0000-0000-0000000000ff"


def make_post(
    id: int = 7,
    uuid: str = POST_UUID,
    title: str = "Travel through Africa",
    description: str = "Notes from six weeks on the road.",
    media_sources: Sequence[str] = (),
) -> Post:
    """Build a transient Post with numbered media, as the ORM would load it."""
    post = Post(id=id, uuid=uuid, title=title, description=description)
    post.media = [
        Media(
            id=100 + position,
            uuid=f"10000000-0000-0000-0000-{position:012d}",
            source=source,
            position=position,
            post_id=id,
        )
        for position, source in enumerate(media_sources)
    ]
    return post


class FakePostService:
    """In-memory stand-in for PostService with the same coroutine API."""

    def __init__(self, posts: list[Post]) -> None:
        self.posts = posts
        self.calls: list[tuple] = []

    async def get_by_uuid(self, post_uuid: str, include_media: bool = True) -> Post:
        self.calls.append(("get_by_uuid", post_uuid, include_media))
        for post in self.posts:
            if post.uuid == post_uuid:
                return post
        raise NotFoundError("post", post_uuid)

    async def get_all(self, search: str | None = None, include_media: bool = True) -> list[Post]:
        self.calls.append(("get_all", search, include_media))
        if not search:
            return list(self.posts)
        needle = search.lower()
        return [
            p
            for p in self.posts
            if needle in p.title.lower() or needle in p.description.lower()
        ]

    async def create_post(
        self, title: str, description: str = "", media_sources: Sequence[str] = ()
    ) -> Post:
        post = make_post(
            id=len(self.posts) + 1,
            uuid=str(uuid4()),
            title=title,
            description=description,
            media_sources=media_sources,
        )
        self.posts.append(post)
        return post

    async def list_media(self, post_uuid: str) -> list[Media]:
        post = await self.get_by_uuid(post_uuid)
        return list(post.media)


@pytest.fixture
def post():
    """The 'Travel through Africa' post with two media items."""
    return make_post(media_sources=["https://cdn.example.com/a.jpg", "https://cdn.example.com/b.jpg"])


@pytest.fixture
def fake_service(post):
    return FakePostService(
        [
            post,
            make_post(
                id=8,
                uuid=OTHER_POST_UUID,
                title="Winter in Norway",
                description="Fjords and northern lights.",
            ),
        ]
    )


@pytest.fixture
def settings():
    return Settings(api_prefix="/api/v1", hateoas_links=True)


@pytest.fixture
def app(fake_service, settings):
    application = create_app()
    application.dependency_overrides[get_post_service] = lambda: fake_service
    application.dependency_overrides[get_settings] = lambda: settings
    return application


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """HTTPX client talking to the app in-process (lifespan not started)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def mock_db_session():
    """A mocked AsyncSession; tests set ``execute.return_value`` as needed."""
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.add = MagicMock()
    return session
