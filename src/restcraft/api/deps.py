"""Request-scoped FastAPI dependencies."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from restcraft.services.post_service import PostService


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Open one session per request from ``app.state.session_factory``.

    Uncommitted work is rolled back when the handler raises, before the
    error reaches the exception handlers.
    """
    async with request.app.state.session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


def get_post_service(db: AsyncSession = Depends(get_db)) -> PostService:
    return PostService(db)
