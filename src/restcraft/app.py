"""FastAPI application factory with async lifespan for the database."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from restcraft.api.errors import register_exception_handlers
from restcraft.api.v1.router import v1_router
from restcraft.config import get_settings
from restcraft.database import close_db, get_session_factory, init_db

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging once, at application creation."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
    # SQL statement logging is too chatty at INFO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application startup and shutdown lifecycle.

    On startup: create the database engine (and schema, if configured)
    and the session factory.
    On shutdown: dispose of the engine.
    """
    settings = get_settings()

    engine = await init_db(settings)
    app.state.db_engine = engine
    app.state.session_factory = get_session_factory(engine)
    logger.info("Database engine initialised")

    yield

    await close_db(engine)
    logger.info("Database engine disposed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    This is the app factory. Uvicorn calls it with the --factory flag:
        uvicorn restcraft.app:create_app --factory
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Restcraft API",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app
