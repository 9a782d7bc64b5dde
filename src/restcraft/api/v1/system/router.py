"""System router providing the health check endpoint."""

import logging

from fastapi import APIRouter, Request
from sqlalchemy import text

from restcraft.api.v1.system.schemas import HealthView
from restcraft.schemas.envelope import SingleEnvelope

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(request: Request) -> SingleEnvelope[HealthView]:
    """Return system health including database connectivity.

    Reports ``healthy`` when the database answers and ``degraded`` otherwise;
    the endpoint itself always responds 200.
    """
    db_ok = False
    try:
        session_factory = request.app.state.session_factory
        async with session_factory() as session:
            await session.execute(text("SELECT 1"))
        db_ok = True
    except Exception:
        logger.warning("Database health check failed", exc_info=True)

    return SingleEnvelope[HealthView](
        data=HealthView(
            status="healthy" if db_ok else "degraded",
            database="connected" if db_ok else "disconnected",
        )
    )
