"""System-specific response schemas."""

from pydantic import ConfigDict

from restcraft.schemas.envelope import WireModel


class HealthView(WireModel):
    """Service health as reported by ``/system/health``."""

    model_config = ConfigDict(extra="forbid")

    status: str
    database: str
