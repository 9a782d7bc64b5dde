from datetime import datetime
from uuid import uuid4

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """SQLAlchemy declarative base for all models."""

    pass


class SurrogateKeyMixin:
    """Mixin providing the internal auto-increment primary key.

    ``id`` is for joins and foreign keys only. It is never part of any
    public representation; clients address rows through ``uuid``.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)


class PublicUUIDMixin:
    """Mixin providing the externally visible UUID identifier."""

    uuid: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        unique=True,
        index=True,
        nullable=False,
        default=lambda: str(uuid4()),
    )


class AuditMixin:
    """Mixin providing created_at and updated_at audit columns."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
