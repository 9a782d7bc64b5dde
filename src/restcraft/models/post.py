from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from restcraft.models.base import AuditMixin, Base, PublicUUIDMixin, SurrogateKeyMixin


class Post(Base, SurrogateKeyMixin, PublicUUIDMixin, AuditMixin):
    """A published post owning an ordered collection of media."""

    __tablename__ = "posts"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    media: Mapped[list["Media"]] = relationship(
        back_populates="post",
        order_by="Media.position",
        cascade="all, delete-orphan",
    )


class Media(Base, SurrogateKeyMixin, PublicUUIDMixin, AuditMixin):
    """A media item (image, video, ...) attached to exactly one post."""

    __tablename__ = "media"

    post_id: Mapped[int] = mapped_column(
        ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    source: Mapped[str] = mapped_column(String(2048), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    post: Mapped["Post"] = relationship(back_populates="media")
