from restcraft.models.base import AuditMixin, Base, PublicUUIDMixin, SurrogateKeyMixin
from restcraft.models.post import Media, Post

__all__ = [
    "Base",
    "SurrogateKeyMixin",
    "PublicUUIDMixin",
    "AuditMixin",
    "Media",
    "Post",
]
