"""Deal and Like models.

``Deal.likes`` is a denormalized counter over the Like set. The store does
not maintain it on like insert/delete; see ``dealfeed.services.likes``.
"""

from datetime import datetime

from dealfeed.models.base import Entity


class Deal(Entity):
    """A user-submitted post about a discounted product at a store."""

    id: int

    # Relations (user_id is a username, never validated on write)
    user_id: str
    store_id: int
    category_id: int

    # Content
    title: str
    description: str
    image_url: str

    # Pricing (display strings, e.g. "$2.49")
    original_price: str | None = None
    sale_price: str | None = None
    discount_percent: int | None = None

    # Timestamps
    expires_at: datetime | None = None
    created_at: datetime

    likes: int = 0

    def __repr__(self) -> str:
        return f"<Deal {self.id} {self.title!r} likes={self.likes}>"


class Like(Entity):
    """One user's endorsement of a deal."""

    id: int
    deal_id: int
    user_id: str
