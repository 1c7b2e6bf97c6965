"""Comment and ChatMessage models."""

from datetime import datetime

from dealfeed.models.base import Entity


class Comment(Entity):
    """Comment on a deal."""

    id: int
    deal_id: int
    user_id: str
    content: str
    created_at: datetime


class ChatMessage(Entity):
    """Direct message between two users, optionally about a deal.

    A conversation is the unordered pair {from_user_id, to_user_id}.
    """

    id: int
    from_user_id: str
    to_user_id: str
    content: str
    deal_id: int | None = None
    created_at: datetime
    read_at: datetime | None = None
