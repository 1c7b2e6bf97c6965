"""Schemas for direct chat messages."""

from pydantic import Field

from dealfeed.schemas.common import CamelModel


class ChatMessageCreate(CamelModel):
    """Fields for a new message. ``read_at`` starts unset."""

    from_user_id: str = Field(min_length=1)
    to_user_id: str = Field(min_length=1)
    content: str = Field(min_length=1)
    deal_id: int | None = None
