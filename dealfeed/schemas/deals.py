"""Schemas for deals, likes and comments, including composed read views."""

from datetime import datetime

from pydantic import Field

from dealfeed.models import Category, Comment, Deal, Store, User
from dealfeed.schemas.common import CamelModel


class DealCreate(CamelModel):
    """Fields for a new deal. ``id``, ``created_at`` and ``likes`` are assigned by the store."""

    user_id: str = Field(min_length=1)
    store_id: int
    category_id: int
    title: str = Field(min_length=1)
    description: str
    image_url: str
    original_price: str | None = None
    sale_price: str | None = None
    discount_percent: int | None = Field(default=None, ge=0, le=100)
    expires_at: datetime | None = None


class DealWithStore(Deal):
    """Deal joined with its store, category and posting user.

    Built on every read; never stored.
    """

    store: Store
    category: Category
    user: User
    is_liked: bool | None = None


class LikeToggleRequest(CamelModel):
    user_id: str | None = None


class LikeToggleResult(CamelModel):
    """Outcome of a like toggle: the viewer's new state and the deal's count."""

    liked: bool
    likes: int


class CommentBody(CamelModel):
    """Comment payload as posted to ``/deals/{id}/comments``."""

    user_id: str = Field(min_length=1)
    content: str = Field(min_length=1)


class CommentCreate(CommentBody):
    deal_id: int


class CommentWithUser(Comment):
    """Comment joined with its author."""

    user: User
