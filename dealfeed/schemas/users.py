"""Schemas for users and the follow graph."""

from pydantic import Field

from dealfeed.models import User
from dealfeed.schemas.common import CamelModel


class UserCreate(CamelModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    display_name: str | None = None
    avatar: str | None = None
    bio: str | None = None


class UserProfile(User):
    """User with follower/following counts computed at read time."""

    followers_count: int = Field(ge=0)
    following_count: int = Field(ge=0)
    is_following: bool | None = None


class FollowRequest(CamelModel):
    follower_id: str = Field(min_length=1)
    following_id: str = Field(min_length=1)
