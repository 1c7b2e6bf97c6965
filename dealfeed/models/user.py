"""User and Follower models."""

from datetime import datetime

from pydantic import Field

from dealfeed.models.base import Entity


class User(Entity):
    """Registered user, addressed elsewhere by ``username``."""

    id: int
    username: str
    password: str = Field(default="", exclude=True, repr=False)  # never serialized
    display_name: str | None = None
    avatar: str | None = None
    bio: str | None = None
    created_at: datetime

    def __repr__(self) -> str:
        return f"<User {self.id} {self.username}>"


class Follower(Entity):
    """Directed follow edge: ``follower_id`` follows ``following_id``."""

    id: int
    follower_id: str
    following_id: str
    created_at: datetime
