"""Viewer-specific reads and follow handling.

The store builds views that are the same for everyone; this module adds the
per-viewer flags (``is_liked``, ``is_following``).
"""

from dealfeed.models import Follower
from dealfeed.schemas import DealWithStore, UserProfile
from dealfeed.stores.memory import MemStorage


def list_feed(storage: MemStorage, viewer_id: str) -> list[DealWithStore]:
    """Deal feed (newest first) with ``is_liked`` set for the viewer."""
    with storage.lock:
        deals = storage.list_deals()
        return [
            deal.model_copy(update={"is_liked": storage.get_like(deal.id, viewer_id) is not None})
            for deal in deals
        ]


def get_profile(storage: MemStorage, username: str, viewer_id: str) -> UserProfile | None:
    """Profile with live counts and whether the viewer follows this user."""
    with storage.lock:
        profile = storage.get_user_profile(username)
        if profile is None:
            return None
        return profile.model_copy(
            update={"is_following": storage.is_following(viewer_id, username)}
        )


def follow(storage: MemStorage, follower_id: str, following_id: str) -> tuple[Follower, bool]:
    """Follow a user unless the edge already exists.

    Returns:
        (edge, created): the new or existing edge and whether it was created.
    """
    with storage.lock:
        existing = storage.get_follow(follower_id, following_id)
        if existing is not None:
            return existing, False
        return storage.follow_user(follower_id, following_id), True
