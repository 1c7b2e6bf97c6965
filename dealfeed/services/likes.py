"""Like toggle.

The store's like primitives neither reject duplicate Likes nor maintain
``Deal.likes``. ``toggle_like`` runs check, mutate, recount and counter
write-back as one critical section, so concurrent toggles for the same
(deal, user) cannot insert two rows and the counter always equals the size
of the deal's Like set when the call returns.
"""

import logging

from dealfeed.schemas import LikeToggleResult
from dealfeed.stores.memory import MemStorage

logger = logging.getLogger("uvicorn.error")


def toggle_like(storage: MemStorage, deal_id: int, user_id: str) -> LikeToggleResult | None:
    """Like the deal if ``user_id`` has not liked it yet, otherwise unlike it.

    Args:
        storage: Store to operate on.
        deal_id: Deal to toggle.
        user_id: Username of the viewer.

    Returns:
        New like state and the deal's like count, or None if the deal does not exist.
    """
    with storage.lock:
        if storage.get_deal(deal_id) is None:
            return None

        if storage.get_like(deal_id, user_id) is not None:
            storage.delete_like(deal_id, user_id)
            liked = False
        else:
            storage.create_like(deal_id, user_id)
            liked = True

        likes = storage.count_likes(deal_id)
        storage.update_deal_likes(deal_id, likes)

    logger.debug("Like toggled deal=%s user=%s liked=%s likes=%s", deal_id, user_id, liked, likes)
    return LikeToggleResult(liked=liked, likes=likes)
