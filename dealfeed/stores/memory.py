"""In-memory store.

Handles:
- Collections for every entity, keyed by per-type integer ids
- Id sequencing (monotonic per entity type, never reused)
- Composed read views (deal feed, lists with items, comments with authors,
  user profiles), assembled fresh on every read
- Cascading delete of a shopping list's items and share grants

Lookups return None (deletes return False) when the target does not exist.
Joins that cannot be resolved are dropped from listings rather than reported.

User references (``user_id``, ``follower_id``, ...) are usernames and are not
checked against the users collection on write.
"""

from collections import defaultdict
from collections.abc import Callable, Iterable, Iterator
from datetime import datetime, timezone
import functools
import itertools
import logging
import threading
from typing import Any, TypeVar

from dealfeed.models import (
    Category,
    ChatMessage,
    Comment,
    Deal,
    Follower,
    Like,
    SharedList,
    ShoppingList,
    ShoppingListItem,
    Store,
    User,
)
from dealfeed.schemas import (
    CategoryCreate,
    ChatMessageCreate,
    CommentCreate,
    CommentWithUser,
    DealCreate,
    DealWithStore,
    ShoppingListCreate,
    ShoppingListItemCreate,
    ShoppingListItemUpdate,
    ShoppingListUpdate,
    ShoppingListWithItems,
    StoreCreate,
    UserCreate,
    UserProfile,
)

logger = logging.getLogger("uvicorn.error")

F = TypeVar("F", bound=Callable[..., Any])


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _synchronized(method: F) -> F:
    """Run the method while holding the store lock."""

    @functools.wraps(method)
    def wrapper(self: "MemStorage", *args: Any, **kwargs: Any) -> Any:
        with self.lock:
            return method(self, *args, **kwargs)

    return wrapper  # type: ignore[return-value]


class MemStorage:
    """Process-local repository for all entities.

    Every public method runs under ``self.lock`` (re-entrant). Callers that
    need a read-decide-write sequence to be atomic (like toggle, follow if
    absent) hold the same lock across their calls.

    Args:
        clock: Source of ``created_at``/``read_at`` timestamps.
    """

    def __init__(self, clock: Callable[[], datetime] = _utcnow) -> None:
        self.lock = threading.RLock()
        self._clock = clock
        self._sequences: defaultdict[str, Iterator[int]] = defaultdict(lambda: itertools.count(1))

        self._stores: dict[int, Store] = {}
        self._categories: dict[int, Category] = {}
        self._deals: dict[int, Deal] = {}
        self._likes: dict[int, Like] = {}
        self._users: dict[int, User] = {}
        self._users_by_username: dict[str, User] = {}
        self._followers: dict[tuple[str, str], Follower] = {}
        self._comments: dict[int, Comment] = {}
        self._chat_messages: dict[int, ChatMessage] = {}
        self._shopping_lists: dict[int, ShoppingList] = {}
        self._shopping_list_items: dict[int, ShoppingListItem] = {}
        self._shared_lists: dict[int, SharedList] = {}

    def now(self) -> datetime:
        """Current time according to the store clock."""
        return self._clock()

    def _next_id(self, kind: str) -> int:
        return next(self._sequences[kind])

    # ============================================================
    # Stores & categories
    # ============================================================

    @_synchronized
    def list_stores(self) -> list[Store]:
        return list(self._stores.values())

    @_synchronized
    def get_store(self, store_id: int) -> Store | None:
        return self._stores.get(store_id)

    @_synchronized
    def create_store(self, fields: StoreCreate) -> Store:
        store = Store(id=self._next_id("store"), **fields.model_dump())
        self._stores[store.id] = store
        return store

    @_synchronized
    def list_categories(self) -> list[Category]:
        return list(self._categories.values())

    @_synchronized
    def get_category(self, category_id: int) -> Category | None:
        return self._categories.get(category_id)

    @_synchronized
    def create_category(self, fields: CategoryCreate) -> Category:
        category = Category(id=self._next_id("category"), **fields.model_dump())
        self._categories[category.id] = category
        return category

    # ============================================================
    # Deals
    # ============================================================

    @_synchronized
    def list_deals(self) -> list[DealWithStore]:
        """All deals joined with store, category and posting user, newest first.

        A deal whose store, category or user does not resolve is left out.
        """
        views = []
        for deal in self._deals.values():
            view = self._deal_view(deal)
            if view is not None:
                views.append(view)
        # Equal timestamps fall back to id so the newest insert still comes first
        return sorted(views, key=lambda d: (d.created_at, d.id), reverse=True)

    @_synchronized
    def get_deal(self, deal_id: int) -> Deal | None:
        return self._deals.get(deal_id)

    @_synchronized
    def create_deal(self, fields: DealCreate) -> Deal:
        deal = Deal(
            id=self._next_id("deal"),
            created_at=self._clock(),
            likes=0,
            **fields.model_dump(),
        )
        self._deals[deal.id] = deal
        return deal

    @_synchronized
    def update_deal_likes(self, deal_id: int, likes: int) -> Deal | None:
        """Overwrite the denormalized like counter."""
        deal = self._deals.get(deal_id)
        if deal is None:
            return None
        updated = deal.model_copy(update={"likes": likes})
        self._deals[deal_id] = updated
        return updated

    def _deal_view(self, deal: Deal) -> DealWithStore | None:
        store = self._stores.get(deal.store_id)
        category = self._categories.get(deal.category_id)
        user = self._users_by_username.get(deal.user_id)
        if store is None or category is None or user is None:
            logger.debug(
                "Dropping deal %s from feed: store=%s category=%s user=%s resolved=%s/%s/%s",
                deal.id,
                deal.store_id,
                deal.category_id,
                deal.user_id,
                store is not None,
                category is not None,
                user is not None,
            )
            return None
        return DealWithStore(**dict(deal), store=store, category=category, user=user)

    # ============================================================
    # Likes
    #
    # Primitives only: they do not touch Deal.likes and do not reject a
    # second Like for the same (deal, user). Use services.likes.toggle_like.
    # ============================================================

    @_synchronized
    def get_like(self, deal_id: int, user_id: str) -> Like | None:
        return next(self._iter_likes(deal_id, user_id), None)

    @_synchronized
    def create_like(self, deal_id: int, user_id: str) -> Like:
        like = Like(id=self._next_id("like"), deal_id=deal_id, user_id=user_id)
        self._likes[like.id] = like
        return like

    @_synchronized
    def delete_like(self, deal_id: int, user_id: str) -> bool:
        """Remove the oldest Like for the pair. Returns False if there was none."""
        like = next(self._iter_likes(deal_id, user_id), None)
        if like is None:
            return False
        del self._likes[like.id]
        return True

    @_synchronized
    def count_likes(self, deal_id: int) -> int:
        return sum(1 for like in self._likes.values() if like.deal_id == deal_id)

    def _iter_likes(self, deal_id: int, user_id: str) -> Iterator[Like]:
        return (
            like
            for like in self._likes.values()
            if like.deal_id == deal_id and like.user_id == user_id
        )

    # ============================================================
    # Users
    # ============================================================

    @_synchronized
    def list_users(self) -> list[User]:
        return sorted(self._users.values(), key=lambda u: u.id)

    @_synchronized
    def get_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    @_synchronized
    def get_user_by_username(self, username: str) -> User | None:
        return self._users_by_username.get(username)

    @_synchronized
    def create_user(self, fields: UserCreate) -> User:
        """Create a user and index it by id and username.

        A reused username is not rejected; the username index then resolves
        to the newest user.
        """
        user = User(id=self._next_id("user"), created_at=self._clock(), **fields.model_dump())
        if user.username in self._users_by_username:
            logger.warning("Username %r reused by user %s", user.username, user.id)
        self._users[user.id] = user
        self._users_by_username[user.username] = user
        return user

    # ============================================================
    # Follow graph
    # ============================================================

    @_synchronized
    def follow_user(self, follower_id: str, following_id: str) -> Follower:
        """Create the edge follower -> following. A repeated pair replaces the old edge."""
        edge = Follower(
            id=self._next_id("follower"),
            follower_id=follower_id,
            following_id=following_id,
            created_at=self._clock(),
        )
        self._followers[(follower_id, following_id)] = edge
        return edge

    @_synchronized
    def get_follow(self, follower_id: str, following_id: str) -> Follower | None:
        return self._followers.get((follower_id, following_id))

    @_synchronized
    def unfollow_user(self, follower_id: str, following_id: str) -> bool:
        return self._followers.pop((follower_id, following_id), None) is not None

    @_synchronized
    def is_following(self, follower_id: str, following_id: str) -> bool:
        return (follower_id, following_id) in self._followers

    @_synchronized
    def list_followers(self, user_id: str) -> list[UserProfile]:
        """Profiles of everyone following ``user_id``."""
        return self._profiles(
            edge.follower_id for edge in self._followers.values() if edge.following_id == user_id
        )

    @_synchronized
    def list_following(self, user_id: str) -> list[UserProfile]:
        """Profiles of everyone ``user_id`` follows."""
        return self._profiles(
            edge.following_id for edge in self._followers.values() if edge.follower_id == user_id
        )

    @_synchronized
    def get_user_profile(self, username: str) -> UserProfile | None:
        user = self._users_by_username.get(username)
        if user is None:
            return None
        return self._profile(user)

    def _profiles(self, usernames: Iterable[str]) -> list[UserProfile]:
        profiles = []
        for username in list(usernames):
            user = self._users_by_username.get(username)
            if user is None:
                logger.debug("Skipping follow edge to unknown user %r", username)
                continue
            profiles.append(self._profile(user))
        return profiles

    def _profile(self, user: User) -> UserProfile:
        followers_count = sum(1 for f in self._followers.values() if f.following_id == user.username)
        following_count = sum(1 for f in self._followers.values() if f.follower_id == user.username)
        return UserProfile(
            **dict(user),
            followers_count=followers_count,
            following_count=following_count,
        )

    # ============================================================
    # Comments
    # ============================================================

    @_synchronized
    def list_comments(self, deal_id: int) -> list[CommentWithUser]:
        """Comments on a deal with their authors, oldest first.

        Comments whose author does not resolve are left out.
        """
        comments = sorted(
            (c for c in self._comments.values() if c.deal_id == deal_id),
            key=lambda c: (c.created_at, c.id),
        )
        views = []
        for comment in comments:
            user = self._users_by_username.get(comment.user_id)
            if user is None:
                logger.debug("Dropping comment %s: author %r not found", comment.id, comment.user_id)
                continue
            views.append(CommentWithUser(**dict(comment), user=user))
        return views

    @_synchronized
    def create_comment(self, fields: CommentCreate) -> Comment:
        comment = Comment(id=self._next_id("comment"), created_at=self._clock(), **fields.model_dump())
        self._comments[comment.id] = comment
        return comment

    @_synchronized
    def delete_comment(self, comment_id: int) -> bool:
        return self._comments.pop(comment_id, None) is not None

    # ============================================================
    # Chat messages
    # ============================================================

    @_synchronized
    def list_chat_messages(self, user_id_1: str, user_id_2: str) -> list[ChatMessage]:
        """Messages exchanged between two users in either direction, oldest first."""
        return sorted(
            (
                m
                for m in self._chat_messages.values()
                if (m.from_user_id, m.to_user_id) in ((user_id_1, user_id_2), (user_id_2, user_id_1))
            ),
            key=lambda m: (m.created_at, m.id),
        )

    @_synchronized
    def create_chat_message(self, fields: ChatMessageCreate) -> ChatMessage:
        message = ChatMessage(
            id=self._next_id("chat_message"),
            created_at=self._clock(),
            read_at=None,
            **fields.model_dump(),
        )
        self._chat_messages[message.id] = message
        return message

    @_synchronized
    def mark_message_read(self, message_id: int) -> bool:
        message = self._chat_messages.get(message_id)
        if message is None:
            return False
        self._chat_messages[message_id] = message.model_copy(update={"read_at": self._clock()})
        return True

    # ============================================================
    # Shopping lists
    # ============================================================

    @_synchronized
    def list_shopping_lists(self, user_id: str) -> list[ShoppingListWithItems]:
        """Lists owned by ``user_id`` with their items, newest first."""
        views = [self._list_view(lst) for lst in self._shopping_lists.values() if lst.user_id == user_id]
        return sorted(views, key=lambda lst: (lst.created_at, lst.id), reverse=True)

    @_synchronized
    def get_shopping_list(self, list_id: int) -> ShoppingListWithItems | None:
        shopping_list = self._shopping_lists.get(list_id)
        if shopping_list is None:
            return None
        return self._list_view(shopping_list)

    @_synchronized
    def create_shopping_list(self, fields: ShoppingListCreate) -> ShoppingList:
        shopping_list = ShoppingList(
            id=self._next_id("shopping_list"),
            created_at=self._clock(),
            **fields.model_dump(),
        )
        self._shopping_lists[shopping_list.id] = shopping_list
        return shopping_list

    @_synchronized
    def update_shopping_list(self, list_id: int, updates: ShoppingListUpdate) -> ShoppingList | None:
        shopping_list = self._shopping_lists.get(list_id)
        if shopping_list is None:
            return None
        updated = shopping_list.model_copy(update=updates.model_dump(exclude_unset=True))
        self._shopping_lists[list_id] = updated
        return updated

    @_synchronized
    def delete_shopping_list(self, list_id: int) -> bool:
        """Delete a list together with its items and share grants."""
        item_ids = [i.id for i in self._shopping_list_items.values() if i.list_id == list_id]
        for item_id in item_ids:
            del self._shopping_list_items[item_id]

        grant_ids = [g.id for g in self._shared_lists.values() if g.list_id == list_id]
        for grant_id in grant_ids:
            del self._shared_lists[grant_id]

        logger.debug(
            "Deleting shopping list %s: %d items, %d grants", list_id, len(item_ids), len(grant_ids)
        )
        return self._shopping_lists.pop(list_id, None) is not None

    def _list_view(self, shopping_list: ShoppingList) -> ShoppingListWithItems:
        items = self.list_shopping_list_items(shopping_list.id)
        return ShoppingListWithItems(**dict(shopping_list), items=items, item_count=len(items))

    # ============================================================
    # Shopping list items
    # ============================================================

    @_synchronized
    def list_shopping_list_items(self, list_id: int) -> list[ShoppingListItem]:
        """Items on a list, newest first."""
        return sorted(
            (i for i in self._shopping_list_items.values() if i.list_id == list_id),
            key=lambda i: (i.created_at, i.id),
            reverse=True,
        )

    @_synchronized
    def create_shopping_list_item(self, fields: ShoppingListItemCreate) -> ShoppingListItem:
        item = ShoppingListItem(
            id=self._next_id("shopping_list_item"),
            created_at=self._clock(),
            **fields.model_dump(),
        )
        self._shopping_list_items[item.id] = item
        return item

    @_synchronized
    def update_shopping_list_item(
        self, item_id: int, updates: ShoppingListItemUpdate
    ) -> ShoppingListItem | None:
        item = self._shopping_list_items.get(item_id)
        if item is None:
            return None
        updated = item.model_copy(update=updates.model_dump(exclude_unset=True))
        self._shopping_list_items[item_id] = updated
        return updated

    @_synchronized
    def delete_shopping_list_item(self, item_id: int) -> bool:
        return self._shopping_list_items.pop(item_id, None) is not None

    # ============================================================
    # Share grants
    # ============================================================

    @_synchronized
    def share_shopping_list(self, list_id: int, shared_with_user_id: str, can_edit: bool) -> SharedList:
        grant = SharedList(
            id=self._next_id("shared_list"),
            list_id=list_id,
            shared_with_user_id=shared_with_user_id,
            can_edit=can_edit,
            created_at=self._clock(),
        )
        self._shared_lists[grant.id] = grant
        return grant

    @_synchronized
    def list_shared_lists(self, user_id: str) -> list[ShoppingListWithItems]:
        """Lists shared with ``user_id``, in grant order. Grants to deleted lists are skipped."""
        views = []
        for grant in self._shared_lists.values():
            if grant.shared_with_user_id != user_id:
                continue
            shopping_list = self._shopping_lists.get(grant.list_id)
            if shopping_list is None:
                continue
            views.append(self._list_view(shopping_list))
        return views


# Process-wide store (initialized on startup)
_storage: MemStorage | None = None


def init_storage() -> MemStorage:
    """Create the process-wide store, replacing any previous one."""
    global _storage
    _storage = MemStorage()
    logger.info("In-memory store initialized")
    return _storage


def close_storage() -> None:
    """Drop the process-wide store and everything in it."""
    global _storage
    _storage = None


def get_storage() -> MemStorage:
    """Get the process-wide store (FastAPI dependency)."""
    if _storage is None:
        raise RuntimeError("Store not initialized. Call init_storage() first.")
    return _storage
