"""Shopping list models.

A ShoppingList owns its items and its share grants: deleting the list
deletes both.
"""

from datetime import datetime

from dealfeed.models.base import Entity


class ShoppingList(Entity):
    """Named, user-owned collection of items."""

    id: int
    name: str
    user_id: str
    is_shared: bool = False
    created_at: datetime

    def __repr__(self) -> str:
        return f"<ShoppingList {self.id} {self.name!r} owner={self.user_id}>"


class ShoppingListItem(Entity):
    """Item on a shopping list, optionally entered by barcode scan."""

    id: int
    list_id: int
    name: str
    quantity: int = 1
    price: str | None = None
    category: str | None = None
    is_completed: bool = False
    barcode: str | None = None
    created_at: datetime


class SharedList(Entity):
    """Grant giving another user access to a shopping list."""

    id: int
    list_id: int
    shared_with_user_id: str
    can_edit: bool = False
    created_at: datetime
