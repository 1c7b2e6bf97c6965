"""Schemas for shopping lists, their items and share grants."""

from pydantic import Field, field_validator

from dealfeed.models import ShoppingList, ShoppingListItem
from dealfeed.schemas.common import CamelModel


class ShoppingListCreate(CamelModel):
    name: str = Field(min_length=1)
    user_id: str = Field(min_length=1)
    is_shared: bool = False


class ShoppingListUpdate(CamelModel):
    """Partial update; only fields present in the request are applied."""

    name: str | None = Field(default=None, min_length=1)
    is_shared: bool | None = None

    @field_validator("name", "is_shared")
    @classmethod
    def _reject_null(cls, v: object) -> object:
        if v is None:
            raise ValueError("may not be null")
        return v


class ShoppingListWithItems(ShoppingList):
    """Shopping list with its items (newest first) and their count."""

    items: list[ShoppingListItem]
    item_count: int = Field(ge=0)


class ShoppingListItemBody(CamelModel):
    """Item payload as posted to ``/shopping-lists/{id}/items``."""

    name: str = Field(min_length=1)
    quantity: int = Field(default=1, ge=1)
    price: str | None = None
    category: str | None = None
    is_completed: bool = False
    barcode: str | None = None


class ShoppingListItemCreate(ShoppingListItemBody):
    list_id: int


class ShoppingListItemUpdate(CamelModel):
    """Partial update; only fields present in the request are applied."""

    name: str | None = Field(default=None, min_length=1)
    quantity: int | None = Field(default=None, ge=1)
    price: str | None = None
    category: str | None = None
    is_completed: bool | None = None
    barcode: str | None = None

    @field_validator("name", "quantity", "is_completed")
    @classmethod
    def _reject_null(cls, v: object) -> object:
        if v is None:
            raise ValueError("may not be null")
        return v


class ShareRequest(CamelModel):
    shared_with_user_id: str = Field(min_length=1)
    can_edit: bool = False
