"""Shopping list endpoints.

GET    /api/shopping-lists                - lists owned by the viewer
POST   /api/shopping-lists                - create a list
GET    /api/shopping-lists/{id}           - one list with items
PATCH  /api/shopping-lists/{id}           - rename / flag as shared
DELETE /api/shopping-lists/{id}           - delete with items and grants
POST   /api/shopping-lists/{id}/items     - add an item
POST   /api/shopping-lists/{id}/share     - grant another user access
GET    /api/shared-lists                  - lists shared with the viewer
PATCH  /api/shopping-list-items/{id}      - update an item
DELETE /api/shopping-list-items/{id}      - remove an item
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from dealfeed.models import SharedList, ShoppingList, ShoppingListItem
from dealfeed.routes.errors import not_found
from dealfeed.schemas import (
    MessageResponse,
    ShareRequest,
    ShoppingListCreate,
    ShoppingListItemBody,
    ShoppingListItemCreate,
    ShoppingListItemUpdate,
    ShoppingListUpdate,
    ShoppingListWithItems,
)
from dealfeed.settings import Settings, get_settings
from dealfeed.stores.memory import MemStorage, get_storage

router = APIRouter()


def _list_not_found(list_id: int) -> HTTPException:
    return not_found("LIST_NOT_FOUND", f"Shopping list {list_id} not found", list_id=list_id)


def _item_not_found(item_id: int) -> HTTPException:
    return not_found("ITEM_NOT_FOUND", f"Item {item_id} not found", item_id=item_id)


@router.get("/shopping-lists", response_model=list[ShoppingListWithItems])
async def get_shopping_lists(
    user_id: str | None = Query(default=None, alias="userId"),
    storage: MemStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
) -> list[ShoppingListWithItems]:
    return storage.list_shopping_lists(user_id or settings.default_user_id)


@router.post("/shopping-lists", response_model=ShoppingList, status_code=201)
async def create_shopping_list(
    payload: ShoppingListCreate, storage: MemStorage = Depends(get_storage)
) -> ShoppingList:
    return storage.create_shopping_list(payload)


@router.get("/shopping-lists/{list_id}", response_model=ShoppingListWithItems)
async def get_shopping_list(list_id: int, storage: MemStorage = Depends(get_storage)) -> ShoppingListWithItems:
    shopping_list = storage.get_shopping_list(list_id)
    if shopping_list is None:
        raise _list_not_found(list_id)
    return shopping_list


@router.patch("/shopping-lists/{list_id}", response_model=ShoppingList)
async def update_shopping_list(
    list_id: int,
    payload: ShoppingListUpdate,
    storage: MemStorage = Depends(get_storage),
) -> ShoppingList:
    updated = storage.update_shopping_list(list_id, payload)
    if updated is None:
        raise _list_not_found(list_id)
    return updated


@router.delete("/shopping-lists/{list_id}", response_model=MessageResponse)
async def delete_shopping_list(list_id: int, storage: MemStorage = Depends(get_storage)) -> MessageResponse:
    if not storage.delete_shopping_list(list_id):
        raise _list_not_found(list_id)
    return MessageResponse(message="Shopping list deleted successfully")


@router.post("/shopping-lists/{list_id}/items", response_model=ShoppingListItem, status_code=201)
async def add_item(
    list_id: int,
    payload: ShoppingListItemBody,
    storage: MemStorage = Depends(get_storage),
) -> ShoppingListItem:
    with storage.lock:
        if storage.get_shopping_list(list_id) is None:
            raise _list_not_found(list_id)
        return storage.create_shopping_list_item(
            ShoppingListItemCreate(list_id=list_id, **payload.model_dump())
        )


@router.post("/shopping-lists/{list_id}/share", response_model=SharedList, status_code=201)
async def share_list(
    list_id: int,
    payload: ShareRequest,
    storage: MemStorage = Depends(get_storage),
) -> SharedList:
    with storage.lock:
        if storage.get_shopping_list(list_id) is None:
            raise _list_not_found(list_id)
        return storage.share_shopping_list(list_id, payload.shared_with_user_id, payload.can_edit)


@router.get("/shared-lists", response_model=list[ShoppingListWithItems])
async def get_shared_lists(
    user_id: str | None = Query(default=None, alias="userId"),
    storage: MemStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
) -> list[ShoppingListWithItems]:
    return storage.list_shared_lists(user_id or settings.default_user_id)


@router.patch("/shopping-list-items/{item_id}", response_model=ShoppingListItem)
async def update_item(
    item_id: int,
    payload: ShoppingListItemUpdate,
    storage: MemStorage = Depends(get_storage),
) -> ShoppingListItem:
    updated = storage.update_shopping_list_item(item_id, payload)
    if updated is None:
        raise _item_not_found(item_id)
    return updated


@router.delete("/shopping-list-items/{item_id}", response_model=MessageResponse)
async def delete_item(item_id: int, storage: MemStorage = Depends(get_storage)) -> MessageResponse:
    if not storage.delete_shopping_list_item(item_id):
        raise _item_not_found(item_id)
    return MessageResponse(message="Item deleted successfully")
