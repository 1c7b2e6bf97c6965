"""Deal feed endpoints.

GET    /api/deals                  - feed, newest first, with isLiked for the viewer
POST   /api/deals                  - post a deal
POST   /api/deals/{id}/like        - toggle the viewer's like
GET    /api/deals/{id}/comments    - comments, oldest first
POST   /api/deals/{id}/comments    - add a comment
DELETE /api/comments/{id}          - remove a comment

Routers are thin: the store and services do the work.
"""

from fastapi import APIRouter, Body, Depends, Query

from dealfeed.models import Comment, Deal
from dealfeed.routes.errors import not_found
from dealfeed.schemas import (
    CommentBody,
    CommentCreate,
    CommentWithUser,
    DealCreate,
    DealWithStore,
    LikeToggleRequest,
    LikeToggleResult,
    MessageResponse,
)
from dealfeed.services.feed import list_feed
from dealfeed.services.likes import toggle_like
from dealfeed.settings import Settings, get_settings
from dealfeed.stores.memory import MemStorage, get_storage

router = APIRouter()


@router.get("/deals", response_model=list[DealWithStore])
async def get_deals(
    user_id: str | None = Query(default=None, alias="userId", description="Viewer username"),
    storage: MemStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
) -> list[DealWithStore]:
    return list_feed(storage, user_id or settings.default_user_id)


@router.post("/deals", response_model=Deal, status_code=201)
async def create_deal(payload: DealCreate, storage: MemStorage = Depends(get_storage)) -> Deal:
    return storage.create_deal(payload)


@router.post("/deals/{deal_id}/like", response_model=LikeToggleResult)
async def like_deal(
    deal_id: int,
    payload: LikeToggleRequest | None = Body(default=None),
    storage: MemStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
) -> LikeToggleResult:
    user_id = (payload.user_id if payload else None) or settings.default_user_id
    result = toggle_like(storage, deal_id, user_id)
    if result is None:
        raise not_found("DEAL_NOT_FOUND", f"Deal {deal_id} not found", deal_id=deal_id)
    return result


@router.get("/deals/{deal_id}/comments", response_model=list[CommentWithUser])
async def get_comments(deal_id: int, storage: MemStorage = Depends(get_storage)) -> list[CommentWithUser]:
    return storage.list_comments(deal_id)


@router.post("/deals/{deal_id}/comments", response_model=Comment, status_code=201)
async def create_comment(
    deal_id: int,
    payload: CommentBody,
    storage: MemStorage = Depends(get_storage),
) -> Comment:
    if storage.get_deal(deal_id) is None:
        raise not_found("DEAL_NOT_FOUND", f"Deal {deal_id} not found", deal_id=deal_id)
    return storage.create_comment(CommentCreate(deal_id=deal_id, **payload.model_dump()))


@router.delete("/comments/{comment_id}", response_model=MessageResponse)
async def delete_comment(comment_id: int, storage: MemStorage = Depends(get_storage)) -> MessageResponse:
    if not storage.delete_comment(comment_id):
        raise not_found("COMMENT_NOT_FOUND", f"Comment {comment_id} not found", comment_id=comment_id)
    return MessageResponse(message="Comment deleted successfully")
