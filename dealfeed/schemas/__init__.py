"""Pydantic schemas for requests, responses and composed read views."""

from dealfeed.schemas.catalog import (
    CategoryCreate,
    ScannedProduct,
    ScanRequest,
    StoreCreate,
    UploadResponse,
)
from dealfeed.schemas.chat import ChatMessageCreate
from dealfeed.schemas.common import CamelModel, ErrorDetail, ErrorResponse, MessageResponse, error_body
from dealfeed.schemas.deals import (
    CommentBody,
    CommentCreate,
    CommentWithUser,
    DealCreate,
    DealWithStore,
    LikeToggleRequest,
    LikeToggleResult,
)
from dealfeed.schemas.shopping import (
    ShareRequest,
    ShoppingListCreate,
    ShoppingListItemBody,
    ShoppingListItemCreate,
    ShoppingListItemUpdate,
    ShoppingListUpdate,
    ShoppingListWithItems,
)
from dealfeed.schemas.users import FollowRequest, UserCreate, UserProfile

__all__ = [
    "CamelModel",
    "CategoryCreate",
    "ChatMessageCreate",
    "CommentBody",
    "CommentCreate",
    "CommentWithUser",
    "DealCreate",
    "DealWithStore",
    "ErrorDetail",
    "ErrorResponse",
    "FollowRequest",
    "LikeToggleRequest",
    "LikeToggleResult",
    "MessageResponse",
    "ScanRequest",
    "ScannedProduct",
    "ShareRequest",
    "ShoppingListCreate",
    "ShoppingListItemBody",
    "ShoppingListItemCreate",
    "ShoppingListItemUpdate",
    "ShoppingListUpdate",
    "ShoppingListWithItems",
    "StoreCreate",
    "UploadResponse",
    "UserCreate",
    "UserProfile",
    "error_body",
]
