"""Follow graph, profiles and chat endpoints.

GET    /api/followers                 - profiles following the user
GET    /api/following                 - profiles the user follows
POST   /api/follow                    - follow (no-op if already following)
DELETE /api/follow                    - unfollow
GET    /api/users/{username}          - profile with counts and isFollowing
GET    /api/chat-messages             - conversation between user1 and user2
POST   /api/chat-messages             - send a message
POST   /api/chat-messages/{id}/read   - mark a message as read
"""

from fastapi import APIRouter, Depends, Query, Response

from dealfeed.models import ChatMessage, Follower
from dealfeed.routes.errors import not_found
from dealfeed.schemas import ChatMessageCreate, FollowRequest, MessageResponse, UserProfile
from dealfeed.services.feed import follow, get_profile
from dealfeed.settings import Settings, get_settings
from dealfeed.stores.memory import MemStorage, get_storage

router = APIRouter()


@router.get("/followers", response_model=list[UserProfile])
async def get_followers(
    user_id: str | None = Query(default=None, alias="userId"),
    storage: MemStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
) -> list[UserProfile]:
    return storage.list_followers(user_id or settings.default_user_id)


@router.get("/following", response_model=list[UserProfile])
async def get_following(
    user_id: str | None = Query(default=None, alias="userId"),
    storage: MemStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
) -> list[UserProfile]:
    return storage.list_following(user_id or settings.default_user_id)


@router.post("/follow", response_model=Follower, status_code=201)
async def follow_user(
    payload: FollowRequest,
    response: Response,
    storage: MemStorage = Depends(get_storage),
) -> Follower:
    edge, created = follow(storage, payload.follower_id, payload.following_id)
    if not created:
        response.status_code = 200
    return edge


# DELETE with a JSON body, as the web client sends it
@router.delete("/follow", response_model=MessageResponse)
async def unfollow_user(payload: FollowRequest, storage: MemStorage = Depends(get_storage)) -> MessageResponse:
    if not storage.unfollow_user(payload.follower_id, payload.following_id):
        raise not_found(
            "FOLLOW_NOT_FOUND",
            "Follow relationship not found",
            follower_id=payload.follower_id,
            following_id=payload.following_id,
        )
    return MessageResponse(message="Unfollowed successfully")


@router.get("/users/{username}", response_model=UserProfile)
async def get_user_profile(
    username: str,
    viewer_id: str | None = Query(default=None, alias="viewerId"),
    storage: MemStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
) -> UserProfile:
    profile = get_profile(storage, username, viewer_id or settings.default_user_id)
    if profile is None:
        raise not_found("USER_NOT_FOUND", f"User {username} not found", username=username)
    return profile


@router.get("/chat-messages", response_model=list[ChatMessage])
async def get_chat_messages(
    user1: str = Query(min_length=1),
    user2: str = Query(min_length=1),
    storage: MemStorage = Depends(get_storage),
) -> list[ChatMessage]:
    return storage.list_chat_messages(user1, user2)


@router.post("/chat-messages", response_model=ChatMessage, status_code=201)
async def send_chat_message(
    payload: ChatMessageCreate, storage: MemStorage = Depends(get_storage)
) -> ChatMessage:
    return storage.create_chat_message(payload)


@router.post("/chat-messages/{message_id}/read", response_model=MessageResponse)
async def mark_read(message_id: int, storage: MemStorage = Depends(get_storage)) -> MessageResponse:
    if not storage.mark_message_read(message_id):
        raise not_found("MESSAGE_NOT_FOUND", f"Message {message_id} not found", message_id=message_id)
    return MessageResponse(message="Message marked as read")
