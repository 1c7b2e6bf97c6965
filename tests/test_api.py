"""HTTP tests for the /api routers."""

import pytest
from httpx import AsyncClient

from factories import add_category, add_store, add_user

from dealfeed.stores.memory import MemStorage


def _deal_payload(store_id: int, category_id: int, **overrides) -> dict:
    payload = {
        "userId": "alice",
        "storeId": store_id,
        "categoryId": category_id,
        "title": "Fresh Organic Vegetables",
        "description": "50% off",
        "imageUrl": "https://images.example.com/veg.jpg",
        "salePrice": "$2.49",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def catalog(storage: MemStorage):
    store = add_store(storage)
    category = add_category(storage)
    add_user(storage, "alice", display_name="Alice")
    add_user(storage, "bob")
    return store, category


@pytest.mark.asyncio
async def test_catalog_endpoints(client: AsyncClient, catalog) -> None:
    stores = (await client.get("/api/stores")).json()
    categories = (await client.get("/api/categories")).json()

    assert stores[0]["name"] == "Whole Foods Market"
    assert stores[0]["logoUrl"] is None
    assert categories[0]["name"] == "Produce"


@pytest.mark.asyncio
async def test_post_and_list_deals(client: AsyncClient, catalog) -> None:
    store, category = catalog

    created = await client.post("/api/deals", json=_deal_payload(store.id, category.id))
    assert created.status_code == 201
    deal = created.json()
    assert deal["likes"] == 0
    assert deal["salePrice"] == "$2.49"
    assert deal["originalPrice"] is None

    feed = (await client.get("/api/deals", params={"userId": "bob"})).json()
    assert len(feed) == 1
    assert feed[0]["id"] == deal["id"]
    assert feed[0]["store"]["id"] == store.id
    assert feed[0]["category"]["id"] == category.id
    assert feed[0]["user"]["displayName"] == "Alice"
    assert "password" not in feed[0]["user"]
    assert feed[0]["isLiked"] is False


@pytest.mark.asyncio
async def test_post_deal_validation(client: AsyncClient, catalog) -> None:
    store, category = catalog
    payload = _deal_payload(store.id, category.id)
    del payload["title"]

    response = await client.post("/api/deals", json=payload)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_like_toggle(client: AsyncClient, catalog) -> None:
    store, category = catalog
    deal_id = (await client.post("/api/deals", json=_deal_payload(store.id, category.id))).json()["id"]

    first = await client.post(f"/api/deals/{deal_id}/like", json={"userId": "bob"})
    assert first.json() == {"liked": True, "likes": 1}

    feed = (await client.get("/api/deals", params={"userId": "bob"})).json()
    assert feed[0]["isLiked"] is True
    assert feed[0]["likes"] == 1

    second = await client.post(f"/api/deals/{deal_id}/like", json={"userId": "bob"})
    assert second.json() == {"liked": False, "likes": 0}


@pytest.mark.asyncio
async def test_like_missing_deal(client: AsyncClient) -> None:
    response = await client.post("/api/deals/99/like", json={"userId": "bob"})

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "DEAL_NOT_FOUND"


@pytest.mark.asyncio
async def test_comments(client: AsyncClient, catalog) -> None:
    store, category = catalog
    deal_id = (await client.post("/api/deals", json=_deal_payload(store.id, category.id))).json()["id"]

    created = await client.post(f"/api/deals/{deal_id}/comments", json={"userId": "bob", "content": "Nice!"})
    assert created.status_code == 201
    assert created.json()["dealId"] == deal_id

    comments = (await client.get(f"/api/deals/{deal_id}/comments")).json()
    assert [c["content"] for c in comments] == ["Nice!"]
    assert comments[0]["user"]["username"] == "bob"

    missing = await client.post("/api/deals/99/comments", json={"userId": "bob", "content": "?"})
    assert missing.status_code == 404

    comment_id = created.json()["id"]
    assert (await client.delete(f"/api/comments/{comment_id}")).status_code == 200
    assert (await client.delete(f"/api/comments/{comment_id}")).status_code == 404


@pytest.mark.asyncio
async def test_shopping_list_flow(client: AsyncClient) -> None:
    created = await client.post("/api/shopping-lists", json={"name": "Weekly", "userId": "bob"})
    assert created.status_code == 201
    list_id = created.json()["id"]
    assert created.json()["isShared"] is False

    item = await client.post(f"/api/shopping-lists/{list_id}/items", json={"name": "Milk", "quantity": 2})
    assert item.status_code == 201
    item_id = item.json()["id"]
    assert item.json()["listId"] == list_id
    assert item.json()["isCompleted"] is False

    patched = await client.patch(f"/api/shopping-list-items/{item_id}", json={"isCompleted": True})
    assert patched.json()["isCompleted"] is True
    assert patched.json()["quantity"] == 2

    lists = (await client.get("/api/shopping-lists", params={"userId": "bob"})).json()
    assert lists[0]["itemCount"] == 1
    assert lists[0]["items"][0]["isCompleted"] is True

    renamed = await client.patch(f"/api/shopping-lists/{list_id}", json={"name": "Party"})
    assert renamed.json()["name"] == "Party"

    shared = await client.post(
        f"/api/shopping-lists/{list_id}/share", json={"sharedWithUserId": "alice", "canEdit": True}
    )
    assert shared.status_code == 201
    assert shared.json()["canEdit"] is True
    shared_lists = (await client.get("/api/shared-lists", params={"userId": "alice"})).json()
    assert [lst["id"] for lst in shared_lists] == [list_id]

    assert (await client.delete(f"/api/shopping-lists/{list_id}")).status_code == 200
    assert (await client.get(f"/api/shopping-lists/{list_id}")).status_code == 404
    assert (await client.get("/api/shared-lists", params={"userId": "alice"})).json() == []
    assert (await client.delete(f"/api/shopping-list-items/{item_id}")).status_code == 404


@pytest.mark.asyncio
async def test_shopping_list_writes_on_missing_list(client: AsyncClient) -> None:
    item = await client.post("/api/shopping-lists/5/items", json={"name": "Milk"})
    share = await client.post("/api/shopping-lists/5/share", json={"sharedWithUserId": "alice"})
    patch = await client.patch("/api/shopping-list-items/5", json={"quantity": 3})

    assert (item.status_code, share.status_code, patch.status_code) == (404, 404, 404)


@pytest.mark.asyncio
async def test_shopping_list_patch_rejects_null_name(client: AsyncClient) -> None:
    list_id = (await client.post("/api/shopping-lists", json={"name": "Weekly", "userId": "bob"})).json()["id"]

    response = await client.patch(f"/api/shopping-lists/{list_id}", json={"name": None})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_follow_unfollow(client: AsyncClient, catalog) -> None:
    body = {"followerId": "bob", "followingId": "alice"}

    first = await client.post("/api/follow", json=body)
    again = await client.post("/api/follow", json=body)
    assert first.status_code == 201
    assert again.status_code == 200
    assert again.json()["id"] == first.json()["id"]

    followers = (await client.get("/api/followers", params={"userId": "alice"})).json()
    assert [p["username"] for p in followers] == ["bob"]
    assert followers[0]["followingCount"] == 1
    assert followers[0]["followersCount"] == 0

    following = (await client.get("/api/following", params={"userId": "bob"})).json()
    assert [p["username"] for p in following] == ["alice"]

    profile = (await client.get("/api/users/alice", params={"viewerId": "bob"})).json()
    assert profile["followersCount"] == 1
    assert profile["isFollowing"] is True

    assert (await client.request("DELETE", "/api/follow", json=body)).status_code == 200
    assert (await client.request("DELETE", "/api/follow", json=body)).status_code == 404


@pytest.mark.asyncio
async def test_unknown_user_profile(client: AsyncClient) -> None:
    response = await client.get("/api/users/ghost")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_chat_messages(client: AsyncClient) -> None:
    sent = await client.post(
        "/api/chat-messages",
        json={"fromUserId": "user123", "toUserId": "sarah_deals", "content": "Still on sale?", "dealId": 2},
    )
    assert sent.status_code == 201
    assert sent.json()["readAt"] is None
    await client.post(
        "/api/chat-messages",
        json={"fromUserId": "sarah_deals", "toUserId": "user123", "content": "Yes!"},
    )

    messages = (
        await client.get("/api/chat-messages", params={"user1": "sarah_deals", "user2": "user123"})
    ).json()
    assert [m["content"] for m in messages] == ["Still on sale?", "Yes!"]

    read = await client.post(f"/api/chat-messages/{sent.json()['id']}/read")
    assert read.status_code == 200
    assert (await client.post("/api/chat-messages/99/read")).status_code == 404

    missing_param = await client.get("/api/chat-messages", params={"user1": "user123"})
    assert missing_param.status_code == 422


@pytest.mark.asyncio
async def test_scan_barcode_and_upload(client: AsyncClient) -> None:
    scanned = (await client.post("/api/scan-barcode", json={"barcode": "123456789"})).json()
    assert scanned["name"] == "Organic Bananas"

    random_scan = await client.post("/api/scan-barcode")
    assert random_scan.status_code == 200
    assert random_scan.json()["barcode"]

    upload = (await client.post("/api/upload")).json()
    assert upload["imageUrl"].startswith("https://")
