"""Demo data for a fresh store.

Creates:
- Six stores and five categories
- Three deals posted by seeded users
- Four users (password "demo123") with a few follow edges
- Comments on the first two deals

Seeding is not idempotent: call it once on an empty store.
"""

from datetime import timedelta
import logging

from dealfeed.schemas import (
    CategoryCreate,
    CommentCreate,
    DealCreate,
    StoreCreate,
    UserCreate,
)
from dealfeed.stores.memory import MemStorage

logger = logging.getLogger("uvicorn.error")

_UNSPLASH = "https://images.unsplash.com/"

STORES = [
    StoreCreate(
        name="Whole Foods Market",
        location="Downtown",
        address="123 Main St, Downtown",
        latitude="40.7128",
        longitude="-74.0060",
        logo_url=f"{_UNSPLASH}photo-1441986300917-64674bd600d8?w=40&h=40&fit=crop",
    ),
    StoreCreate(
        name="Target",
        location="Midtown",
        address="456 Commerce Ave, Midtown",
        latitude="40.7589",
        longitude="-73.9851",
        logo_url=f"{_UNSPLASH}photo-1441986300917-64674bd600d8?w=40&h=40&fit=crop",
    ),
    StoreCreate(
        name="Kroger",
        location="Westside",
        address="789 West Blvd, Westside",
        latitude="40.7505",
        longitude="-74.0087",
        logo_url=f"{_UNSPLASH}photo-1534723452862-4c874018d66d?w=40&h=40&fit=crop",
    ),
    StoreCreate(
        name="Costco Wholesale",
        location="Northside",
        address="321 Industrial Dr, Northside",
        latitude="40.7831",
        longitude="-73.9712",
        logo_url=f"{_UNSPLASH}photo-1578662996442-48f60103fc96?w=40&h=40&fit=crop",
    ),
    StoreCreate(
        name="Safeway",
        location="Downtown",
        address="654 Center St, Downtown",
        latitude="40.7174",
        longitude="-74.0113",
        logo_url=f"{_UNSPLASH}photo-1549931319-a545dcf3bc73?w=40&h=40&fit=crop",
    ),
    StoreCreate(
        name="Trader Joe's",
        location="Eastside",
        address="987 Park Ave, Eastside",
        latitude="40.7614",
        longitude="-73.9776",
        logo_url=f"{_UNSPLASH}photo-1534723452862-4c874018d66d?w=40&h=40&fit=crop",
    ),
]

CATEGORIES = [
    CategoryCreate(
        name="Produce",
        image_url=f"{_UNSPLASH}photo-1556909114-f6e7ad7d3136?w=64&h=64&fit=crop",
        color="from-green-400 to-emerald-500",
    ),
    CategoryCreate(
        name="Dairy",
        image_url=f"{_UNSPLASH}photo-1563636619-e9143da7973b?w=64&h=64&fit=crop",
        color="from-blue-400 to-blue-600",
    ),
    CategoryCreate(
        name="Meat",
        image_url=f"{_UNSPLASH}photo-1529692236671-f1f6cf9683ba?w=64&h=64&fit=crop",
        color="from-red-400 to-red-600",
    ),
    CategoryCreate(
        name="Bakery",
        image_url=f"{_UNSPLASH}photo-1549931319-a545dcf3bc73?w=64&h=64&fit=crop",
        color="from-yellow-400 to-orange-500",
    ),
    CategoryCreate(
        name="Frozen",
        image_url=f"{_UNSPLASH}photo-1563636619-e9143da7973b?w=64&h=64&fit=crop",
        color="from-cyan-400 to-blue-500",
    ),
]

USERS = [
    UserCreate(
        username="user123",
        password="demo123",
        display_name="John Doe",
        avatar=f"{_UNSPLASH}photo-1472099645785-5658abf4ff4e?w=100&h=100&fit=crop&crop=face",
        bio="Love finding great deals!",
    ),
    UserCreate(
        username="sarah_deals",
        password="demo123",
        display_name="Sarah Johnson",
        avatar=f"{_UNSPLASH}photo-1494790108755-2616b612b786?w=100&h=100&fit=crop&crop=face",
        bio="Grocery shopping expert",
    ),
    UserCreate(
        username="mike_saves",
        password="demo123",
        display_name="Mike Wilson",
        avatar=f"{_UNSPLASH}photo-1507003211169-0a1dd7228f2d?w=100&h=100&fit=crop&crop=face",
        bio="Deals hunter 🛒",
    ),
    UserCreate(
        username="lisa_shops",
        password="demo123",
        display_name="Lisa Chen",
        avatar=f"{_UNSPLASH}photo-1438761681033-6461ffad8d80?w=100&h=100&fit=crop&crop=face",
        bio="Smart shopper mom",
    ),
]

# (follower, following)
FOLLOWS = [
    ("user123", "sarah_deals"),
    ("user123", "mike_saves"),
    ("sarah_deals", "user123"),
    ("lisa_shops", "user123"),
]


def _deals(storage: MemStorage) -> list[DealCreate]:
    """Deal definitions; expiry is relative to the store clock."""
    now = storage.now()
    return [
        DealCreate(
            user_id="user123",
            store_id=1,  # Whole Foods
            category_id=1,  # Produce
            title="Fresh Organic Vegetables",
            description="🥕 Fresh organic vegetables 50% off! Perfect for your healthy meal prep. #OrganicDeals",
            original_price="$4.99",
            sale_price="$2.49",
            discount_percent=50,
            image_url=f"{_UNSPLASH}photo-1542838132-92c53300491e?w=800&h=600&fit=crop",
            expires_at=now + timedelta(hours=24),
        ),
        DealCreate(
            user_id="sarah_deals",
            store_id=2,  # Target
            category_id=2,  # Dairy
            title="Dairy Products Special",
            description="🥛 Buy 2 get 1 FREE on all milk, cheese, and yogurt. Stock up for the week! #DairyDeals",
            original_price="$12.97",
            sale_price="$8.98",
            discount_percent=33,
            image_url=f"{_UNSPLASH}photo-1563636619-e9143da7973b?w=800&h=600&fit=crop",
            expires_at=now + timedelta(hours=48),
        ),
        DealCreate(
            user_id="mike_saves",
            store_id=3,  # Kroger
            category_id=3,  # Meat
            title="Premium Steaks Weekend Sale",
            description="🥩 Premium steaks 30% off this weekend! Perfect for your BBQ plans. #WeekendBBQ",
            original_price="$24.99",
            sale_price="$17.49",
            discount_percent=30,
            image_url=f"{_UNSPLASH}photo-1529692236671-f1f6cf9683ba?w=800&h=600&fit=crop",
            expires_at=now + timedelta(days=3),
        ),
    ]


def seed_demo_data(storage: MemStorage) -> None:
    """Load the demo dataset into ``storage``."""
    with storage.lock:
        for store in STORES:
            storage.create_store(store)
        for category in CATEGORIES:
            storage.create_category(category)
        for deal in _deals(storage):
            storage.create_deal(deal)
        for user in USERS:
            storage.create_user(user)
        for follower_id, following_id in FOLLOWS:
            storage.follow_user(follower_id, following_id)

        storage.create_comment(
            CommentCreate(deal_id=1, user_id="sarah_deals", content="Great deal! I got these yesterday 🥕")
        )
        storage.create_comment(
            CommentCreate(deal_id=1, user_id="mike_saves", content="Thanks for sharing! Heading there now")
        )
        storage.create_comment(
            CommentCreate(deal_id=2, user_id="lisa_shops", content="Perfect timing, we're out of milk!")
        )

    logger.info(
        "Seeded demo data: %d stores, %d categories, %d users",
        len(STORES),
        len(CATEGORIES),
        len(USERS),
    )
