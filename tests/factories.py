"""Helpers for building test data in a store."""

from dealfeed.models import Category, Deal, Store, User
from dealfeed.schemas import CategoryCreate, DealCreate, StoreCreate, UserCreate
from dealfeed.stores.memory import MemStorage


def add_store(storage: MemStorage, name: str = "Whole Foods Market") -> Store:
    return storage.create_store(StoreCreate(name=name, location="Downtown"))


def add_category(storage: MemStorage, name: str = "Produce") -> Category:
    return storage.create_category(CategoryCreate(name=name))


def add_user(storage: MemStorage, username: str, **fields) -> User:
    return storage.create_user(UserCreate(username=username, password="demo123", **fields))


def add_deal(storage: MemStorage, store_id: int, category_id: int, user_id: str = "alice", **fields) -> Deal:
    data = {
        "user_id": user_id,
        "store_id": store_id,
        "category_id": category_id,
        "title": "Fresh Organic Vegetables",
        "description": "50% off this week",
        "image_url": "https://images.example.com/veg.jpg",
    }
    data.update(fields)
    return storage.create_deal(DealCreate(**data))
