"""Store and Category models.

Both are reference data: created once (usually by the seed) and never
updated or deleted.
"""

from dealfeed.models.base import Entity


class Store(Entity):
    """A physical shop where deals are found."""

    id: int
    name: str
    location: str
    address: str | None = None
    latitude: str | None = None
    longitude: str | None = None
    logo_url: str | None = None

    def __repr__(self) -> str:
        return f"<Store {self.id} {self.name}>"


class Category(Entity):
    """Product category (Produce, Dairy, ...)."""

    id: int
    name: str
    image_url: str | None = None
    color: str | None = None

    def __repr__(self) -> str:
        return f"<Category {self.id} {self.name}>"
