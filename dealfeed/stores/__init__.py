"""Data stores.

Stores handle:
- Entity collections, id assignment and lookups
- Composed read views (joins, derived counts)
- Cascading deletes

No request handling or multi-step business rules in stores - those belong in
services and routes.
"""

from dealfeed.stores.memory import MemStorage, close_storage, get_storage, init_storage

__all__ = ["MemStorage", "close_storage", "get_storage", "init_storage"]
