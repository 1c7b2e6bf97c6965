"""Entity models.

Models represent the store's collections:
- stores, categories: reference data for deals
- deals, likes: the feed
- users, followers: accounts and the directed follow graph
- comments, chat_messages: conversation around deals
- shopping_lists, shopping_list_items, shared_lists: collaborative lists
"""

from dealfeed.models.catalog import Category, Store
from dealfeed.models.deal import Deal, Like
from dealfeed.models.shopping import SharedList, ShoppingList, ShoppingListItem
from dealfeed.models.social import ChatMessage, Comment
from dealfeed.models.user import Follower, User

__all__ = [
    "Category",
    "ChatMessage",
    "Comment",
    "Deal",
    "Follower",
    "Like",
    "SharedList",
    "ShoppingList",
    "ShoppingListItem",
    "Store",
    "User",
]
