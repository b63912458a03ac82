"""Backing logic: in-memory blog and user stores, per-user recommendations."""

from .blog_store import BlogNotFoundError, InMemoryBlogStore
from .recommendation_service import recommend_for_user
from .user_store import InMemoryUserStore, UserNotFoundError

__all__ = [
    "BlogNotFoundError",
    "InMemoryBlogStore",
    "InMemoryUserStore",
    "UserNotFoundError",
    "recommend_for_user",
]
