"""
Trending selector

Keeps blogs created within a recency window and orders them by popularity
(read count, then like count). No fingerprinting involved.

The public entry point is select_trending.
"""

from datetime import datetime
from typing import List, Optional

from ..models.blog import BlogDocument
from ..models.config import RankingConfig, resolve_config
from ..models.scoring import BlogSummary
from ..utils.scores import window_start
from .ranking.cards import to_summary


def _within_window(blog: BlogDocument, start: datetime) -> bool:
    """True if the blog was created at or after start."""
    return blog.created_at_utc() >= start


def _popularity_key(blog: BlogDocument):
    return (blog.read_count, blog.like_count)


def select_trending_blogs(
    candidates: List[BlogDocument],
    since_days: int,
    limit: int,
    now: Optional[datetime] = None,
) -> List[BlogDocument]:
    """
    Blogs created within since_days of now, most read first (likes break ties).

    The sort is stable: blogs equal on both counts keep their input order.
    """
    start = window_start(since_days, now)
    recent = [blog for blog in candidates if _within_window(blog, start)]
    recent.sort(key=_popularity_key, reverse=True)
    return recent[: max(limit, 0)]


def select_trending(
    candidates: List[BlogDocument],
    since_days: Optional[int] = None,
    limit: Optional[int] = None,
    now: Optional[datetime] = None,
    config: Optional[RankingConfig] = None,
) -> List[BlogSummary]:
    """Trending cards; since_days and limit default to the config values."""
    config = resolve_config(config)
    since_days = config.trending_days if since_days is None else since_days
    limit = config.default_limit if limit is None else limit
    blogs = select_trending_blogs(candidates, since_days, limit, now)
    return [to_summary(blog, config) for blog in blogs]
