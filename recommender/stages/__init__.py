"""Pipeline stages: recommendation ranking, trending and related selectors."""

from .ranking import exclude_read, rank_candidates, recommend
from .related import select_related, select_related_blogs
from .trending import select_trending, select_trending_blogs

__all__ = [
    "exclude_read",
    "rank_candidates",
    "recommend",
    "select_related",
    "select_related_blogs",
    "select_trending",
    "select_trending_blogs",
]
