"""Per-user recommendations over the in-memory stores."""

import logging
from typing import List, Optional, Tuple

from recommender import (
    RankingConfig,
    ReadingHistoryEntry,
    RecommendationEntry,
    exclude_read,
    recommend,
)

from .blog_store import InMemoryBlogStore
from .user_store import InMemoryUserStore

logger = logging.getLogger(__name__)


def recommend_for_user(
    blogs: InMemoryBlogStore,
    users: InMemoryUserStore,
    user_id: str,
    config: RankingConfig,
    limit: Optional[int] = None,
) -> Tuple[List[RecommendationEntry], List[str], List[ReadingHistoryEntry]]:
    """
    Ranked recommendations for user_id, with the preferences and history used.

    Blogs already in the user's reading history are never recommended.
    Raises UserNotFoundError for an unknown user.
    """
    preferences = users.profile(user_id).preferences
    history = users.history_entries(user_id, blogs)
    candidates = exclude_read(blogs.all(), history)
    recommendations = recommend(preferences, candidates, history, limit, config=config)
    logger.info(
        "[recommendations] SERVED user_id=%s candidates=%s returned=%s",
        user_id,
        len(candidates),
        len(recommendations),
    )
    return recommendations, preferences, history
