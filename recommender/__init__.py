"""
Blog Recommendation Engine: keyword fingerprints and blended ranking

Single entry point for the recommender package:
- models/: RankingConfig, BlogDocument, ReadingHistoryEntry, RecommendationEntry
- fingerprint/: build_fingerprint and strategy version
- stages/: ranking (recommend), trending, related
- utils/: similarity
"""

from .fingerprint import (
    STRATEGY_VERSION,
    build_fingerprint,
    build_preference_fingerprint,
    fingerprint_for,
)
from .models import (
    DEFAULT_CONFIG,
    Author,
    BlogDocument,
    BlogSummary,
    Fingerprint,
    RankingConfig,
    ReadingHistoryEntry,
    RecommendationEntry,
    ScoredBlog,
    UserPreferenceProfile,
    ensure_blogs,
    ensure_history,
    resolve_config,
)
from .stages import (
    exclude_read,
    rank_candidates,
    recommend,
    select_related,
    select_trending,
)
from .utils import similarity

__all__ = [
    "Author",
    "BlogDocument",
    "BlogSummary",
    "DEFAULT_CONFIG",
    "Fingerprint",
    "RankingConfig",
    "ReadingHistoryEntry",
    "RecommendationEntry",
    "STRATEGY_VERSION",
    "ScoredBlog",
    "UserPreferenceProfile",
    "build_fingerprint",
    "build_preference_fingerprint",
    "ensure_blogs",
    "ensure_history",
    "exclude_read",
    "fingerprint_for",
    "rank_candidates",
    "recommend",
    "resolve_config",
    "select_related",
    "select_trending",
    "similarity",
]
