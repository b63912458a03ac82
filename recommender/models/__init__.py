"""Data models for the recommendation engine."""

from .blog import Author, BlogDocument, Fingerprint, ensure_blogs
from .config import DEFAULT_CONFIG, RankingConfig, resolve_config
from .history import (
    ReadingHistoryEntry,
    UserPreferenceProfile,
    ensure_history,
    read_blog_ids,
)
from .scoring import BlogSummary, RecommendationEntry, ScoredBlog

__all__ = [
    "Author",
    "BlogDocument",
    "BlogSummary",
    "DEFAULT_CONFIG",
    "Fingerprint",
    "RankingConfig",
    "ReadingHistoryEntry",
    "RecommendationEntry",
    "ScoredBlog",
    "UserPreferenceProfile",
    "ensure_blogs",
    "ensure_history",
    "read_blog_ids",
    "resolve_config",
]
