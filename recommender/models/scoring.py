"""
Scoring models: ScoredBlog and the cards returned to the presentation layer.

Contains:
- ScoredBlog: a blog with its recommendation score components
- BlogSummary: a blog card with a truncated excerpt (trending, related)
- RecommendationEntry: a BlogSummary with the blended score
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from .blog import Author, BlogDocument


class ScoredBlog(BaseModel):
    """A blog with all its scoring components."""

    blog: BlogDocument
    content_score: float
    tag_score: float
    history_score: float
    final_score: float


class BlogSummary(BaseModel):
    """Blog card: metadata plus a content excerpt instead of full content."""

    id: str
    title: str
    excerpt: str
    tags: List[str] = []
    author: Optional[Author] = None
    read_count: int = 0
    like_count: int = 0
    created_at: datetime


class RecommendationEntry(BlogSummary):
    """Recommendation card; computed per request and never persisted."""

    score: float
