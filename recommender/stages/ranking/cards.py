"""
Card formatting: excerpt truncation and summary/recommendation cards.

Computed alongside scoring so callers never ship full blog content in a list.
"""

from ...models.blog import BlogDocument
from ...models.config import RankingConfig, DEFAULT_CONFIG
from ...models.scoring import BlogSummary, RecommendationEntry, ScoredBlog


def make_excerpt(content: str, length: int = 200, marker: str = "...") -> str:
    """First length characters of content followed by marker (always appended)."""
    return (content or "")[:length] + marker


def to_summary(
    blog: BlogDocument,
    config: RankingConfig = DEFAULT_CONFIG,
    excerpt_length: int = None,
) -> BlogSummary:
    length = config.excerpt_length if excerpt_length is None else excerpt_length
    return BlogSummary(
        id=blog.id,
        title=blog.title,
        excerpt=make_excerpt(blog.content, length, config.excerpt_marker),
        tags=list(blog.tags),
        author=blog.author,
        read_count=blog.read_count,
        like_count=blog.like_count,
        created_at=blog.created_at,
    )


def to_recommendation_entry(
    scored: ScoredBlog,
    config: RankingConfig = DEFAULT_CONFIG,
) -> RecommendationEntry:
    summary = to_summary(scored.blog, config)
    return RecommendationEntry(**summary.model_dump(), score=scored.final_score)
