"""
Related selector

Picks blogs that share a tag or the author with a reference blog, newest first,
then backfills with the newest remaining blogs so the result reaches the
requested count whenever enough candidates exist.

The public entry point is select_related.
"""

from typing import List, Optional, Set

from ..models.blog import BlogDocument
from ..models.config import RankingConfig, resolve_config
from ..models.scoring import BlogSummary
from .ranking.cards import to_summary


def _lowered_tags(blog: BlogDocument) -> Set[str]:
    return {tag.lower() for tag in blog.tags}


def _is_related(blog: BlogDocument, reference: BlogDocument, reference_tags: Set[str]) -> bool:
    """True if blog shares at least one tag or the author with the reference."""
    if reference_tags & _lowered_tags(blog):
        return True
    return reference.author_id is not None and blog.author_id == reference.author_id


def _newest_first(blogs: List[BlogDocument]) -> List[BlogDocument]:
    return sorted(blogs, key=lambda b: b.created_at_utc(), reverse=True)


def select_related_blogs(
    reference: BlogDocument,
    candidates: List[BlogDocument],
    limit: int,
) -> List[BlogDocument]:
    """
    Tag/author matches first (newest first), then the newest of the rest.

    The reference itself is never returned, even if it appears in candidates.
    """
    if limit <= 0:
        return []
    others = [blog for blog in candidates if blog.id != reference.id]
    reference_tags = _lowered_tags(reference)

    # 1) Tag or author matches, newest first
    matched = _newest_first(
        [blog for blog in others if _is_related(blog, reference, reference_tags)]
    )[:limit]

    # 2) Backfill with the newest remaining blogs
    if len(matched) < limit:
        chosen = {blog.id for blog in matched}
        rest = _newest_first([blog for blog in others if blog.id not in chosen])
        matched.extend(rest[: limit - len(matched)])

    return matched


def select_related(
    reference: BlogDocument,
    candidates: List[BlogDocument],
    limit: Optional[int] = None,
    config: Optional[RankingConfig] = None,
) -> List[BlogSummary]:
    """Related cards (shorter excerpt); limit defaults to config.related_limit."""
    config = resolve_config(config)
    limit = config.related_limit if limit is None else limit
    blogs = select_related_blogs(reference, candidates, limit)
    return [to_summary(blog, config, config.related_excerpt_length) for blog in blogs]
