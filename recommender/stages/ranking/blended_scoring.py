"""
Per-candidate blended scoring: content, tag, and history terms.

Builds a ScoredBlog for one candidate given the request-wide preference and
history fingerprints. Terms that do not apply contribute 0 and the remaining
weights are not renormalized, so a user without preferences or history can
never reach 1.0.
"""

from typing import List, Optional

from ...fingerprint.builder import fingerprint_for
from ...models.blog import BlogDocument, Fingerprint
from ...models.config import RankingConfig
from ...models.scoring import ScoredBlog
from ...utils.scores import clamp_score
from .content import content_similarity
from .history import history_similarity
from .tags import tag_overlap


def build_scored_blog(
    blog: BlogDocument,
    preferences: List[str],
    preference_fingerprint: Fingerprint,
    history_fps: List[Optional[Fingerprint]],
    config: RankingConfig,
) -> ScoredBlog:
    """
    Compute the content, tag, and history terms for one blog and blend them.

    final = min(weight_content * content + weight_tags * tags + weight_history * history, score_cap)
    """
    blog_fp = fingerprint_for(blog, config)

    content = content_similarity(preference_fingerprint, blog_fp)
    tags = tag_overlap(preferences, blog.tags)
    history = history_similarity(history_fps, blog_fp)

    final = config.weight_content * content
    if tags is not None:
        final += config.weight_tags * tags
    if history is not None:
        final += config.weight_history * history

    return ScoredBlog(
        blog=blog,
        content_score=content,
        tag_score=tags or 0.0,
        history_score=history or 0.0,
        final_score=clamp_score(final, config.score_cap),
    )
