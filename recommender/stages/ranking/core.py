"""
Main ranking orchestration: preference and history fingerprints, then blended scoring.

Blends content, tag, and history terms per candidate; sorts (stable) and truncates.
Submodules used: content, tags, history, blended_scoring, cards.
"""

import logging
from typing import List, Optional

from ...fingerprint.builder import build_preference_fingerprint
from ...models.blog import BlogDocument, ensure_blogs
from ...models.config import RankingConfig, resolve_config
from ...models.history import ReadingHistoryEntry, ensure_history, read_blog_ids
from ...models.scoring import RecommendationEntry, ScoredBlog
from .blended_scoring import build_scored_blog
from .cards import to_recommendation_entry
from .history import history_fingerprints

logger = logging.getLogger(__name__)


def exclude_read(
    candidates: List[BlogDocument],
    history: List[ReadingHistoryEntry],
) -> List[BlogDocument]:
    """Drop candidates the user has already read, keeping input order."""
    read = set(read_blog_ids(ensure_history(history)))
    return [blog for blog in ensure_blogs(candidates) if blog.id not in read]


def rank_candidates(
    preferences: List[str],
    candidates: List[BlogDocument],
    history: List[ReadingHistoryEntry],
    config: Optional[RankingConfig] = None,
) -> List[ScoredBlog]:
    """
    Score every candidate and sort by final_score (descending).

    The sort is stable, so equal scores keep the candidates' input order.
    A candidate whose fingerprinting or scoring raises is logged and left out;
    the rest of the batch is still ranked.
    """
    config = resolve_config(config)
    candidates = ensure_blogs(candidates)
    history = ensure_history(history)

    # 1) Request-wide fingerprints: preferences and reading history
    preference_fp = build_preference_fingerprint(preferences, config)
    history_fps = history_fingerprints(history, config)

    # 2) For each candidate: blended score -> ScoredBlog
    scored: List[ScoredBlog] = []
    for blog in candidates:
        try:
            scored.append(
                build_scored_blog(blog, preferences, preference_fp, history_fps, config)
            )
        except Exception:
            logger.warning(
                "[ranking] CANDIDATE_SCORING_FAILED blog_id=%s",
                blog.id,
                exc_info=True,
            )

    # 3) Sort by final_score
    scored.sort(key=lambda x: x.final_score, reverse=True)
    return scored


def recommend(
    preferences: List[str],
    candidates: List[BlogDocument],
    history: List[ReadingHistoryEntry],
    limit: Optional[int] = None,
    config: Optional[RankingConfig] = None,
) -> List[RecommendationEntry]:
    """
    Ranked recommendation cards for one user.

    Candidates must already exclude blogs in history (see exclude_read).
    limit defaults to config.default_limit.
    """
    config = resolve_config(config)
    if limit is None:
        limit = config.default_limit
    scored = rank_candidates(preferences, candidates, history, config)
    logger.debug(
        "[ranking] RANKED candidates=%s scored=%s history=%s preferences=%s limit=%s",
        len(candidates),
        len(scored),
        len(history),
        len(preferences),
        limit,
    )
    return [to_recommendation_entry(s, config) for s in scored[: max(limit, 0)]]
