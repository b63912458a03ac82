"""
Recommendation ranking: blend content, tag, and history terms into a sorted list.

Public API: recommend, rank_candidates, exclude_read.
- core: main orchestration (rank_candidates, recommend).
- Submodules: content, tags, history, blended_scoring, cards.
"""

from .cards import make_excerpt, to_recommendation_entry, to_summary
from .core import exclude_read, rank_candidates, recommend

__all__ = [
    "exclude_read",
    "make_excerpt",
    "rank_candidates",
    "recommend",
    "to_recommendation_entry",
    "to_summary",
]
