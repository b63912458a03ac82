"""
History term: average similarity between a candidate and the blogs the user has read.

Entries whose blog is missing or has no content count as 0 but stay in the
denominator, so sparse histories pull the term down.
"""

import logging
from typing import List, Optional

from ...fingerprint.builder import fingerprint_for
from ...models.blog import Fingerprint
from ...models.config import RankingConfig, DEFAULT_CONFIG
from ...models.history import ReadingHistoryEntry
from ...utils.similarity import similarity

logger = logging.getLogger(__name__)


def history_fingerprints(
    history: List[ReadingHistoryEntry],
    config: RankingConfig = DEFAULT_CONFIG,
) -> List[Optional[Fingerprint]]:
    """
    One fingerprint per history entry, None where the referenced blog has no content.

    Computed once per request and shared by every candidate.
    """
    fingerprints: List[Optional[Fingerprint]] = []
    unavailable = 0
    for entry in history:
        if not entry.has_content():
            fingerprints.append(None)
            unavailable += 1
            continue
        try:
            fingerprints.append(fingerprint_for(entry.blog, config))
        except Exception:
            logger.warning(
                "[ranking] HISTORY_FINGERPRINT_FAILED blog_id=%s",
                entry.blog_id,
                exc_info=True,
            )
            fingerprints.append(None)
            unavailable += 1
    if unavailable:
        logger.debug(
            "[ranking] HISTORY_ENTRIES_WITHOUT_CONTENT unavailable=%s total=%s",
            unavailable,
            len(history),
        )
    return fingerprints


def history_similarity(
    fingerprints: List[Optional[Fingerprint]],
    blog_fingerprint: Fingerprint,
) -> Optional[float]:
    """Mean similarity to each read blog; None when the history is empty."""
    if not fingerprints:
        return None
    total = sum(
        similarity(fp, blog_fingerprint) if fp is not None else 0.0
        for fp in fingerprints
    )
    return total / len(fingerprints)
