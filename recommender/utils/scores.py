"""
Score and time helpers used by the ranking stage and the selectors.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def window_start(since_days: int, now: Optional[datetime] = None) -> datetime:
    """Earliest creation time inside a window of since_days ending at now."""
    now = now or utcnow()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now - timedelta(days=since_days)


def clamp_score(score: float, cap: float = 1.0) -> float:
    """Cap a blended score from above; components are never negative."""
    return min(score, cap)
