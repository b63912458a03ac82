"""
Reading history model: a blog the user has read and when.

Used by the ranking stage for the history similarity term.
Built from store dicts via ReadingHistoryEntry.model_validate(d) or ensure_history().
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

from .blog import BlogDocument


class ReadingHistoryEntry(BaseModel):
    """
    One read of a blog by a user.

    blog_id: id of the referenced blog.
    blog: the resolved blog, or None when it was deleted or not populated.
    read_at: when the blog was read.
    """

    blog_id: str
    blog: Optional[BlogDocument] = None
    read_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def has_content(self) -> bool:
        return self.blog is not None and bool(self.blog.content)


class UserPreferenceProfile(BaseModel):
    """Free-text preferences set explicitly by the user (not necessarily tags)."""

    user_id: str
    preferences: List[str] = Field(default_factory=list)


def ensure_history(
    items: List[Union[Dict, "ReadingHistoryEntry"]],
) -> List["ReadingHistoryEntry"]:
    """Convert list of dicts or ReadingHistoryEntries to list of models for the pipeline."""
    return [
        ReadingHistoryEntry.model_validate(h) if isinstance(h, dict) else h
        for h in items
    ]


def read_blog_ids(history: List[ReadingHistoryEntry]) -> List[str]:
    """Blog ids in history, first read first, without duplicates."""
    seen = set()
    ids = []
    for entry in history:
        if entry.blog_id not in seen:
            seen.add(entry.blog_id)
            ids.append(entry.blog_id)
    return ids
