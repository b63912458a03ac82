"""
Blog model: typed representation of a blog post for the recommendation pipeline.

Used by the fingerprint builder, ranking, and selectors instead of raw dicts.
Built from store/API dicts via BlogDocument.model_validate(d).
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Fingerprint = Dict[str, int]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Author(BaseModel):
    """Populated author reference (id and display name)."""

    id: str
    name: Optional[str] = None


class BlogDocument(BaseModel):
    """
    Blog payload used across the engine.

    fingerprint is computed at creation and recomputed only when content
    changes; None means it was never computed and will be built on demand.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    title: str = ""
    content: str = ""
    tags: List[str] = Field(default_factory=list)
    author: Optional[Author] = None
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: Optional[datetime] = None
    read_count: int = 0
    like_count: int = 0
    fingerprint: Optional[Fingerprint] = None

    @property
    def author_id(self) -> Optional[str]:
        return self.author.id if self.author else None

    def created_at_utc(self) -> datetime:
        """created_at as an aware datetime (naive values are taken as UTC)."""
        if self.created_at.tzinfo is None:
            return self.created_at.replace(tzinfo=timezone.utc)
        return self.created_at


def ensure_blogs(blogs: List[Union[Dict[str, Any], "BlogDocument"]]) -> List["BlogDocument"]:
    """Convert list of dicts or BlogDocuments to list of BlogDocument models for use in the pipeline."""
    return [
        BlogDocument.model_validate(b) if isinstance(b, dict) else b
        for b in blogs
    ]
