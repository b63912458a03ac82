"""Shared fixtures: blog factory and a fixed clock."""

from datetime import datetime, timedelta, timezone

import pytest

from recommender import Author, BlogDocument, ReadingHistoryEntry

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_blog():
    """Factory: make_blog("b1", content=..., tags=[...], days_old=2, author="a1")."""

    def _make(
        blog_id,
        content="",
        tags=None,
        days_old=0,
        author=None,
        read_count=0,
        like_count=0,
        title=None,
        fingerprint=None,
    ):
        return BlogDocument(
            id=blog_id,
            title=title or f"Blog {blog_id}",
            content=content,
            tags=tags or [],
            author=Author(id=author, name=author.title()) if author else None,
            created_at=NOW - timedelta(days=days_old),
            read_count=read_count,
            like_count=like_count,
            fingerprint=fingerprint,
        )

    return _make


@pytest.fixture
def read_entry():
    """Factory: history entry for a blog (or a dangling id when blog is None)."""

    def _make(blog=None, blog_id=None):
        return ReadingHistoryEntry(
            blog_id=blog.id if blog is not None else blog_id,
            blog=blog,
            read_at=NOW,
        )

    return _make
