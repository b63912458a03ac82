"""
Blog store: in-memory blog records with cached fingerprints.

Stands in for the document store. The fingerprint is computed when a blog is
created and recomputed on update only when its content text changes.
Optionally seeded from a JSON file ({"blogs": [...]} or a bare list).
"""

import json
import logging
import threading
import uuid
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Tuple, Union

from recommender import (
    Author,
    BlogDocument,
    DEFAULT_CONFIG,
    Fingerprint,
    RankingConfig,
    build_fingerprint,
)
from recommender.utils import utcnow

logger = logging.getLogger(__name__)


class BlogNotFoundError(KeyError):
    """No blog with the given id."""


class InMemoryBlogStore:
    """Blog records keyed by id, newest-first listing, likes tracked per user."""

    def __init__(self, config: RankingConfig = DEFAULT_CONFIG):
        self._config = config
        self._blogs: Dict[str, BlogDocument] = {}
        self._likes: Dict[str, Set[str]] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_json(
        cls,
        path: Union[Path, str],
        config: RankingConfig = DEFAULT_CONFIG,
    ) -> "InMemoryBlogStore":
        store = cls(config)
        with open(path) as f:
            data = json.load(f)
        items = data.get("blogs", []) if isinstance(data, dict) else data
        store.load(items)
        logger.info("[blog_store] SEEDED path=%s blogs=%s", path, len(store))
        return store

    def load(self, items: Iterable[dict]) -> None:
        """
        Insert raw blog dicts; missing fingerprints are computed.

        A "likes" list of user ids is tracked by the store and sets like_count;
        without one, a seeded like_count is kept.
        """
        with self._lock:
            for item in items:
                item = dict(item)
                likes = item.pop("likes", None)
                blog = BlogDocument.model_validate(item)
                if blog.fingerprint is None:
                    blog.fingerprint = self._fingerprint(blog.id, blog.content, blog.tags)
                self._blogs[blog.id] = blog
                self._likes[blog.id] = set(likes or [])
                if likes is not None:
                    blog.like_count = len(self._likes[blog.id])

    def __len__(self) -> int:
        return len(self._blogs)

    def _fingerprint(self, blog_id: str, content: str, tags: List[str]) -> Optional[Fingerprint]:
        """Fingerprint, or None (built on demand later) when the builder fails."""
        try:
            return build_fingerprint(content, tags, self._config)
        except Exception:
            logger.warning(
                "[blog_store] FINGERPRINT_UNAVAILABLE blog_id=%s", blog_id, exc_info=True
            )
            return None

    def get(self, blog_id: str) -> BlogDocument:
        blog = self._blogs.get(blog_id)
        if blog is None:
            raise BlogNotFoundError(blog_id)
        return blog

    def find(self, blog_id: str) -> Optional[BlogDocument]:
        return self._blogs.get(blog_id)

    def all(self) -> List[BlogDocument]:
        return list(self._blogs.values())

    def count_by_author(self, author_id: str) -> int:
        return sum(1 for b in self._blogs.values() if b.author_id == author_id)

    def list_blogs(
        self,
        tag: Optional[str] = None,
        author_id: Optional[str] = None,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[BlogDocument], int]:
        """
        Filtered page of blogs, newest first, plus the total match count.

        tag matches exactly; search is a case-insensitive substring of title,
        content, or any tag.
        """
        blogs = self.all()
        if tag:
            blogs = [b for b in blogs if tag in b.tags]
        if author_id:
            blogs = [b for b in blogs if b.author_id == author_id]
        if search:
            needle = search.lower()
            blogs = [
                b for b in blogs
                if needle in b.title.lower()
                or needle in b.content.lower()
                or any(needle in t.lower() for t in b.tags)
            ]
        blogs.sort(key=lambda b: b.created_at_utc(), reverse=True)
        start = (max(page, 1) - 1) * limit
        return blogs[start : start + limit], len(blogs)

    def create(
        self,
        title: str,
        content: str,
        tags: List[str],
        author: Optional[Author] = None,
    ) -> BlogDocument:
        blog_id = uuid.uuid4().hex[:24]
        now = utcnow()
        blog = BlogDocument(
            id=blog_id,
            title=title,
            content=content,
            tags=list(tags),
            author=author,
            created_at=now,
            updated_at=now,
            fingerprint=self._fingerprint(blog_id, content, tags),
        )
        with self._lock:
            self._blogs[blog_id] = blog
            self._likes[blog_id] = set()
        logger.info("[blog_store] BLOG_CREATED blog_id=%s keywords=%s", blog_id, len(blog.fingerprint or {}))
        return blog

    def update(
        self,
        blog_id: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
        tags: Optional[List[str]] = None,
    ) -> BlogDocument:
        """
        Apply the given fields. The fingerprint is recomputed (from the new
        content and tags) only when the content text changes.
        """
        with self._lock:
            blog = self.get(blog_id)
            updates = {"updated_at": utcnow()}
            if title is not None:
                updates["title"] = title
            if tags is not None:
                updates["tags"] = list(tags)
            if content is not None and content != blog.content:
                updates["content"] = content
                updates["fingerprint"] = self._fingerprint(
                    blog_id, content, updates.get("tags", blog.tags)
                )
                logger.info("[blog_store] FINGERPRINT_RECOMPUTED blog_id=%s", blog_id)
            updated = blog.model_copy(update=updates)
            self._blogs[blog_id] = updated
        return updated

    def delete(self, blog_id: str) -> None:
        with self._lock:
            self.get(blog_id)
            del self._blogs[blog_id]
            self._likes.pop(blog_id, None)
        logger.info("[blog_store] BLOG_DELETED blog_id=%s", blog_id)

    def record_read(self, blog_id: str) -> BlogDocument:
        """Increment the read counter and return the blog."""
        with self._lock:
            blog = self.get(blog_id)
            blog.read_count += 1
        return blog

    def toggle_like(self, blog_id: str, user_id: str) -> Tuple[bool, int]:
        """Like or unlike; returns (liked_now, like_count)."""
        with self._lock:
            blog = self.get(blog_id)
            likes = self._likes.setdefault(blog_id, set())
            if user_id in likes:
                likes.discard(user_id)
                blog.like_count = max(blog.like_count - 1, 0)
                liked = False
            else:
                likes.add(user_id)
                blog.like_count += 1
                liked = True
        return liked, blog.like_count
