"""
User store: in-memory users with preferences and reading history.

Reading history has set semantics on blog id: reading a blog twice keeps the
first entry. Optionally seeded from a JSON file ({"users": [...]} or a bare list).
"""

import json
import logging
import threading
import uuid
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Union

from recommender import ReadingHistoryEntry, UserPreferenceProfile
from recommender.utils import utcnow

from .blog_store import InMemoryBlogStore

logger = logging.getLogger(__name__)


class UserNotFoundError(KeyError):
    """No user with the given id."""


class InMemoryUserStore:
    """
    Users keyed by user_id.

    Each user dict holds: user_id, name, preferences (list of str),
    reading_history (list of {"blog_id", "read_at"}).
    """

    def __init__(self):
        self._users: Dict[str, Dict] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_json(cls, path: Union[Path, str]) -> "InMemoryUserStore":
        store = cls()
        with open(path) as f:
            data = json.load(f)
        users = data.get("users", []) if isinstance(data, dict) else data
        for u in users:
            uid = u.get("user_id") or u.get("id")
            if uid:
                store.create(
                    name=u.get("name") or u.get("display_name") or uid,
                    preferences=u.get("preferences") or [],
                    user_id=uid,
                    reading_history=u.get("reading_history") or [],
                )
        logger.info("[user_store] SEEDED path=%s users=%s", path, len(store))
        return store

    def __len__(self) -> int:
        return len(self._users)

    def get(self, user_id: str) -> Dict:
        user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def find_by_name(self, name: str) -> Optional[Dict]:
        """User whose name matches case-insensitively, or None."""
        wanted = name.strip().lower()
        for user in self._users.values():
            if user["name"].lower() == wanted:
                return user
        return None

    def create(
        self,
        name: str,
        preferences: Optional[List[str]] = None,
        user_id: Optional[str] = None,
        reading_history: Optional[List[Dict]] = None,
    ) -> Dict:
        name = name.strip()
        if not name:
            raise ValueError("name cannot be empty")
        uid = user_id or str(uuid.uuid4())[:12]
        user = {
            "user_id": uid,
            "name": name,
            "preferences": list(preferences or []),
            "reading_history": [],
        }
        with self._lock:
            self._users[uid] = user
        for entry in reading_history or []:
            self.add_to_history(uid, entry["blog_id"], entry.get("read_at"))
        return user

    def set_preferences(self, user_id: str, preferences: List[str]) -> Dict:
        with self._lock:
            user = self.get(user_id)
            user["preferences"] = list(preferences)
        logger.info("[user_store] PREFERENCES_UPDATED user_id=%s count=%s", user_id, len(preferences))
        return user

    def add_to_history(
        self,
        user_id: str,
        blog_id: str,
        read_at: Optional[Union[datetime, str]] = None,
    ) -> bool:
        """Append a read; returns False when the blog is already in the history."""
        with self._lock:
            user = self.get(user_id)
            history = user["reading_history"]
            if any(h["blog_id"] == blog_id for h in history):
                return False
            history.append({"blog_id": blog_id, "read_at": read_at or utcnow()})
        return True

    def profile(self, user_id: str) -> UserPreferenceProfile:
        user = self.get(user_id)
        return UserPreferenceProfile(user_id=user_id, preferences=user["preferences"])

    def history_entries(
        self,
        user_id: str,
        blogs: InMemoryBlogStore,
    ) -> List[ReadingHistoryEntry]:
        """Reading history with each blog resolved; deleted blogs resolve to None."""
        return [
            ReadingHistoryEntry(
                blog_id=h["blog_id"],
                blog=blogs.find(h["blog_id"]),
                read_at=h["read_at"],
            )
            for h in self.get(user_id)["reading_history"]
        ]
