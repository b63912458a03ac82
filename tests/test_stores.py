#!/usr/bin/env python3
"""
In-Memory Store Tests

Seeding, like tracking, and author counts on the blog store.

Run:
----
    pytest tests/test_stores.py -v
"""

import json

from server.services import InMemoryBlogStore, InMemoryUserStore


class TestSeededLikes:

    def test_likes_list_owned_by_store(self):
        store = InMemoryBlogStore()
        store.load([{"id": "b1", "content": "soup", "likes": ["bob", "cy"]}])
        blog = store.get("b1")
        assert blog.like_count == 2
        assert "likes" not in blog.model_dump()

        assert store.toggle_like("b1", "alice") == (True, 3)
        assert store.toggle_like("b1", "bob") == (False, 2)
        assert "likes" not in store.get("b1").model_dump()

    def test_seeded_like_count_kept_without_likes_list(self):
        store = InMemoryBlogStore()
        store.load([{"id": "b1", "content": "soup", "like_count": 7}])
        assert store.get("b1").like_count == 7
        assert store.toggle_like("b1", "alice") == (True, 8)
        assert store.toggle_like("b1", "alice") == (False, 7)

    def test_seed_items_not_mutated(self):
        item = {"id": "b1", "content": "soup", "likes": ["bob"]}
        InMemoryBlogStore().load([item])
        assert item["likes"] == ["bob"]


class TestBlogStore:

    def test_count_by_author(self):
        store = InMemoryBlogStore()
        store.load([
            {"id": "b1", "author": {"id": "ada", "name": "Ada"}},
            {"id": "b2", "author": {"id": "ada", "name": "Ada"}},
            {"id": "b3", "author": {"id": "bob", "name": "Bob"}},
            {"id": "b4"},
        ])
        assert store.count_by_author("ada") == 2
        assert store.count_by_author("nobody") == 0

    def test_from_json(self, tmp_path):
        path = tmp_path / "blogs.json"
        path.write_text(json.dumps({"blogs": [{"id": "b1", "content": "Python generators"}]}))
        store = InMemoryBlogStore.from_json(path)
        assert store.get("b1").fingerprint == {"python": 1, "generators": 1}


class TestUserStore:

    def test_find_by_name_case_insensitive(self):
        store = InMemoryUserStore()
        store.create("Dana", user_id="d1")
        assert store.find_by_name("dana")["user_id"] == "d1"
        assert store.find_by_name("eve") is None

    def test_seeded_history_deduplicated(self, tmp_path):
        path = tmp_path / "users.json"
        path.write_text(json.dumps({"users": [{
            "user_id": "u1",
            "name": "Una",
            "preferences": ["go"],
            "reading_history": [{"blog_id": "b1"}, {"blog_id": "b1"}, {"blog_id": "b2"}],
        }]}))
        store = InMemoryUserStore.from_json(path)
        assert store.profile("u1").preferences == ["go"]
        assert [h["blog_id"] for h in store.get("u1")["reading_history"]] == ["b1", "b2"]
