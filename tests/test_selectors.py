#!/usr/bin/env python3
"""
Trending and Related Selector Tests

Trending: created within the window, sorted by (read_count, like_count) desc.
Related: shares a tag or the author, newest first, backfilled with the newest
remaining blogs up to the requested count.

Run:
----
    pytest tests/test_selectors.py -v
"""

from datetime import timedelta

import pytest

from recommender import RankingConfig, select_related, select_trending
from recommender.stages import select_related_blogs, select_trending_blogs


class TestTrending:

    @pytest.fixture
    def blogs(self, make_blog):
        return [
            make_blog("old", days_old=10, read_count=999),
            make_blog("a", days_old=1, read_count=5, like_count=1),
            make_blog("b", days_old=2, read_count=9, like_count=0),
            make_blog("c", days_old=3, read_count=5, like_count=4),
            make_blog("d", days_old=6, read_count=5, like_count=1),
        ]

    def test_window_and_popularity_order(self, blogs, now):
        picked = select_trending_blogs(blogs, since_days=7, limit=10, now=now)
        assert [b.id for b in picked] == ["b", "c", "a", "d"]

    def test_full_ties_keep_input_order(self, blogs, now):
        picked = select_trending_blogs(blogs, since_days=7, limit=10, now=now)
        # a and d tie on (5, 1); a came first
        assert [b.id for b in picked].index("a") < [b.id for b in picked].index("d")

    def test_truncates(self, blogs, now):
        assert len(select_trending_blogs(blogs, since_days=7, limit=2, now=now)) == 2

    def test_window_boundary_inclusive(self, make_blog, now):
        edge = make_blog("edge", days_old=7)
        assert select_trending_blogs([edge], since_days=7, limit=5, now=now) == [edge]

    def test_naive_now_treated_as_utc(self, blogs, now):
        picked = select_trending_blogs(blogs, since_days=7, limit=10, now=now.replace(tzinfo=None))
        assert len(picked) == 4

    def test_empty_window(self, blogs, now):
        assert select_trending_blogs(blogs, since_days=0, limit=10, now=now + timedelta(days=1)) == []

    def test_cards_use_config_defaults(self, make_blog, now):
        blogs = [make_blog(f"b{i}", content="y" * 300, days_old=i) for i in range(6)]
        config = RankingConfig(trending_days=3, default_limit=10)
        cards = select_trending(blogs, now=now, config=config)
        assert [c.id for c in cards] == ["b0", "b1", "b2", "b3"]
        assert cards[0].excerpt == "y" * 200 + "..."


class TestRelated:

    @pytest.fixture
    def reference(self, make_blog):
        return make_blog("ref", tags=["Python", "web"], author="ada", days_old=0)

    def test_backfill_reaches_requested_count(self, make_blog, reference):
        candidates = [
            make_blog("tagged", tags=["python"], author="bob", days_old=30),
            make_blog("n1", tags=["rust"], author="cy", days_old=1),
            make_blog("n2", tags=["go"], author="dee", days_old=2),
            make_blog("n3", tags=[], author="eve", days_old=3),
            make_blog("n4", tags=["java"], author="fay", days_old=4),
        ]
        picked = select_related_blogs(reference, candidates, limit=3)
        assert [b.id for b in picked] == ["tagged", "n1", "n2"]

    def test_author_match_is_related(self, make_blog, reference):
        candidates = [
            make_blog("newest", tags=["misc"], author="zed", days_old=1),
            make_blog("same_author", tags=["misc"], author="ada", days_old=20),
        ]
        picked = select_related_blogs(reference, candidates, limit=1)
        assert [b.id for b in picked] == ["same_author"]

    def test_matches_sorted_newest_first(self, make_blog, reference):
        candidates = [
            make_blog("older", tags=["web"], days_old=9),
            make_blog("newer", tags=["python"], days_old=2),
            make_blog("middle", author="ada", days_old=5),
        ]
        picked = select_related_blogs(reference, candidates, limit=3)
        assert [b.id for b in picked] == ["newer", "middle", "older"]

    def test_reference_never_returned(self, make_blog, reference):
        candidates = [reference, make_blog("other", days_old=1)]
        picked = select_related_blogs(reference, candidates, limit=3)
        assert [b.id for b in picked] == ["other"]

    def test_no_duplicates_in_backfill(self, make_blog, reference):
        candidates = [make_blog(f"b{i}", tags=["python"] if i % 2 else [], days_old=i) for i in range(6)]
        picked = select_related_blogs(reference, candidates, limit=5)
        ids = [b.id for b in picked]
        assert len(ids) == len(set(ids)) == 5
        assert ids[:3] == ["b1", "b3", "b5"]

    def test_default_count_and_short_excerpt(self, make_blog, reference):
        candidates = [make_blog(f"b{i}", content="z" * 300, days_old=i) for i in range(5)]
        cards = select_related(reference, candidates)
        assert len(cards) == 3
        assert cards[0].excerpt == "z" * 150 + "..."

    def test_custom_limit(self, make_blog, reference):
        candidates = [make_blog(f"b{i}", days_old=i) for i in range(8)]
        assert len(select_related(reference, candidates, limit=5)) == 5

    def test_empty_candidates(self, reference):
        assert select_related(reference, []) == []
