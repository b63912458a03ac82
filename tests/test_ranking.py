#!/usr/bin/env python3
"""
Recommendation Ranker Tests

Tests the blended score and the ordering/truncation of recommend().

Scoring (defaults):
-------------------
- Content (0.4): preference fingerprint vs blog fingerprint
- Tags (0.3): share of preferences found in a blog tag (case-insensitive substring);
  only when both preferences and tags are non-empty
- History (0.3): mean similarity to read blogs (missing blogs count as 0);
  only when history is non-empty
- Skipped weights are not renormalized; the sum is capped at 1.0

Run:
----
    pytest tests/test_ranking.py -v
"""

import logging

import pytest

from recommender import RankingConfig, exclude_read, rank_candidates, recommend
from recommender.stages.ranking import make_excerpt
from recommender.stages.ranking.tags import tag_overlap

COOKING_TEXT = "I love cooking. Cooking is fun; cooking daily, cooking weekly, cooking always!"


class TestEmptySignals:
    """No preferences and no history: nothing fires."""

    def test_all_scores_zero_and_order_preserved(self, make_blog):
        candidates = [
            make_blog(f"b{i}", content=f"post number {i} about python", tags=["python"])
            for i in range(5)
        ]
        entries = recommend([], candidates, [], limit=10)
        assert [e.id for e in entries] == ["b0", "b1", "b2", "b3", "b4"]
        assert all(e.score == 0 for e in entries)

    def test_empty_candidates(self):
        assert recommend(["python"], [], [], limit=5) == []


class TestOrderingAndLimit:

    @pytest.fixture
    def candidates(self, make_blog):
        tag_sets = [
            [], ["python"], ["python", "rust"], ["golang"], ["rust"],
            ["python", "rust", "golang"], ["cooking"], ["pythonic"], [], ["rust", "golang"],
        ]
        return [
            make_blog(f"b{i}", content="some general programming content", tags=tags)
            for i, tags in enumerate(tag_sets)
        ]

    def test_truncates_to_limit(self, candidates):
        entries = recommend(["python", "rust", "golang"], candidates, [], limit=3)
        assert len(entries) == 3

    def test_descending_scores(self, candidates):
        entries = recommend(["python", "rust", "golang"], candidates, [], limit=3)
        scores = [e.score for e in entries]
        assert scores == sorted(scores, reverse=True)
        assert entries[0].id == "b5"

    def test_limit_matches_full_ranking_prefix(self, candidates):
        prefs = ["python", "rust", "golang"]
        full = [s.blog.id for s in rank_candidates(prefs, candidates, [])]
        assert [e.id for e in recommend(prefs, candidates, [], limit=3)] == full[:3]

    def test_ties_keep_input_order(self, candidates):
        entries = recommend(["python"], candidates, [], limit=10)
        # b1, b2, b5 and b7 ("pythonic") all match the single preference
        assert [e.id for e in entries[:4]] == ["b1", "b2", "b5", "b7"]

    def test_default_limit_from_config(self, candidates):
        config = RankingConfig(default_limit=4)
        assert len(recommend(["python"], candidates, [], config=config)) == 4

    def test_zero_limit(self, candidates):
        assert recommend(["python"], candidates, [], limit=0) == []


class TestBlendedScore:

    def test_cooking_scenario(self, make_blog):
        blog = make_blog("b1", content=COOKING_TEXT, tags=["Cooking", "Recipes"])
        [scored] = rank_candidates(["cooking"], [blog], [])
        assert scored.content_score > 0
        assert scored.tag_score == 1.0
        # cooking appears 5 times in the text and once as a tag -> 1/6
        assert scored.content_score == pytest.approx(1 / 6)
        assert scored.final_score == pytest.approx(0.4 / 6 + 0.3)
        assert scored.final_score <= 1.0

    def test_tag_term_skipped_without_tags(self, make_blog):
        blog = make_blog("b1", content=COOKING_TEXT)
        [scored] = rank_candidates(["cooking"], [blog], [])
        assert scored.tag_score == 0.0
        assert scored.final_score == pytest.approx(0.4 * scored.content_score)

    def test_history_missing_blogs_stay_in_denominator(self, make_blog, read_entry):
        read = make_blog("r1", content="rust ownership borrowing lifetimes", tags=["rust"])
        candidate = make_blog("c1", content="rust ownership borrowing lifetimes", tags=["rust"])
        history = [read_entry(read), read_entry(blog_id="deleted")]
        [scored] = rank_candidates([], [candidate], history)
        assert scored.history_score == pytest.approx(0.5)
        assert scored.final_score == pytest.approx(0.3 * 0.5)

    def test_history_entry_without_content_counts_zero(self, make_blog, read_entry):
        empty = make_blog("r0", content="")
        read = make_blog("r1", content="kubernetes clusters", tags=["devops"])
        candidate = make_blog("c1", content="kubernetes clusters", tags=["devops"])
        [scored] = rank_candidates([], [candidate], [read_entry(empty), read_entry(read)])
        assert scored.history_score == pytest.approx(0.5)

    def test_weights_not_renormalized(self, make_blog, read_entry):
        read = make_blog("r1", content="kubernetes clusters")
        candidate = make_blog("c1", content="kubernetes clusters")
        [scored] = rank_candidates([], [candidate], [read_entry(read)])
        assert scored.history_score == 1.0
        assert scored.final_score == pytest.approx(0.3)

    def test_score_capped(self, make_blog):
        blog = make_blog("b1", content=COOKING_TEXT, tags=["Cooking"])
        [scored] = rank_candidates(["cooking"], [blog], [], RankingConfig(score_cap=0.2))
        assert scored.final_score == 0.2

    def test_uses_cached_fingerprint(self, make_blog):
        blog = make_blog("b1", content="nothing relevant here", fingerprint={"cooking": 1})
        [scored] = rank_candidates(["cooking"], [blog], [])
        assert scored.content_score == 1.0


class TestTagOverlap:

    def test_case_insensitive_substring(self):
        assert tag_overlap(["cook"], ["Cooking"]) == 1.0

    def test_preference_longer_than_tag_does_not_match(self):
        assert tag_overlap(["Cooking"], ["cook"]) == 0.0

    def test_ratio_over_preferences(self):
        assert tag_overlap(["python", "rust", "golang", "java"], ["Python", "Rust"]) == 0.5

    @pytest.mark.parametrize("prefs,tags", [([], ["python"]), (["python"], [])])
    def test_not_applicable(self, prefs, tags):
        assert tag_overlap(prefs, tags) is None


class TestErrorIsolation:

    def test_failing_candidate_dropped(self, make_blog, caplog):
        good = make_blog("good", content="python tips", tags=["python"])
        bad = make_blog("bad", content="python tricks")
        bad.fingerprint = {"python": "lots"}
        with caplog.at_level(logging.WARNING):
            entries = recommend(["python"], [bad, good], [], limit=10)
        assert [e.id for e in entries] == ["good"]
        assert "CANDIDATE_SCORING_FAILED" in caplog.text


class TestEntries:

    def test_excerpt_truncated(self, make_blog):
        blog = make_blog("b1", content="x" * 300)
        [entry] = recommend([], [blog], [], limit=1)
        assert entry.excerpt == "x" * 200 + "..."

    def test_excerpt_marker_always_appended(self):
        assert make_excerpt("short", 200) == "short..."

    def test_entry_fields(self, make_blog):
        blog = make_blog(
            "b1", content="python", tags=["python"], author="ada", read_count=4, like_count=2
        )
        [entry] = recommend(["python"], [blog], [], limit=1)
        assert entry.id == "b1"
        assert entry.title == "Blog b1"
        assert entry.tags == ["python"]
        assert entry.author.id == "ada"
        assert entry.read_count == 4
        assert entry.like_count == 2
        assert entry.created_at == blog.created_at
        assert 0 < entry.score <= 1.0


class TestExcludeRead:

    def test_drops_read_blogs(self, make_blog, read_entry):
        blogs = [make_blog("b1"), make_blog("b2"), make_blog("b3")]
        history = [read_entry(blogs[1]), read_entry(blog_id="gone")]
        assert [b.id for b in exclude_read(blogs, history)] == ["b1", "b3"]


class TestRawInputs:

    def test_dicts_accepted(self):
        candidates = [
            {"id": "b1", "content": "python decorators", "tags": ["python"]},
            {"id": "b2", "content": "gardening tips", "tags": ["garden"]},
        ]
        history = [{"blog_id": "b9"}]
        entries = recommend(["python"], exclude_read(candidates, history), history, limit=5)
        assert [e.id for e in entries] == ["b1", "b2"]
