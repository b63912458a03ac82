"""
Ranking configuration: fingerprint, blended scoring, excerpt, and selector parameters.

RankingConfig defaults are defined here. The server may pass a dict
(e.g. from a ranking config JSON file); from_dict() merges it with these defaults.
"""

from typing import Dict, Optional

from pydantic import BaseModel, model_validator


class RankingConfig(BaseModel):
    """Configuration for the recommendation engine."""

    # -------------------------------------------------------------------------
    # Fingerprint
    # -------------------------------------------------------------------------

    # Only tokens strictly longer than this many characters become keywords.
    min_keyword_length: int = 3

    # Positional cap: the first N qualifying tokens of the text are counted.
    # Tags are appended after the cap and are never truncated.
    max_keywords: int = 50

    # -------------------------------------------------------------------------
    # Blended Scoring Weights (must sum to 1.0)
    # score = weight_content * content + weight_tags * tags + weight_history * history
    # Skipped terms contribute 0; weights are not renormalized.
    # -------------------------------------------------------------------------

    # Preference fingerprint vs blog fingerprint.
    weight_content: float = 0.4
    # Share of preferences found as a substring of one of the blog's tags.
    weight_tags: float = 0.3
    # Average similarity between the blog and the user's reading history.
    weight_history: float = 0.3

    # Upper bound applied to the blended score.
    score_cap: float = 1.0

    # -------------------------------------------------------------------------
    # Excerpts
    # -------------------------------------------------------------------------

    # Characters of content kept on recommendation and trending cards.
    excerpt_length: int = 200
    # Characters of content kept on related-blog cards.
    related_excerpt_length: int = 150
    # Appended to every excerpt, truncated or not.
    excerpt_marker: str = "..."

    # -------------------------------------------------------------------------
    # Selectors
    # -------------------------------------------------------------------------

    # Recommendation/trending page size when the caller gives none.
    default_limit: int = 10
    # Trending window in days.
    trending_days: int = 7
    # Number of related blogs shown on a blog page.
    related_limit: int = 3

    @model_validator(mode="after")
    def weights_sum_to_one(self):
        weights = (self.weight_content, self.weight_tags, self.weight_history)
        if any(w < 0 for w in weights):
            raise ValueError(f"Scoring weights must be non-negative, got {weights}")
        total = sum(weights)
        if abs(total - 1.0) > 0.01:
            raise ValueError(f"Scoring weights must sum to 1.0, got {total}")
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "RankingConfig":
        """Create config from dictionary (e.g., loaded from JSON)."""
        flat = {}
        if "weights" in config_dict:
            w = config_dict["weights"]
            for key in ("content", "tags", "history"):
                if key in w:
                    flat[f"weight_{key}"] = w[key]
        if "fingerprint" in config_dict:
            fp = config_dict["fingerprint"]
            if "max_keywords" in fp:
                flat["max_keywords"] = fp["max_keywords"]
            if "min_keyword_length" in fp:
                flat["min_keyword_length"] = fp["min_keyword_length"]
        if "excerpt" in config_dict:
            ex = config_dict["excerpt"]
            flat["excerpt_length"] = ex.get("length", 200)
            flat["related_excerpt_length"] = ex.get("related_length", 150)
            flat["excerpt_marker"] = ex.get("marker", "...")
        if "selectors" in config_dict:
            flat.update(config_dict["selectors"])
        # Flat keys are accepted as-is
        flat.update({k: v for k, v in config_dict.items() if not isinstance(v, dict)})
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_CONFIG = RankingConfig()


def resolve_config(config: Optional["RankingConfig"]) -> "RankingConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
