"""
Fingerprint Builder

This module defines HOW blog text and tags become a comparable representation.
Changes to this module require recomputing every cached fingerprint
(bump STRATEGY_VERSION).

The fingerprint formula:
    lowercase -> strip punctuation -> split on whitespace
    -> keep tokens longer than min_keyword_length
    -> keep the first max_keywords of them (by position, before counting)
    -> append every tag lowercased
    -> count occurrences

This is used for BOTH:
- Blog fingerprints (computed on create/update, cached on the blog)
- Preference fingerprints (computed at request time from the user's preferences)
"""

import re
from collections import Counter
from typing import Iterable, List, Optional

from ..models.blog import BlogDocument, Fingerprint
from ..models.config import RankingConfig, DEFAULT_CONFIG

# IMPORTANT: Bump this version when the fingerprint logic changes!
STRATEGY_VERSION = "1.0"

_NON_WORD = re.compile(r"[^\w\s]")


def extract_keywords(text: str, config: RankingConfig = DEFAULT_CONFIG) -> List[str]:
    """
    Qualifying tokens of text in original order, capped at config.max_keywords.

    The cap is positional: long texts lose their tail, not their rarest words.
    """
    if not text:
        return []
    tokens = _NON_WORD.sub("", text.lower()).split()
    keywords = [t for t in tokens if len(t) > config.min_keyword_length]
    return keywords[: config.max_keywords]


def build_fingerprint(
    text: str,
    tags: Optional[Iterable[str]] = None,
    config: RankingConfig = DEFAULT_CONFIG,
) -> Fingerprint:
    """
    Build a keyword-frequency fingerprint from text and tags.

    Tags are lowercased and each adds 1 to its count; they are not length
    filtered or truncated. Empty text and no tags give an empty fingerprint.

    Args:
        text: Free text (blog content or joined preferences)
        tags: Optional tags; order does not matter

    Returns:
        Mapping of keyword to occurrence count (every count >= 1)
    """
    keywords = extract_keywords(text, config)
    keywords.extend(tag.lower() for tag in (tags or []))
    return dict(Counter(keywords))


def build_preference_fingerprint(
    preferences: Iterable[str],
    config: RankingConfig = DEFAULT_CONFIG,
) -> Fingerprint:
    """Fingerprint of a user's preferences, joined as pseudo-text (no tags)."""
    return build_fingerprint(" ".join(preferences), config=config)


def fingerprint_for(blog: BlogDocument, config: RankingConfig = DEFAULT_CONFIG) -> Fingerprint:
    """Cached fingerprint of a blog, built from content and tags when absent."""
    if blog.fingerprint is not None:
        return blog.fingerprint
    return build_fingerprint(blog.content, blog.tags, config)
