"""
Tag term: how many of the user's preferences show up in a blog's tags.
"""

from typing import List, Optional


def tag_overlap(preferences: List[str], tags: List[str]) -> Optional[float]:
    """
    Share of preferences that are a case-insensitive substring of at least one tag.

    Returns None when either side is empty; the term does not apply then.
    """
    if not preferences or not tags:
        return None
    lowered_tags = [tag.lower() for tag in tags]
    matched = sum(
        1 for pref in preferences
        if any(pref.lower() in tag for tag in lowered_tags)
    )
    return matched / len(preferences)
