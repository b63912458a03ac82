"""
Content term: similarity of the user's preference fingerprint to a blog fingerprint.
"""

from ...models.blog import Fingerprint
from ...utils.similarity import similarity


def content_similarity(preference_fingerprint: Fingerprint, blog_fingerprint: Fingerprint) -> float:
    """Similarity in [0, 1]; 0.0 when the user has no usable preferences."""
    if not preference_fingerprint:
        return 0.0
    return similarity(preference_fingerprint, blog_fingerprint)
