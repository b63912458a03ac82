"""
Similarity utilities: frequency-agreement similarity between fingerprints.
"""

import numpy as np

from ..models.blog import Fingerprint


def similarity(a: Fingerprint, b: Fingerprint) -> float:
    """
    Mean per-keyword overlap ratio over the keywords both fingerprints share.

    Each shared keyword scores min(a[k], b[k]) / max(a[k], b[k]); keywords
    present on only one side are ignored. No shared keywords gives 0.0.
    Symmetric, and 1.0 for any non-empty fingerprint against itself.
    """
    # Sorted so both argument orders sum in the same order
    common = sorted(a.keys() & b.keys())
    if not common:
        return 0.0
    left = np.array([a[k] for k in common], dtype=float)
    right = np.array([b[k] for k in common], dtype=float)
    ratios = np.minimum(left, right) / np.maximum(left, right)
    return float(np.mean(ratios))
