"""Shared utilities for similarity and time-window scoring."""

from .scores import clamp_score, utcnow, window_start
from .similarity import similarity

__all__ = [
    "clamp_score",
    "similarity",
    "utcnow",
    "window_start",
]
