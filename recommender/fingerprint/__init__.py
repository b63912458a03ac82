"""Fingerprint strategy: build_fingerprint and version constant."""

from .builder import (
    STRATEGY_VERSION,
    build_fingerprint,
    build_preference_fingerprint,
    extract_keywords,
    fingerprint_for,
)

__all__ = [
    "STRATEGY_VERSION",
    "build_fingerprint",
    "build_preference_fingerprint",
    "extract_keywords",
    "fingerprint_for",
]
