"""Ad-hoc fingerprint and similarity models."""

from typing import Dict, List

from pydantic import BaseModel


class FingerprintRequest(BaseModel):
    text: str = ""
    tags: List[str] = []


class FingerprintResponse(BaseModel):
    fingerprint: Dict[str, int]
    keyword_count: int
    strategy_version: str


class SimilarityRequest(BaseModel):
    a: Dict[str, int]
    b: Dict[str, int]


class SimilarityResponse(BaseModel):
    score: float
    common_keywords: List[str]
