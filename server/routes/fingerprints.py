"""Ad-hoc fingerprint and similarity endpoints."""

from fastapi import APIRouter

from recommender import STRATEGY_VERSION, build_fingerprint, similarity

from ..models import (
    FingerprintRequest,
    FingerprintResponse,
    SimilarityRequest,
    SimilarityResponse,
)
from ..state import get_state

router = APIRouter()


@router.post("", response_model=FingerprintResponse)
def create_fingerprint(request: FingerprintRequest):
    state = get_state()
    fingerprint = build_fingerprint(request.text, request.tags, state.ranking_config)
    return FingerprintResponse(
        fingerprint=fingerprint,
        keyword_count=len(fingerprint),
        strategy_version=STRATEGY_VERSION,
    )


@router.post("/similarity", response_model=SimilarityResponse)
def compare_fingerprints(request: SimilarityRequest):
    return SimilarityResponse(
        score=similarity(request.a, request.b),
        common_keywords=sorted(request.a.keys() & request.b.keys()),
    )
