"""Pydantic request/response models for the API."""

from .blogs import (
    BlogListResponse,
    BlogResponse,
    BlogStatsResponse,
    CreateBlogRequest,
    LikeRequest,
    LikeResponse,
    RelatedBlogsResponse,
    UpdateBlogRequest,
)
from .fingerprints import (
    FingerprintRequest,
    FingerprintResponse,
    SimilarityRequest,
    SimilarityResponse,
)
from .recommendations import (
    PreferencesResponse,
    RecommendationsResponse,
    TrendingResponse,
    UpdatePreferencesRequest,
)
from .users import UserEnterRequest, UserResponse

__all__ = [
    "BlogListResponse",
    "BlogResponse",
    "BlogStatsResponse",
    "CreateBlogRequest",
    "FingerprintRequest",
    "FingerprintResponse",
    "LikeRequest",
    "LikeResponse",
    "PreferencesResponse",
    "RecommendationsResponse",
    "RelatedBlogsResponse",
    "SimilarityRequest",
    "SimilarityResponse",
    "TrendingResponse",
    "UpdateBlogRequest",
    "UpdatePreferencesRequest",
    "UserEnterRequest",
    "UserResponse",
]
