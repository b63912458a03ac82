"""Recommendation request/response models."""

from typing import Any, List

from pydantic import BaseModel

from recommender import BlogSummary, RecommendationEntry


class RecommendationsResponse(BaseModel):
    recommendations: List[RecommendationEntry]
    user_preferences: List[str]
    reading_history_count: int


class UpdatePreferencesRequest(BaseModel):
    """Body for PUT preferences; the list check happens in the route (400, not 422)."""

    user_id: str
    preferences: Any = None


class PreferencesResponse(BaseModel):
    message: str
    user_id: str
    preferences: List[str]


class TrendingResponse(BaseModel):
    trending_blogs: List[BlogSummary]
