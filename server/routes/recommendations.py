"""Recommendation endpoints: personalized list, preferences, trending, related."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from recommender import select_related, select_trending

from ..models import (
    PreferencesResponse,
    RecommendationsResponse,
    RelatedBlogsResponse,
    TrendingResponse,
    UpdatePreferencesRequest,
)
from ..services import recommend_for_user
from ..state import get_state

router = APIRouter()


@router.get("", response_model=RecommendationsResponse)
def get_recommendations(
    user_id: str,
    limit: Optional[int] = Query(None, ge=0),
):
    """
    Personalized recommendations for a user.

    Blogs already in the user's reading history are never recommended.
    """
    state = get_state()
    recommendations, preferences, history = recommend_for_user(
        state.blog_store, state.user_store, user_id, state.ranking_config, limit
    )
    return RecommendationsResponse(
        recommendations=recommendations,
        user_preferences=preferences,
        reading_history_count=len(history),
    )


@router.put("/preferences", response_model=PreferencesResponse)
def update_preferences(request: UpdatePreferencesRequest):
    """Replace a user's preferences; the body must carry a list of strings."""
    if not isinstance(request.preferences, list) or not all(
        isinstance(p, str) for p in request.preferences
    ):
        raise HTTPException(status_code=400, detail="Preferences must be an array")
    state = get_state()
    user = state.user_store.set_preferences(request.user_id, request.preferences)
    return PreferencesResponse(
        message="Preferences updated successfully",
        user_id=user["user_id"],
        preferences=user["preferences"],
    )


@router.get("/trending", response_model=TrendingResponse)
def get_trending(
    limit: Optional[int] = Query(None, ge=0),
    days: Optional[int] = Query(None, ge=0),
):
    """Most-read (then most-liked) blogs created within the last `days` days."""
    state = get_state()
    trending = select_trending(
        state.blog_store.all(), since_days=days, limit=limit, config=state.ranking_config
    )
    return TrendingResponse(trending_blogs=trending)


@router.get("/related/{blog_id}", response_model=RelatedBlogsResponse)
def get_related(blog_id: str, limit: int = Query(5, ge=0)):
    """Blogs sharing a tag or author with blog_id, backfilled with the newest ones."""
    state = get_state()
    reference = state.blog_store.get(blog_id)
    related = select_related(
        reference, state.blog_store.all(), limit=limit, config=state.ranking_config
    )
    return RelatedBlogsResponse(related_blogs=related)
