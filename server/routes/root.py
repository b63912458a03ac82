"""Root and health endpoints."""

from fastapi import APIRouter

from recommender import STRATEGY_VERSION

from ..state import get_state

router = APIRouter()


@router.get("/")
def root():
    state = get_state()
    config = state.ranking_config
    return {
        "name": "Blog Recommendation API",
        "version": "1.0.0",
        "status": "ok",
        "current": {
            "blogs": len(state.blog_store),
            "users": len(state.user_store),
            "fingerprint_strategy": STRATEGY_VERSION,
        },
        "scoring_weights": {
            "content": config.weight_content,
            "tags": config.weight_tags,
            "history": config.weight_history,
        },
        "endpoints": {
            "blogs": ["/api/blogs", "/api/blogs/stats", "/api/blogs/{id}", "/api/blogs/{id}/like", "/api/blogs/{id}/related"],
            "recommendations": [
                "/api/recommendations",
                "/api/recommendations/preferences",
                "/api/recommendations/trending",
                "/api/recommendations/related/{blog_id}",
            ],
            "fingerprints": ["/api/fingerprints", "/api/fingerprints/similarity"],
            "users": ["/api/users/enter", "/api/users/{user_id}"],
        },
    }
