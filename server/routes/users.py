"""User enter: resolve or create by display name (no password)."""

from fastapi import APIRouter

from ..models import UserEnterRequest, UserResponse
from ..state import get_state

router = APIRouter()


def _to_response(user: dict, created: bool = False) -> UserResponse:
    return UserResponse(
        user_id=user["user_id"],
        name=user["name"],
        preferences=user["preferences"],
        reading_history_count=len(user["reading_history"]),
        created=created,
    )


@router.post("/enter", response_model=UserResponse)
def user_enter(request: UserEnterRequest):
    """
    Return the user with this name, or create one with the given preferences.

    Names match case-insensitively; preferences are only applied on creation.
    """
    state = get_state()
    existing = state.user_store.find_by_name(request.name)
    if existing:
        return _to_response(existing)
    user = state.user_store.create(request.name, preferences=request.preferences)
    return _to_response(user, created=True)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: str):
    state = get_state()
    return _to_response(state.user_store.get(user_id))
