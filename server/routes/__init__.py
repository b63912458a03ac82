"""Register all route modules on the FastAPI app."""

from fastapi import FastAPI

from .root import router as root_router
from .blogs import router as blogs_router
from .recommendations import router as recommendations_router
from .fingerprints import router as fingerprints_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Attach all API routers to the app."""
    app.include_router(root_router)
    app.include_router(blogs_router, prefix="/api/blogs", tags=["blogs"])
    app.include_router(recommendations_router, prefix="/api/recommendations", tags=["recommendations"])
    app.include_router(fingerprints_router, prefix="/api/fingerprints", tags=["fingerprints"])
    app.include_router(users_router, prefix="/api/users", tags=["users"])
