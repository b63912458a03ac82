"""
Blog Recommendation API: FastAPI app factory.

Use: uvicorn server.app:app
Or:  from server import app
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_config
from .routes import register_routes
from .services import BlogNotFoundError, UserNotFoundError
from .state import get_state

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build FastAPI app with CORS, routes, error handlers, and startup."""
    app = FastAPI(
        title="Blog Recommendation API",
        description="Keyword-fingerprint recommendations, trending and related blogs",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_routes(app)

    @app.exception_handler(BlogNotFoundError)
    async def _blog_not_found(request: Request, exc: BlogNotFoundError):
        return JSONResponse(status_code=404, content={"detail": "Blog post not found"})

    @app.exception_handler(UserNotFoundError)
    async def _user_not_found(request: Request, exc: UserNotFoundError):
        return JSONResponse(status_code=404, content={"detail": "User not found"})

    @app.on_event("startup")
    def _startup():
        config = get_config()
        logging.basicConfig(
            level=config.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        ok, errors = config.validate()
        for error in errors:
            logger.warning("[startup] CONFIG_INVALID %s", error)
        state = get_state()
        logger.info(
            "[startup] Blog Recommendation API starting (blogs=%s, users=%s, valid_config=%s)",
            len(state.blog_store),
            len(state.user_store),
            ok,
        )

    return app


app = create_app()
