"""Application state: ranking config and the blog/user stores."""

import logging
from typing import Optional

from recommender import RankingConfig

from .config import ServerConfig, get_config
from .services import InMemoryBlogStore, InMemoryUserStore

logger = logging.getLogger(__name__)


class AppState:
    """Global application state."""

    def __init__(self, config: ServerConfig):
        self.config = config
        self.ranking_config: RankingConfig = config.load_ranking_config()

        # Stores: seeded from JSON when paths are configured, else empty
        if config.blogs_json_path:
            self.blog_store = InMemoryBlogStore.from_json(config.blogs_json_path, self.ranking_config)
        else:
            self.blog_store = InMemoryBlogStore(self.ranking_config)
        if config.users_json_path:
            self.user_store = InMemoryUserStore.from_json(config.users_json_path)
        else:
            self.user_store = InMemoryUserStore()

        logger.info(
            "[startup] State ready: blogs=%s users=%s",
            len(self.blog_store),
            len(self.user_store),
        )


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        config = get_config()
        _state = AppState(config)
    return _state


def reset_state(state: Optional[AppState] = None) -> None:
    """Replace (or drop) the global state; used by tests and config reloads."""
    global _state
    _state = state
