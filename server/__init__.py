"""
Blog Recommendation API Server

Usage: uvicorn server:app --reload --port 8000
"""

from .app import app
from .config import ServerConfig, get_config, reload_config
from .services import InMemoryBlogStore, InMemoryUserStore

__all__ = [
    "app",
    "ServerConfig",
    "get_config",
    "reload_config",
    "InMemoryBlogStore",
    "InMemoryUserStore",
]
