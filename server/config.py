"""
Server Configuration

Host, port, log level and seed-data paths, read from the environment
(a project-root .env is applied first via python-dotenv).
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from recommender import RankingConfig, DEFAULT_CONFIG

# Single .env at the project root
root_env = Path(__file__).resolve().parent.parent / ".env"
if root_env.exists():
    load_dotenv(root_env)


@dataclass
class ServerConfig:
    """Settings for the blog recommendation server."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Seed data: JSON files loaded into the in-memory stores at startup
    blogs_json_path: Optional[Path] = None
    users_json_path: Optional[Path] = None

    # Optional JSON file with ranking parameters (see RankingConfig.from_dict)
    ranking_config_path: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Build from HOST, PORT, LOG_LEVEL and the *_PATH variables; relative paths resolve against the project root."""
        base_dir = Path(__file__).parent.parent

        def _path_env(key: str) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return None
            p = Path(v)
            return p if p.is_absolute() else (base_dir / p).resolve()

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            blogs_json_path=_path_env("BLOGS_JSON_PATH"),
            users_json_path=_path_env("USERS_JSON_PATH"),
            ranking_config_path=_path_env("RANKING_CONFIG_PATH"),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """Check that every configured file exists; returns (ok, errors)."""
        errors = []

        for label, path in (
            ("Blogs JSON", self.blogs_json_path),
            ("Users JSON", self.users_json_path),
            ("Ranking config", self.ranking_config_path),
        ):
            if path is not None and not path.is_file():
                errors.append(f"{label} file not found: {path}")

        return len(errors) == 0, errors

    def load_ranking_config(self) -> RankingConfig:
        """RankingConfig from ranking_config_path, or the defaults when unset."""
        if self.ranking_config_path is None:
            return DEFAULT_CONFIG
        with open(self.ranking_config_path) as f:
            return RankingConfig.from_dict(json.load(f))


_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Process-wide ServerConfig, loaded from the environment on first use."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Drop the cached config and read the environment again."""
    global _config
    _config = None
    return get_config()
