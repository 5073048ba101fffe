"""
Settings
Configuration management for the Pattern Library servers.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# Where the pattern files are published; used to build links in HTTP responses
DEFAULT_REPOSITORY_URL = "https://github.com/richardichogan/vibe-coding-helper"
DEFAULT_HTTP_PORT = 3333

_TRUTHY = {"1", "true", "yes", "on"}


def get_patterns_dir() -> Path:
    """
    Get the root directory holding the category folders.
    
    Uses PATTERNS_DIR env var if set, otherwise ./patterns
    """
    env_dir = os.getenv("PATTERNS_DIR")
    if env_dir:
        return Path(os.path.expanduser(env_dir)).resolve()
    return (Path.cwd() / "patterns").resolve()


def get_http_port() -> int:
    """PORT wins over HTTP_PORT, matching common hosting platforms."""
    return int(os.getenv("PORT", os.getenv("HTTP_PORT", str(DEFAULT_HTTP_PORT))))


def normalize_prefix(prefix: str) -> str:
    """Normalize a route prefix to "" or "/segment" form."""
    prefix = prefix.strip().strip("/")
    return f"/{prefix}" if prefix else ""


@dataclass
class Config:
    """Server configuration."""
    environment: str = "development"
    log_level: str = "DEBUG"
    patterns_dir: Path = field(default_factory=get_patterns_dir)
    http_host: str = "0.0.0.0"
    http_port: int = DEFAULT_HTTP_PORT
    api_prefix: str = "/api"
    repository_url: str = DEFAULT_REPOSITORY_URL
    repository_branch: str = "master"
    strict_scan: bool = False
    
    def __post_init__(self):
        self.patterns_dir = Path(self.patterns_dir)
        self.api_prefix = normalize_prefix(self.api_prefix)
        self.repository_url = self.repository_url.rstrip("/")


class ConfigManager:
    """Configuration manager - loads and provides config."""
    
    def __init__(self):
        self._config: Optional[Config] = None
    
    def load(self) -> Config:
        """Load configuration from environment (and a .env file, if present)."""
        load_dotenv()
        env = os.getenv("ENVIRONMENT", "development")
        self._config = Config(
            environment=env,
            log_level=os.getenv("LOG_LEVEL", "DEBUG" if env != "production" else "INFO"),
            patterns_dir=get_patterns_dir(),
            http_host=os.getenv("HTTP_HOST", "0.0.0.0"),
            http_port=get_http_port(),
            api_prefix=os.getenv("PATTERNS_API_PREFIX", "/api"),
            repository_url=os.getenv("PATTERNS_REPOSITORY_URL", DEFAULT_REPOSITORY_URL),
            repository_branch=os.getenv("PATTERNS_REPOSITORY_BRANCH", "master"),
            strict_scan=os.getenv("PATTERNS_STRICT_SCAN", "false").strip().lower() in _TRUTHY,
        )
        return self._config
