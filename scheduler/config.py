"""
Server Configuration

Loads configuration from environment variables and provides defaults.
Supports loading from .env file using python-dotenv.
"""

import os
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import List, Optional

# Try to load dotenv from project root (single .env for server and client)
try:
    from dotenv import load_dotenv

    root_env = Path(__file__).resolve().parent.parent / ".env"
    if root_env.exists():
        load_dotenv(root_env)
except ImportError:
    pass  # dotenv not installed

DEFAULT_SESSION_HEADER = "x-session-id"


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8001
    log_level: str = "INFO"
    cors_origins: tuple = ("*",)

    # Sessions: each demo user gets a private copy of the seed schedule
    session_header: str = DEFAULT_SESSION_HEADER
    session_max_age_seconds: int = 2 * 60 * 60
    session_sweep_interval_seconds: int = 30 * 60

    # Paths
    seed_path: Optional[Path] = None  # None: bundled data/seed.json
    # Built frontend; when set, served at / with index.html fallback
    static_dir: Optional[Path] = None

    @property
    def session_max_age(self) -> timedelta:
        return timedelta(seconds=self.session_max_age_seconds)

    @property
    def session_sweep_interval(self) -> timedelta:
        return timedelta(seconds=self.session_sweep_interval_seconds)

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        base_dir = Path(__file__).parent.parent

        def _path_env(key: str) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return None
            p = Path(v)
            return p if p.is_absolute() else (base_dir / p).resolve()

        def _list_env(key: str, default: str) -> List[str]:
            raw = os.getenv(key, default)
            return [item.strip() for item in raw.split(",") if item.strip()]

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8001")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            cors_origins=tuple(_list_env("CORS_ORIGINS", "*")),
            session_header=os.getenv("SESSION_HEADER", DEFAULT_SESSION_HEADER).strip().lower(),
            session_max_age_seconds=int(os.getenv("SESSION_MAX_AGE_SECONDS", str(2 * 60 * 60))),
            session_sweep_interval_seconds=int(os.getenv("SESSION_SWEEP_INTERVAL_SECONDS", str(30 * 60))),
            seed_path=_path_env("SEED_PATH"),
            static_dir=_path_env("STATIC_DIR"),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = self.session_errors()

        if self.seed_path is not None and not self.seed_path.exists():
            errors.append(f"Seed dataset not found: {self.seed_path}")

        errors.extend(self.static_dir_errors())

        return len(errors) == 0, errors

    def session_errors(self) -> list[str]:
        """Problems with the session timings and header; any of these is fatal."""
        errors = []

        if self.session_max_age_seconds <= 0:
            errors.append(f"SESSION_MAX_AGE_SECONDS must be positive, got {self.session_max_age_seconds}")

        if self.session_sweep_interval_seconds <= 0:
            errors.append(
                f"SESSION_SWEEP_INTERVAL_SECONDS must be positive, got {self.session_sweep_interval_seconds}"
            )

        if not self.session_header:
            errors.append("SESSION_HEADER cannot be empty")

        return errors

    def static_dir_errors(self) -> list[str]:
        # Static dir is optional; only checked when configured
        if self.static_dir is not None and not self.static_dir.is_dir():
            return [f"Static directory not found: {self.static_dir}"]
        return []


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
