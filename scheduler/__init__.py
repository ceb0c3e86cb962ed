"""
Interview Scheduler Demo

Server: uvicorn scheduler.app:app --port 8001
Client: scheduler-client days
"""

__version__ = "1.0.0"

from .config import ServerConfig, get_config, reload_config  # noqa: E402
from .services import SessionStore, SessionSweeper  # noqa: E402

__all__ = [
    "__version__",
    "ServerConfig",
    "get_config",
    "reload_config",
    "SessionStore",
    "SessionSweeper",
]
