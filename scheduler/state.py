"""Application state: config, session store and the eviction sweeper."""

import logging
from typing import Optional

from .config import ServerConfig, get_config
from .services import EvictionPolicy, SessionStore, SessionSweeper, load_seed

logger = logging.getLogger(__name__)


class AppState:
    """Global application state."""

    def __init__(self, config: ServerConfig, store: Optional[SessionStore] = None):
        errors = config.session_errors()
        if errors:
            raise ValueError(f"Invalid session configuration: {'; '.join(errors)}")
        self.config = config

        if store is None:
            policy = EvictionPolicy(
                max_age=config.session_max_age,
                sweep_interval=config.session_sweep_interval,
            )
            store = SessionStore(seed=load_seed(config.seed_path), policy=policy)
        self.session_store = store
        self.sweeper = SessionSweeper(store)
        logger.info(
            "Session store ready: max_age=%ss sweep_interval=%ss",
            int(store.policy.max_age.total_seconds()),
            int(store.policy.sweep_interval.total_seconds()),
        )


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        config = get_config()
        _state = AppState(config)
    return _state


def reset_state(state: Optional[AppState] = None) -> Optional[AppState]:
    """Replace (or drop, when state is None) the global state. Used by tests."""
    global _state
    _state = state
    return _state
