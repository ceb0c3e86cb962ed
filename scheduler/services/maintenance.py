"""Background session eviction, independent of request handling."""

import asyncio
import contextlib
import logging
from typing import List, Optional

from .session_store import SessionStore

logger = logging.getLogger(__name__)


class SessionSweeper:
    """Periodically evicts expired sessions from a store."""

    def __init__(self, store: SessionStore, interval_seconds: Optional[float] = None):
        self.store = store
        if interval_seconds is None:
            interval_seconds = store.policy.sweep_interval.total_seconds()
        if interval_seconds <= 0:
            raise ValueError(f"Sweep interval must be positive, got {interval_seconds}")
        self.interval_seconds = interval_seconds
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def sweep_once(self) -> List[str]:
        evicted = self.store.evict_expired()
        if evicted:
            logger.info("Session sweep evicted %d session(s), %d remaining", len(evicted), len(self.store))
        return evicted

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                self.sweep_once()
            except Exception as e:
                logger.error(f"Error in session sweep: {e}")

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run())
        logger.info("Session sweeper started (every %ss)", self.interval_seconds)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
