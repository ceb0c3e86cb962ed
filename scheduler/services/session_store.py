"""
Session Store

Holds one isolated copy of the seed schedule per demo session, keyed by an
opaque token. Sessions are created on first contact and removed only by
time-based eviction; there is no explicit delete.

The mapping is shared by all requests and has no explicit lock. Each session's
nested data is only reached through its own token, so sessions cannot affect
each other. Two concurrent mutations of the same appointment in the same
session are last-write-wins.
"""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional, Union

from ..models import Appointment, Day, Interviewer
from .seed_loader import SeedDataset, load_seed

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Session:
    """One demo user's private schedule."""
    id: str
    created_at: datetime
    days: List[Day]
    appointments: Dict[str, Appointment]
    interviewers: Dict[str, Interviewer]


@dataclass(frozen=True)
class Found:
    """The requested token named a registered session."""
    session: Session


@dataclass(frozen=True)
class CreatedNew:
    """The token was missing or unknown; a new session was created."""
    session: Session
    requested_id: Optional[str] = None


Resolution = Union[Found, CreatedNew]


@dataclass(frozen=True)
class EvictionPolicy:
    max_age: timedelta = timedelta(hours=2)
    sweep_interval: timedelta = timedelta(minutes=30)


class SessionStore:
    """In-memory registry of sessions with injected clock and eviction policy."""

    def __init__(
        self,
        seed: Optional[SeedDataset] = None,
        clock: Clock = utc_now,
        policy: Optional[EvictionPolicy] = None,
        id_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
    ):
        self.seed = seed or load_seed()
        self.clock = clock
        self.policy = policy or EvictionPolicy()
        self._new_id = id_factory
        self._sessions: Dict[str, Session] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def create_session(self) -> Session:
        session_id = self._new_id()
        while session_id in self._sessions:
            session_id = self._new_id()
        days, appointments, interviewers = self.seed.instantiate()
        session = Session(
            id=session_id,
            created_at=self.clock(),
            days=days,
            appointments=appointments,
            interviewers=interviewers,
        )
        self._sessions[session_id] = session
        logger.info("Created new session: %s", session_id)
        return session

    def get(self, session_id: Optional[str]) -> Optional[Session]:
        if not session_id:
            return None
        return self._sessions.get(session_id)

    def exists(self, session_id: Optional[str]) -> bool:
        return bool(session_id) and session_id in self._sessions

    def resolve(self, session_id: Optional[str]) -> Resolution:
        """Return Found for a registered token, else create a session and return CreatedNew."""
        session = self.get(session_id)
        if session is not None:
            return Found(session)
        return CreatedNew(self.create_session(), requested_id=session_id or None)

    def get_or_create(self, session_id: Optional[str]) -> Session:
        """
        Return the session for session_id, creating a new one when it is
        missing or unknown. The returned session's id is authoritative; it
        differs from session_id whenever a new session was created.
        """
        return self.resolve(session_id).session

    def evict_expired(
        self,
        now: Optional[datetime] = None,
        max_age: Optional[timedelta] = None,
    ) -> List[str]:
        """Remove every session older than max_age. Returns the evicted ids."""
        now = now or self.clock()
        max_age = max_age if max_age is not None else self.policy.max_age
        cutoff = now - max_age
        evicted = []
        # Snapshot so concurrent inserts don't break iteration
        for session_id, session in list(self._sessions.items()):
            if session.created_at < cutoff:
                self._sessions.pop(session_id, None)
                evicted.append(session_id)
                logger.info("Cleaned up session: %s", session_id)
        return evicted
