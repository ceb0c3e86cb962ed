from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from scheduler.app import create_app
from scheduler.client import ClientSettings, SchedulerClient
from scheduler.config import ServerConfig
from scheduler.services import SessionStore, load_seed
from scheduler.state import AppState, reset_state


class FakeClock:
    """Deterministic clock for session ages."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def seed():
    return load_seed()


@pytest.fixture
def store(seed, clock):
    return SessionStore(seed=seed, clock=clock)


@pytest.fixture
def session(store):
    return store.create_session()


@pytest.fixture
def api(store):
    """TestClient over a fresh app wired to the test store (no startup events)."""
    app = create_app(AppState(ServerConfig(), store=store))
    yield TestClient(app)
    reset_state(None)


@pytest.fixture
def client(api):
    """SchedulerClient that talks to the test app through the TestClient transport."""
    return SchedulerClient(base_url="http://testserver", http=api, settings=ClientSettings())
