import asyncio
from datetime import timedelta

import pytest

from scheduler.services import EvictionPolicy, SessionStore, SessionSweeper


def test_sweep_once_evicts_expired(store, clock):
    old = store.create_session()
    clock.advance(hours=2, minutes=1)
    young = store.create_session()

    sweeper = SessionSweeper(store)
    assert sweeper.sweep_once() == [old.id]
    assert store.exists(young.id)
    assert sweeper.sweep_once() == []


def test_interval_defaults_to_policy(seed, clock):
    store = SessionStore(seed=seed, clock=clock, policy=EvictionPolicy(sweep_interval=timedelta(minutes=5)))
    assert SessionSweeper(store).interval_seconds == 300


def test_background_sweep(store, clock):
    old = store.create_session()
    clock.advance(hours=3)

    async def scenario():
        sweeper = SessionSweeper(store, interval_seconds=0.01)
        sweeper.start()
        assert sweeper.running
        await asyncio.sleep(0.1)
        await sweeper.stop()
        return sweeper

    sweeper = asyncio.run(scenario())
    assert not sweeper.running
    assert not store.exists(old.id)


def test_sweep_errors_do_not_stop_the_loop(store, clock):
    calls = []

    def flaky(*args, **kwargs):
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError("boom")
        return []

    store.evict_expired = flaky

    async def scenario():
        sweeper = SessionSweeper(store, interval_seconds=0.01)
        sweeper.start()
        await asyncio.sleep(0.1)
        await sweeper.stop()

    asyncio.run(scenario())
    assert len(calls) >= 2


def test_stop_without_start_is_noop(store):
    asyncio.run(SessionSweeper(store).stop())


def test_non_positive_interval_rejected(store):
    with pytest.raises(ValueError):
        SessionSweeper(store, interval_seconds=0)
    with pytest.raises(ValueError):
        SessionSweeper(store, interval_seconds=-1)
