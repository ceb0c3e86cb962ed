from datetime import timedelta

from scheduler.services import CreatedNew, EvictionPolicy, Found, SessionStore


def test_create_session_copies_seed(store):
    session = store.create_session()
    assert store.exists(session.id)
    assert [d.name for d in session.days] == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
    assert len(session.appointments) == 25
    assert len(session.interviewers) == 5
    assert [d.spots for d in session.days] == [1, 2, 3, 3, 3]


def test_create_session_stamps_clock_time(store, clock):
    session = store.create_session()
    assert session.created_at == clock.now


def test_sessions_get_unique_ids(store):
    ids = {store.create_session().id for _ in range(20)}
    assert len(ids) == 20
    assert len(store) == 20


def test_duplicate_generated_id_is_retried(seed, clock):
    ids = iter(["same", "same", "other"])
    store = SessionStore(seed=seed, clock=clock, id_factory=lambda: next(ids))
    assert store.create_session().id == "same"
    assert store.create_session().id == "other"


def test_sessions_share_no_mutable_state(store):
    a = store.create_session()
    b = store.create_session()
    assert a.days[0] is not b.days[0]
    assert a.days[0].appointments is not b.days[0].appointments
    assert a.appointments["1"] is not b.appointments["1"]
    assert a.appointments["1"].interview is not b.appointments["1"].interview

    a.appointments["1"].interview.student = "Changed"
    a.days[0].appointments.append(99)
    assert b.appointments["1"].interview.student == "Archie Cohen"
    assert b.days[0].appointments == [1, 2, 3, 4, 5]
    # The seed template is untouched as well
    assert store.create_session().appointments["1"].interview.student == "Archie Cohen"


def test_resolve_known_token_is_found(store):
    session = store.create_session()
    resolution = store.resolve(session.id)
    assert isinstance(resolution, Found)
    assert resolution.session is session
    assert len(store) == 1


def test_resolve_unknown_token_creates_new(store):
    resolution = store.resolve("no-such-session")
    assert isinstance(resolution, CreatedNew)
    assert resolution.requested_id == "no-such-session"
    assert resolution.session.id != "no-such-session"
    assert store.exists(resolution.session.id)


def test_resolve_missing_token_creates_new(store):
    for token in (None, ""):
        resolution = store.resolve(token)
        assert isinstance(resolution, CreatedNew)
        assert resolution.requested_id is None


def test_get_or_create_returns_authoritative_session(store):
    known = store.create_session()
    assert store.get_or_create(known.id) is known
    fresh = store.get_or_create("stale")
    assert fresh.id != "stale"
    assert store.get("stale") is None


def test_exists_has_no_side_effect(store):
    assert store.exists("nope") is False
    assert store.exists(None) is False
    assert len(store) == 0


def test_evict_expired_removes_only_old_sessions(store, clock):
    old = store.create_session()
    clock.advance(hours=1, minutes=30)
    young = store.create_session()
    clock.advance(minutes=31)

    evicted = store.evict_expired()

    assert evicted == [old.id]
    assert not store.exists(old.id)
    assert store.exists(young.id)


def test_evict_expired_keeps_session_exactly_at_max_age(store, clock):
    session = store.create_session()
    clock.advance(hours=2)
    assert store.evict_expired() == []
    assert store.exists(session.id)


def test_evict_expired_with_explicit_arguments(store, clock):
    session = store.create_session()
    assert store.evict_expired(now=clock.now + timedelta(minutes=10), max_age=timedelta(minutes=5)) == [session.id]


def test_evicted_token_resolves_to_new_session(store, clock):
    old = store.create_session()
    clock.advance(hours=3)
    store.evict_expired()
    resolution = store.resolve(old.id)
    assert isinstance(resolution, CreatedNew)
    assert resolution.session.id != old.id


def test_custom_eviction_policy(seed, clock):
    store = SessionStore(seed=seed, clock=clock, policy=EvictionPolicy(max_age=timedelta(minutes=1)))
    session = store.create_session()
    clock.advance(minutes=2)
    assert store.evict_expired() == [session.id]
