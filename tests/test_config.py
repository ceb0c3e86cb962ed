from datetime import timedelta
from pathlib import Path

import pytest

from scheduler.config import ServerConfig
from scheduler.services import load_seed
from scheduler.state import AppState


def test_defaults(monkeypatch):
    for key in ("PORT", "SESSION_MAX_AGE_SECONDS", "SESSION_SWEEP_INTERVAL_SECONDS", "SESSION_HEADER", "STATIC_DIR", "SEED_PATH"):
        monkeypatch.delenv(key, raising=False)
    config = ServerConfig.from_env()
    assert config.port == 8001
    assert config.session_header == "x-session-id"
    assert config.session_max_age == timedelta(hours=2)
    assert config.session_sweep_interval == timedelta(minutes=30)
    assert config.static_dir is None
    assert config.validate() == (True, [])


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("SESSION_MAX_AGE_SECONDS", "60")
    monkeypatch.setenv("SESSION_SWEEP_INTERVAL_SECONDS", "10")
    monkeypatch.setenv("SESSION_HEADER", "X-Demo-Session")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("STATIC_DIR", str(tmp_path))
    config = ServerConfig.from_env()
    assert config.port == 9000
    assert config.session_max_age == timedelta(seconds=60)
    assert config.session_sweep_interval == timedelta(seconds=10)
    assert config.session_header == "x-demo-session"
    assert config.cors_origins == ("http://a.test", "http://b.test")
    assert config.static_dir == tmp_path


def test_validate_reports_errors(tmp_path):
    config = ServerConfig(
        session_max_age_seconds=0,
        static_dir=tmp_path / "missing",
        seed_path=Path("/nonexistent/seed.json"),
    )
    ok, errors = config.validate()
    assert not ok
    assert len(errors) == 3


def test_app_state_uses_config_policy():
    state = AppState(ServerConfig(session_max_age_seconds=120, session_sweep_interval_seconds=30))
    assert state.session_store.policy.max_age == timedelta(seconds=120)
    assert state.sweeper.interval_seconds == 30


def test_seed_from_custom_path(tmp_path):
    seed_file = tmp_path / "seed.json"
    seed_file.write_text(
        '{"days": [{"id": 1, "name": "Monday", "appointments": [1], "interviewers": [1]}],'
        ' "appointments": {"1": {"id": 1, "time": "9am", "interview": null}},'
        ' "interviewers": {"1": {"id": 1, "name": "A", "avatar": "a.png"}}}'
    )
    state = AppState(ServerConfig(seed_path=seed_file))
    session = state.session_store.create_session()
    assert session.days[0].appointments == [1]
    assert session.appointments["1"].time == "9am"
    assert session.days[0].spots == 1


@pytest.mark.parametrize(
    "overrides",
    [
        {"session_sweep_interval_seconds": 0},
        {"session_max_age_seconds": -5},
        {"session_header": ""},
    ],
)
def test_app_state_rejects_invalid_session_settings(overrides):
    with pytest.raises(ValueError, match="Invalid session configuration"):
        AppState(ServerConfig(**overrides))


def test_session_errors_exclude_unrelated_checks(tmp_path):
    config = ServerConfig(static_dir=tmp_path / "missing", seed_path=Path("/nonexistent/seed.json"))
    assert config.session_errors() == []
    assert config.static_dir_errors() == [f"Static directory not found: {tmp_path / 'missing'}"]
