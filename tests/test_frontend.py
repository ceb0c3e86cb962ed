import pytest
from fastapi.testclient import TestClient

from scheduler.app import create_app
from scheduler.config import ServerConfig
from scheduler.state import AppState, reset_state


@pytest.fixture
def site(tmp_path, store):
    (tmp_path / "index.html").write_text("<html>scheduler</html>")
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "app.js").write_text("console.log('hi')")
    app = create_app(AppState(ServerConfig(static_dir=tmp_path), store=store))
    yield TestClient(app)
    reset_state(None)


def test_index_served_at_root(site):
    response = site.get("/")
    assert response.status_code == 200
    assert "scheduler" in response.text


def test_static_file_served(site):
    response = site.get("/assets/app.js")
    assert response.status_code == 200
    assert "console.log" in response.text


def test_client_routes_fall_back_to_index(site):
    response = site.get("/days/monday")
    assert response.status_code == 200
    assert "scheduler" in response.text


def test_api_routes_take_precedence(site):
    assert site.get("/api/days").status_code == 200
    assert site.get("/api/health").json()["status"] == "healthy"
    assert site.get("/api/unknown").status_code == 404


def test_missing_static_dir_falls_back_to_api_index(tmp_path, store):
    app = create_app(AppState(ServerConfig(static_dir=tmp_path / "missing"), store=store))
    try:
        body = TestClient(app).get("/").json()
        assert body["name"] == "Interview Scheduler API"
    finally:
        reset_state(None)


def test_unrelated_config_error_keeps_frontend(tmp_path, store):
    (tmp_path / "index.html").write_text("<html>scheduler</html>")
    config = ServerConfig(static_dir=tmp_path, seed_path=tmp_path / "no-seed.json")
    assert config.validate()[0] is False
    app = create_app(AppState(config, store=store))
    try:
        response = TestClient(app).get("/")
        assert response.status_code == 200
        assert "scheduler" in response.text
    finally:
        reset_state(None)
