"""Tests for root and health endpoints"""
from remotejobs.main import create_app


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["message"] == "RemoteJobs API"


def test_health_reports_database_connected(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "OK"
    assert data["database"] == "Connected"
    assert data["timestamp"]


def test_health_reports_database_disconnected(client, monkeypatch):
    import remotejobs.main as main_module

    monkeypatch.setattr(main_module, "database_is_up", lambda engine: False)
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json()["database"] == "Disconnected"


def test_apps_do_not_share_state(settings_factory):
    """Each app owns its own engine, so users registered in one are invisible to another."""
    from fastapi.testclient import TestClient

    first = TestClient(create_app(settings_factory()))
    second = TestClient(create_app(settings_factory()))
    body = {"name": "Ann", "email": "ann@example.com", "password": "secret1"}
    assert first.post("/api/auth/register", json=body).status_code == 201
    assert second.post("/api/auth/register", json=body).status_code == 201
