"""Tests for /api/auth register, login and debug-users"""
from fastapi.testclient import TestClient

from remotejobs.app.core.security import decode_access_token
from remotejobs.main import create_app


def _register(client, *, name="Alice", email="alice@example.com", password="secret1"):
    return client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )


def _login(client, *, email="alice@example.com", password="secret1"):
    return client.post("/api/auth/login", json={"email": email, "password": password})


def test_register_returns_201_with_token_and_public_user(client):
    r = _register(client)
    assert r.status_code == 201, r.text
    data = r.json()
    assert data["success"] is True
    assert isinstance(data["token"], str) and len(data["token"]) > 10
    assert set(data["user"]) == {"id", "name", "email"}
    assert data["user"]["email"] == "alice@example.com"


def test_register_missing_fields(client):
    r = client.post("/api/auth/register", json={"email": "alice@example.com"})
    assert r.status_code == 400
    assert r.json() == {"success": False, "message": "Please provide name, email, and password"}


def test_register_blank_name_is_missing(client):
    r = _register(client, name="   ")
    assert r.status_code == 400
    assert r.json()["message"] == "Please provide name, email, and password"


def test_register_duplicate_email_is_case_insensitive(client):
    assert _register(client).status_code == 201
    r = _register(client, name="Other", email="ALICE@Example.com")
    assert r.status_code == 400
    assert r.json() == {"success": False, "message": "User already exists"}


def test_register_rejects_malformed_email(client):
    r = _register(client, email="not-an-email")
    assert r.status_code == 400
    assert r.json()["success"] is False


def test_register_rejects_short_password(client):
    r = _register(client, password="abc")
    assert r.status_code == 400
    assert "at least 6" in r.json()["message"]


def test_register_stores_hashed_password(client, db_session):
    from remotejobs.app.models.user import User

    _register(client)
    user = db_session.query(User).filter(User.email == "alice@example.com").one()
    assert user.hashed_password != "secret1"
    assert user.hashed_password.startswith("$2")


def test_register_then_login_resolves_to_same_user(client, settings):
    reg = _register(client).json()
    r = _login(client)
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["success"] is True
    assert data["user"]["id"] == reg["user"]["id"]
    assert data["user"]["savedJobs"] == []
    assert decode_access_token(data["token"], settings) == reg["user"]["id"]
    assert decode_access_token(reg["token"], settings) == reg["user"]["id"]


def test_login_email_is_case_insensitive(client):
    _register(client)
    r = _login(client, email="  Alice@EXAMPLE.com ")
    assert r.status_code == 200


def test_login_wrong_password_and_unknown_email_fail_identically(client):
    _register(client)
    wrong_password = _login(client, password="wrong-password")
    unknown_email = _login(client, email="nobody@example.com")
    assert wrong_password.status_code == unknown_email.status_code == 400
    assert wrong_password.json() == unknown_email.json() == {
        "success": False,
        "message": "Invalid credentials",
    }


def test_login_missing_fields(client):
    r = client.post("/api/auth/login", json={"email": "alice@example.com"})
    assert r.status_code == 400
    assert r.json()["message"] == "Please provide email and password"


def test_login_includes_saved_jobs(client):
    token = _register(client).json()["token"]
    client.post(
        "/api/user/save-job",
        headers={"Authorization": f"Bearer {token}"},
        json={"jobId": "7", "title": "Dev", "company": "Initech"},
    )
    saved = _login(client).json()["user"]["savedJobs"]
    assert [j["jobId"] for j in saved] == ["7"]


def test_debug_users_hidden_by_default(client):
    r = client.get("/api/auth/debug-users")
    assert r.status_code == 404


def test_debug_users_lists_users_without_passwords(settings_factory):
    debug_client = TestClient(create_app(settings_factory(enable_debug_routes=True)))
    _register(debug_client)
    r = debug_client.get("/api/auth/debug-users")
    assert r.status_code == 200
    data = r.json()
    assert data["count"] == 1
    user = data["users"][0]
    assert user["email"] == "alice@example.com"
    assert "password" not in user and "hashed_password" not in user


def test_get_user_is_the_lookup_behind_the_bearer_gate(client, db_session, settings, monkeypatch):
    from remotejobs.app.services.auth_service import AuthService

    token = _register(client).json()["token"]
    user_id = decode_access_token(token, settings)
    assert AuthService(db_session, settings).get_user(user_id).email == "alice@example.com"
    assert AuthService(db_session, settings).get_user("missing") is None

    monkeypatch.setattr(AuthService, "get_user", lambda self, user_id: None)
    r = client.get("/api/user/profile", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401
    assert r.json()["message"] == "User not found"
