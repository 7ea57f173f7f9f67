"""Tests for password hashing, tokens and the bearer-token gate"""
from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from remotejobs.app.core.errors import AuthError
from remotejobs.app.core.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)
from remotejobs.app.models.user import User


def test_password_hash_roundtrip():
    hashed = get_password_hash("secret1", rounds=4)
    assert hashed != "secret1"
    assert verify_password("secret1", hashed)
    assert not verify_password("secret2", hashed)


def test_password_hash_is_salted():
    assert get_password_hash("secret1", rounds=4) != get_password_hash("secret1", rounds=4)


def test_verify_password_rejects_non_bcrypt_value():
    assert verify_password("secret1", "plaintext") is False
    assert verify_password("", "whatever") is False


def test_token_subject_roundtrip(settings):
    token = create_access_token("abc123", settings)
    assert decode_access_token(token, settings) == "abc123"


def test_expired_token_rejected(settings):
    token = create_access_token("abc123", settings, expires_delta=timedelta(seconds=-1))
    with pytest.raises(AuthError):
        decode_access_token(token, settings)


def test_token_from_other_secret_rejected(settings, settings_factory):
    other = settings_factory(secret_key="a-different-secret")
    token = create_access_token("abc123", other)
    with pytest.raises(AuthError):
        decode_access_token(token, settings)


def test_default_expiry_is_seven_days(settings):
    token = create_access_token("abc123", settings)
    remaining = jwt.get_unverified_claims(token)["exp"] - datetime.now(timezone.utc).timestamp()
    # allow slack for the time spent in the test
    assert 604800 - 60 < remaining <= 604800


def test_protected_route_without_header(client):
    r = client.get("/api/user/profile")
    assert r.status_code == 401
    assert r.json() == {"success": False, "message": "Not authenticated"}


def test_protected_route_with_malformed_header(client, test_user):
    r = client.get("/api/user/profile", headers={"Authorization": "Token nope"})
    assert r.status_code == 401


def test_protected_route_with_garbage_token(client, test_user):
    r = client.get("/api/user/profile", headers={"Authorization": "Bearer not.a.jwt"})
    assert r.status_code == 401
    assert r.json()["success"] is False


def test_protected_route_with_expired_token(client, test_user, settings):
    token = create_access_token(test_user.id, settings, expires_delta=timedelta(seconds=-5))
    r = client.get("/api/user/profile", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401


def test_protected_route_for_deleted_user(client, test_user, auth_headers, db_session):
    db_session.query(User).filter(User.id == test_user.id).delete()
    db_session.commit()
    r = client.get("/api/user/profile", headers=auth_headers)
    assert r.status_code == 401
    assert r.json()["message"] == "User not found"


def test_protected_route_with_valid_token(client, auth_headers):
    r = client.get("/api/user/profile", headers=auth_headers)
    assert r.status_code == 200
