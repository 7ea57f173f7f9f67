"""Tests for POST /api/subscribe and DELETE /api/unsubscribe"""
import time

from remotejobs.app.models.email_subscription import EmailSubscription


def _subscribe(client, email="bob@example.com"):
    return client.post("/api/subscribe", json={"email": email})


def _unsubscribe(client, email="bob@example.com"):
    return client.request("DELETE", "/api/unsubscribe", json={"email": email})


def test_subscribe_creates_active_subscription(client):
    r = _subscribe(client)
    assert r.status_code == 201, r.text
    data = r.json()
    assert data["success"] is True
    assert data["message"] == "Successfully subscribed to email updates"
    assert data["subscription"]["email"] == "bob@example.com"
    assert data["subscription"]["active"] is True
    assert data["subscription"]["subscribedAt"]


def test_subscribe_twice_conflicts(client):
    assert _subscribe(client).status_code == 201
    r = _subscribe(client)
    assert r.status_code == 400
    assert r.json() == {"success": False, "message": "Email already subscribed"}


def test_subscribe_is_case_insensitive(client):
    _subscribe(client)
    r = _subscribe(client, email="BOB@Example.com")
    assert r.status_code == 400


def test_subscribe_rejects_malformed_email(client):
    r = _subscribe(client, email="bob-at-example")
    assert r.status_code == 400
    assert r.json()["success"] is False


def test_subscribe_requires_email(client):
    r = client.post("/api/subscribe", json={})
    assert r.status_code == 400
    assert r.json()["message"] == "Email is required"


def test_unsubscribe_marks_inactive(client, db_session):
    _subscribe(client)
    r = _unsubscribe(client)
    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Successfully unsubscribed"}
    row = db_session.query(EmailSubscription).filter(EmailSubscription.email == "bob@example.com").one()
    assert row.active is False


def test_unsubscribe_unknown_email_is_noop(client, db_session):
    r = _unsubscribe(client, email="ghost@example.com")
    assert r.status_code == 200
    assert db_session.query(EmailSubscription).count() == 0


def test_resubscribe_after_unsubscribe_reactivates(client, db_session):
    _subscribe(client)
    _unsubscribe(client)
    r = _subscribe(client)
    assert r.status_code == 201
    assert r.json()["subscription"]["active"] is True
    assert db_session.query(EmailSubscription).count() == 1


def test_subscribe_rejects_pathological_email_quickly(client):
    start = time.perf_counter()
    r = _subscribe(client, email="a" * 49 + "!")
    assert r.status_code == 400
    assert time.perf_counter() - start < 1.0
