"""
Pytest fixtures for RemoteJobs API tests.
Uses in-memory SQLite, mocks Redis, provides test user and auth token.
"""
import pytest
from unittest.mock import AsyncMock, patch
from fastapi.testclient import TestClient

from remotejobs.app.core.config import Settings
from remotejobs.app.core.security import create_access_token, get_password_hash
from remotejobs.app.models.user import User
from remotejobs.main import create_app

TEST_PASSWORD = "testpass123"


def make_settings(tmp_path, **overrides) -> Settings:
    values = dict(
        database_url="sqlite:///:memory:",
        secret_key="test-secret-key",
        bcrypt_rounds=4,
        upload_dir=str(tmp_path / "uploads"),
        resume_storage="local",
        redis_url="",
        environment="test",
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings(tmp_path):
    return make_settings(tmp_path)


@pytest.fixture
def settings_factory(tmp_path):
    """Build Settings with overrides, e.g. settings_factory(enable_debug_routes=True)."""
    return lambda **overrides: make_settings(tmp_path, **overrides)


@pytest.fixture
def app(settings):
    """Fresh app per test - each one owns a new in-memory database."""
    return create_app(settings)


@pytest.fixture
def db_session(app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def test_user(db_session, settings):
    """Create a test user in the DB."""
    user = User(
        name="Test User",
        email="test@example.com",
        hashed_password=get_password_hash(TEST_PASSWORD, rounds=settings.bcrypt_rounds),
        preferences={},
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def auth_headers(test_user, settings):
    """Bearer token for test user."""
    token = create_access_token(test_user.id, settings)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture(autouse=True)
def mock_redis():
    """Mock Redis cache: get returns None (cache miss), set no-op. Skip connect."""
    with patch("remotejobs.app.utils.cache.get", new_callable=AsyncMock, return_value=None), \
         patch("remotejobs.app.utils.cache.set", new_callable=AsyncMock), \
         patch("remotejobs.app.utils.cache.connect", new_callable=AsyncMock), \
         patch("remotejobs.app.utils.cache.disconnect", new_callable=AsyncMock):
        yield
