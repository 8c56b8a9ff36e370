"""Fixtures for API integration tests.

Every test gets a fresh application on its own SQLite file, driven through
FastAPI's TestClient (which runs the lifespan, so tables are created).
"""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from tests.conftest import TEST_JWT_SECRET
from userbase.presentation.api.app import create_app
from userbase_config.settings import Settings

TEST_EMAIL = "a@b.com"
TEST_PASSWORD = "pw1234"  # NOQA: S105


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        api_debug=True,
        api_cors_origins="http://localhost:5173",
        password_hash_rounds=4,
        log_level="WARNING",
    )


@pytest.fixture
def test_client(api_settings):
    app = create_app(settings=api_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def registered_user(test_client) -> dict:
    """Register the default test user and return the response body."""
    response = test_client.post(
        "/api/auth/register",
        json={"email": TEST_EMAIL, "password": TEST_PASSWORD, "name": "Alice"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(registered_user) -> dict[str, str]:
    return {"Authorization": f"Bearer {registered_user['token']}"}
