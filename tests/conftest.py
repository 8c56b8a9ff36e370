"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/           # Fast, isolated tests (fakes and mocks, no database)
    ├── integration/    # Tests against a temporary SQLite database
    │   ├── persistence/
    │   └── api/        # FastAPI TestClient end-to-end
    └── shared/         # Shared fixtures and test doubles
"""

import pytest

from userbase_config import clear_settings_cache
from userbase_identity import JWTService, PasswordHashingService

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"  # NOQA: S105


@pytest.fixture(autouse=True)
def configure_app_settings():
    """Make sure no test sees settings cached by another one."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def password_service() -> PasswordHashingService:
    """Password hasher with low rounds for fast tests."""
    return PasswordHashingService(rounds=4)


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(secret_key=TEST_JWT_SECRET)
