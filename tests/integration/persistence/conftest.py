"""Fixtures for repository integration tests."""

from tests.shared.fixtures.database import database, database_url, db_session  # NOQA: F401
