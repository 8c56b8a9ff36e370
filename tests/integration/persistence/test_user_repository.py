"""Integration tests for UserRepositorySQLAlchemy against SQLite."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from userbase.domain.shared.exceptions import InfrastructureError
from userbase_identity import Email, EmailAlreadyExistsError, User
from userbase_identity.infrastructure.persistence.sqlalchemy import (
    UserModel,
    UserRepositorySQLAlchemy,
)


def _user(email: str = "a@b.com", name: str | None = None) -> User:
    return User.create(email, password_hash="$2b$04$notarealhash", name=name)


async def _count_users(session) -> int:
    return (await session.execute(select(func.count()).select_from(UserModel))).scalar_one()


class TestInsertAndFind:
    @pytest.mark.asyncio
    async def test_insert_and_find_by_id(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        user = _user(name="Alice")

        await repo.insert_user(user)
        await db_session.commit()

        found = await repo.find_by_id(user.id)
        assert found == user
        assert found.email == "a@b.com"
        assert found.name == "Alice"
        assert found.password_hash == user.password_hash
        assert found.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_find_by_email(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        user = _user()
        await repo.insert_user(user)
        await db_session.commit()

        assert (await repo.find_by_email("a@b.com")).id == user.id
        assert (await repo.find_by_email(Email("a@b.com"))).id == user.id

    @pytest.mark.asyncio
    async def test_find_by_email_is_exact_match(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        await repo.insert_user(_user())
        await db_session.commit()

        assert await repo.find_by_email("A@B.COM") is None

    @pytest.mark.asyncio
    async def test_missing_user_returns_none(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)

        assert await repo.find_by_id(uuid4()) is None
        assert await repo.find_by_email("nobody@b.com") is None


class TestUniqueness:
    @pytest.mark.asyncio
    async def test_duplicate_email_raises_conflict(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        await repo.insert_user(_user())
        await db_session.commit()

        with pytest.raises(EmailAlreadyExistsError):
            await repo.insert_user(_user())
        await db_session.rollback()

        assert await _count_users(db_session) == 1


class TestListUsers:
    @pytest.mark.asyncio
    async def test_list_users_oldest_first(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        first = _user("first@b.com")
        second = _user("second@b.com")
        await repo.insert_user(first)
        await repo.insert_user(second)
        await db_session.commit()

        users = await repo.list_users()

        assert [user.id for user in users] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_list_users_empty(self, db_session):
        assert await UserRepositorySQLAlchemy(db_session).list_users() == []


class TestStorageFailures:
    @pytest.mark.asyncio
    async def test_query_failure_becomes_infrastructure_error(self):
        session = AsyncMock()
        session.execute.side_effect = OperationalError(
            "SELECT 1",
            {},
            Exception("database is locked"),
        )
        repo = UserRepositorySQLAlchemy(session)

        with pytest.raises(InfrastructureError):
            await repo.find_by_email("a@b.com")
        with pytest.raises(InfrastructureError):
            await repo.list_users()

    @pytest.mark.asyncio
    async def test_flush_failure_becomes_infrastructure_error(self):
        session = AsyncMock()
        session.add = lambda model: None
        session.flush.side_effect = OperationalError(
            "INSERT",
            {},
            Exception("disk I/O error"),
        )
        repo = UserRepositorySQLAlchemy(session)

        with pytest.raises(InfrastructureError):
            await repo.insert_user(_user())
