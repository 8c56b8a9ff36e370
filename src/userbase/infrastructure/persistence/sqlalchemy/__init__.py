"""SQLAlchemy engine, session and declarative base."""

from userbase.infrastructure.persistence.sqlalchemy.database import Database
from userbase.infrastructure.persistence.sqlalchemy.models import (
    Base,
    TimestampMixin,
)

__all__ = ["Base", "Database", "TimestampMixin"]
