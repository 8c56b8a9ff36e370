"""SQLAlchemy models shared across packages."""

from userbase.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

__all__ = ["Base", "TimestampMixin"]
