"""Read-side queries for identity data."""

from userbase_identity.application.queries.list_users_query import ListUsersQuery

__all__ = ["ListUsersQuery"]
