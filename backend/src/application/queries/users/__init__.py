"""User queries."""

from .list_users import ListUsersQuery, ListUsersHandler

__all__ = [
    "ListUsersQuery",
    "ListUsersHandler",
]
