"""User commands."""

from .update_status import UpdateStatusCommand, UpdateStatusHandler

__all__ = [
    "UpdateStatusCommand",
    "UpdateStatusHandler",
]
