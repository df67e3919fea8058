"""
ConflictError - Raised when a unique name (username, channel) is already taken.
Maps to: HTTP 400 Bad Request
"""

from src.domain.exceptions.base import DomainError


class ConflictError(DomainError):
    def __init__(self, message: str):
        super().__init__(message)
