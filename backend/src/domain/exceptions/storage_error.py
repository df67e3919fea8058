"""
StorageError - Raised when the underlying key-value store fails.
Maps to: HTTP 500 Internal Server Error. The original cause is logged, never returned.
"""

from src.domain.exceptions.base import DomainError


class StorageError(DomainError):
    def __init__(self, message: str = "Server error"):
        super().__init__(message)
