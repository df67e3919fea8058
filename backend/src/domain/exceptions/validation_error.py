"""
ValidationFailedError - Raised when input is malformed or missing.
Maps to: HTTP 400 Bad Request
"""

from src.domain.exceptions.base import DomainError


class ValidationFailedError(DomainError):
    """Exception raised for invalid input that slipped past request parsing."""

    def __init__(self, message: str):
        super().__init__(message)
