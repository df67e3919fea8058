"""
Authentication failures on endpoints that require a logged-in caller.

UnauthenticatedError   -> no credential at all        -> HTTP 401
InvalidCredentialError -> credential failed to verify -> HTTP 403
"""

from src.domain.exceptions.base import DomainError


class UnauthenticatedError(DomainError):
    def __init__(self, message: str = "Access denied. Please log in."):
        super().__init__(message)


class InvalidCredentialError(DomainError):
    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)
