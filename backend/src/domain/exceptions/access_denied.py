"""
AccessDeniedError - Raised when the caller lacks permission to access a resource.
LoginRequiredError - Raised when a guest touches a locked channel.
Maps to: HTTP 403 Forbidden
"""

from src.domain.exceptions.base import DomainError


class AccessDeniedError(DomainError):
    """Raised when user lacks permission to access a resource"""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)


class LoginRequiredError(AccessDeniedError):
    """Raised when an unauthenticated caller reads or writes a locked channel"""

    def __init__(self, message: str = "Login required for locked channels"):
        super().__init__(message)
