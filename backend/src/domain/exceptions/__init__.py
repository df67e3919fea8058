"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from src.domain.exceptions.base import DomainError
from src.domain.exceptions.entity_not_found import EntityNotFoundError
from src.domain.exceptions.access_denied import AccessDeniedError, LoginRequiredError
from src.domain.exceptions.validation_error import ValidationFailedError
from src.domain.exceptions.conflict import ConflictError
from src.domain.exceptions.authentication import (
    UnauthenticatedError,
    InvalidCredentialError,
)
from src.domain.exceptions.storage_error import StorageError

__all__ = [
    "DomainError",
    "EntityNotFoundError",
    "AccessDeniedError",
    "LoginRequiredError",
    "ValidationFailedError",
    "ConflictError",
    "UnauthenticatedError",
    "InvalidCredentialError",
    "StorageError",
]
