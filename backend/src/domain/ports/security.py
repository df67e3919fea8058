"""
Security Ports - Password hashing and bearer token signing.

Implementations:
- src/infrastructure/security/passlib_hasher.py
- src/infrastructure/security/jwt_token_service.py
"""

from abc import ABC, abstractmethod
from typing import Optional


class PasswordHasher(ABC):
    @abstractmethod
    async def hash(self, password: str) -> str: ...

    @abstractmethod
    async def verify(self, password: str, digest: str) -> bool: ...


class TokenService(ABC):
    @abstractmethod
    def issue(self, subject: str) -> str:
        """Sign a token for subject (a username)."""
        ...

    @abstractmethod
    def validate(self, token: str) -> Optional[str]:
        """Return the subject the token was issued for, or None if it is invalid or expired."""
        ...
