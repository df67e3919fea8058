"""
Security adapters for the PasswordHasher and TokenService ports.
"""

from src.infrastructure.security.passlib_hasher import PasslibPasswordHasher
from src.infrastructure.security.jwt_token_service import JwtTokenService

__all__ = [
    "PasslibPasswordHasher",
    "JwtTokenService",
]
