"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: Keyspace scheme and the ChatStore facade
- storage/: KeyValueStore implementations (in-memory, Redis)
- security/: Password hashing (passlib) and token signing (PyJWT)
"""

from src.infrastructure.persistence import KeyedChatStore
from src.infrastructure.storage import MemoryKeyValueStore, RedisKeyValueStore
from src.infrastructure.security import PasslibPasswordHasher, JwtTokenService

__all__ = [
    "KeyedChatStore",
    "MemoryKeyValueStore",
    "RedisKeyValueStore",
    "PasslibPasswordHasher",
    "JwtTokenService",
]
