"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

Subfolders:
- repositories/       → Entity-shaped persistence (ChatStore)
- key_value_store.py  → The raw partition/sort keyed store (memory, Redis)
- security.py         → Password hashing and token signing
"""

from src.domain.ports.key_value_store import KeyValueStore, Item
from src.domain.ports.security import PasswordHasher, TokenService

__all__ = [
    "KeyValueStore",
    "Item",
    "PasswordHasher",
    "TokenService",
]
