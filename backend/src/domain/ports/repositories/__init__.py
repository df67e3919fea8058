"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation (Redis, in-memory, etc.)

Infrastructure layer provides implementations.
"""

from src.domain.ports.repositories.chat_store import ChatStore

__all__ = [
    "ChatStore",
]
