"""
Persistence Layer - The chat store facade and the keyspace it is built on.
"""

from src.infrastructure.persistence.keyed_chat_store import KeyedChatStore

__all__ = [
    "KeyedChatStore",
]
