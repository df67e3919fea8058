"""
Storage Layer - KeyValueStore implementations.

- MemoryKeyValueStore: process-local dict of partitions
- RedisKeyValueStore: one Redis hash per partition
"""

from src.infrastructure.storage.memory_store import MemoryKeyValueStore
from src.infrastructure.storage.redis_store import RedisKeyValueStore
from src.infrastructure.storage.redis_client import create_redis_client

__all__ = [
    "MemoryKeyValueStore",
    "RedisKeyValueStore",
    "create_redis_client",
]
