"""
Key-Value Store Port - One shared keyspace of items addressed by (pk, sk).

Implementations:
- src/infrastructure/storage/memory_store.py
- src/infrastructure/storage/redis_store.py

Every item is a flat JSON-compatible dict that carries its own "pk" and "sk".
Partition queries return items ordered by sort key, ascending.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

Item = dict[str, Any]


class KeyValueStore(ABC):
    @abstractmethod
    async def get_item(self, pk: str, sk: str) -> Optional[Item]: ...

    @abstractmethod
    async def query(self, pk: str) -> list[Item]:
        """All items of one partition, ordered by sort key."""
        ...

    @abstractmethod
    async def query_prefix(self, pk_prefix: str) -> list[Item]:
        """All items of every partition whose key starts with pk_prefix, ordered by (pk, sk)."""
        ...

    @abstractmethod
    async def put_item(self, item: Item) -> None: ...

    @abstractmethod
    async def update_item(self, pk: str, sk: str, changes: Item) -> Optional[Item]:
        """Merge changes into an existing item. Returns None (and writes nothing) if absent."""
        ...

    async def close(self) -> None:
        return None
