"""
In-memory KeyValueStore.

Used by the test suite and for local development without Redis
(STORE_BACKEND=memory). Contents live only as long as the process.
"""

import copy
from typing import Optional

from src.domain.ports.key_value_store import Item, KeyValueStore


class MemoryKeyValueStore(KeyValueStore):
    def __init__(self):
        self._partitions: dict[str, dict[str, Item]] = {}

    async def get_item(self, pk: str, sk: str) -> Optional[Item]:
        item = self._partitions.get(pk, {}).get(sk)
        return copy.deepcopy(item) if item is not None else None

    async def query(self, pk: str) -> list[Item]:
        partition = self._partitions.get(pk, {})
        return [copy.deepcopy(partition[sk]) for sk in sorted(partition)]

    async def query_prefix(self, pk_prefix: str) -> list[Item]:
        items: list[Item] = []
        for pk in sorted(self._partitions):
            if pk.startswith(pk_prefix):
                items.extend(await self.query(pk))
        return items

    async def put_item(self, item: Item) -> None:
        pk, sk = item["pk"], item["sk"]
        self._partitions.setdefault(pk, {})[sk] = copy.deepcopy(item)

    async def update_item(self, pk: str, sk: str, changes: Item) -> Optional[Item]:
        current = self._partitions.get(pk, {}).get(sk)
        if current is None:
            return None
        current.update(copy.deepcopy(changes))
        current["pk"], current["sk"] = pk, sk
        return copy.deepcopy(current)
