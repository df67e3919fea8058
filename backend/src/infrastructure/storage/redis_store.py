"""
Redis KeyValueStore.

Redis Data Structure (HASH per partition):
- Key pattern: "{REDIS_KEY_PREFIX}{pk}", e.g. "chat:channel#general"
- Field: the item's sort key, e.g. "message#2025-01-27T12:00:00.123Z"
- Value: the whole item as a JSON string

Redis Commands Used:
- HGET / HSET: point read and insert
- HGETALL: partition query (fields sorted client-side by sort key)
- SCAN MATCH: partition-prefix query
- WATCH / MULTI / EXEC: conditional update (only if the item exists)
"""

import json
import logging
from typing import Optional

from redis.asyncio import Redis

from src.config.settings import Config
from src.domain.ports.key_value_store import Item, KeyValueStore

logger = logging.getLogger(__name__)

_GLOB_SPECIAL = "\\*?[]"


def _glob_escape(value: str) -> str:
    return "".join(f"\\{char}" if char in _GLOB_SPECIAL else char for char in value)


class RedisKeyValueStore(KeyValueStore):
    def __init__(self, redis: Redis, key_prefix: str = Config.REDIS_KEY_PREFIX):
        self._redis = redis
        self._prefix = key_prefix

    def _partition_key(self, pk: str) -> str:
        return f"{self._prefix}{pk}"

    async def _read_partition(self, redis_key: str) -> list[Item]:
        fields = await self._redis.hgetall(redis_key)
        return [json.loads(fields[sk]) for sk in sorted(fields)]

    async def get_item(self, pk: str, sk: str) -> Optional[Item]:
        raw = await self._redis.hget(self._partition_key(pk), sk)
        return json.loads(raw) if raw is not None else None

    async def query(self, pk: str) -> list[Item]:
        return await self._read_partition(self._partition_key(pk))

    async def query_prefix(self, pk_prefix: str) -> list[Item]:
        pattern = _glob_escape(self._partition_key(pk_prefix)) + "*"
        redis_keys = [key async for key in self._redis.scan_iter(match=pattern)]

        items: list[Item] = []
        for redis_key in sorted(redis_keys):
            items.extend(await self._read_partition(redis_key))
        return items

    async def put_item(self, item: Item) -> None:
        await self._redis.hset(self._partition_key(item["pk"]), item["sk"], json.dumps(item))

    async def update_item(self, pk: str, sk: str, changes: Item) -> Optional[Item]:
        redis_key = self._partition_key(pk)
        async with self._redis.pipeline(transaction=True) as pipe:
            await pipe.watch(redis_key)
            raw = await pipe.hget(redis_key, sk)
            if raw is None:
                await pipe.unwatch()
                return None

            item = {**json.loads(raw), **changes, "pk": pk, "sk": sk}
            pipe.multi()
            pipe.hset(redis_key, sk, json.dumps(item))
            # Raises WatchError if the partition changed since WATCH
            await pipe.execute()
            return item

    async def close(self) -> None:
        await self._redis.aclose()
        logger.info("[Redis] Store connection closed")
