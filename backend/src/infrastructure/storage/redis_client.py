"""
Async Redis Client Factory.

Creates the Redis client backing RedisKeyValueStore.
Uses redis.asyncio for pure async operations - no event loop issues.
"""

import logging
import redis.asyncio as redis
from redis.asyncio import Redis
from src.config.settings import Config

logger = logging.getLogger(__name__)


async def create_redis_client(url: str = Config.REDIS_URL) -> Redis:
    """
    Create async Redis client with connection pool.

    Raises:
        redis.ConnectionError: If Redis is not reachable

    Note:
        - Uses connection pooling (automatic with from_url)
        - decode_responses=True so hash fields and values come back as str
        - Tests connection with ping() before returning
    """
    client = redis.from_url(
        url,
        encoding="utf-8",
        decode_responses=True,
        socket_timeout=Config.REDIS_SOCKET_TIMEOUT,
        socket_connect_timeout=Config.REDIS_SOCKET_TIMEOUT,
    )

    await client.ping()
    logger.info(f"[Redis] Connected to {url}")

    return client

