"""
Redis cache utility - used for the remote jobs feed.
If Redis unavailable, caching is disabled and all ops no-op.
"""
import json
import logging
from typing import Any

logger = logging.getLogger(__name__)
_client = None

DEFAULT_TTL = 600


async def connect(url: str) -> None:
    global _client
    if not url:
        logger.warning("redis_url not set, caching disabled")
        return
    try:
        from redis import asyncio as aioredis
        _client = aioredis.Redis.from_url(
            url, encoding="utf-8", decode_responses=True
        )
        await _client.ping()
        logger.info("Redis connected, caching enabled")
    except Exception as e:
        _client = None
        logger.warning("Redis connect failed: %s, caching disabled", e)


async def disconnect() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


async def get(key: str) -> Any:
    if not _client:
        return None
    try:
        val = await _client.get(key)
        return json.loads(val) if val else None
    except Exception as e:
        logger.warning("Redis get failed key=%s: %s", key, e)
        return None


async def set(key: str, value: Any, ttl: int | None = None) -> None:
    if not _client:
        return
    ttl_val = ttl if ttl is not None else DEFAULT_TTL
    try:
        await _client.set(key, json.dumps(value), ex=ttl_val)
    except Exception as e:
        logger.warning("Redis set failed key=%s: %s", key, e)
