"""
Redis client - read-through cache for gadget lookups.
Challenge: Connection pooling, fail gracefully when Redis is down.
Design: Single client instance, closed on application shutdown.
"""

import json
import logging
from typing import Any

from redis.asyncio import Redis

from gadget_registry.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

# Shared async Redis client (connection pool managed by redis-py)
_redis: Redis | None = None


async def get_redis() -> Redis:
    """Get Redis connection, creating the shared client on first use."""
    global _redis
    if _redis is None:
        _redis = Redis.from_url(
            settings.redis_url,
            encoding="utf-8",
            decode_responses=True,
        )
    return _redis


async def close_redis() -> None:
    global _redis
    if _redis is not None:
        await _redis.aclose()
        _redis = None


async def cache_get(key: str) -> dict[str, Any] | None:
    """Get JSON value from cache. Returns None on miss or error (graceful degradation)."""
    if not settings.cache_enabled:
        return None
    try:
        client = await get_redis()
        raw = await client.get(key)
    except Exception as exc:
        logger.debug("cache_get(%s) failed: %s", key, exc)
        return None
    return json.loads(raw) if raw else None


async def cache_set(key: str, value: dict[str, Any], ttl_seconds: int | None = None) -> bool:
    """Set JSON value in cache with TTL."""
    if not settings.cache_enabled:
        return False
    try:
        client = await get_redis()
        await client.setex(key, ttl_seconds or settings.cache_ttl_seconds, json.dumps(value))
        return True
    except Exception as exc:
        logger.debug("cache_set(%s) failed: %s", key, exc)
        return False


async def cache_delete(key: str) -> bool:
    """Invalidate cache key (after rent, return or delete)."""
    if not settings.cache_enabled:
        return False
    try:
        client = await get_redis()
        await client.delete(key)
        return True
    except Exception as exc:
        logger.debug("cache_delete(%s) failed: %s", key, exc)
        return False


# Invalidations queued during a request are applied only after its session commits.
PENDING_INVALIDATIONS = "cache_invalidations"


def invalidate_on_commit(session, key: str) -> None:
    """Queue a key to be deleted once the session commits."""
    session.info.setdefault(PENDING_INVALIDATIONS, set()).add(key)


async def flush_invalidations(session) -> None:
    """Delete keys queued on the session. Call right after a successful commit."""
    for key in session.info.pop(PENDING_INVALIDATIONS, ()):
        await cache_delete(key)


def discard_invalidations(session) -> None:
    """Rolled back: nothing changed, nothing to invalidate."""
    session.info.pop(PENDING_INVALIDATIONS, None)
