"""Redis-backed caching."""

from dealerdesk.core.cache.redis import (
    RedisCache,
    close_redis_pool,
    ping_redis,
    redis_client,
)


__all__ = [
    "RedisCache",
    "close_redis_pool",
    "ping_redis",
    "redis_client",
]
