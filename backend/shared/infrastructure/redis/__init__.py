"""
Redis connection pool and key constants.
"""

from shared.infrastructure.redis.pool import get_redis_sync_client, close_redis_sync_client
from shared.infrastructure.redis.constants import CACHE_KEY_DISH_LIST

__all__ = [
    "get_redis_sync_client",
    "close_redis_sync_client",
    "CACHE_KEY_DISH_LIST",
]
