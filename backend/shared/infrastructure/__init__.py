"""
Infrastructure module: Database and Redis.

Provides:
- Database sessions and transactions (db.py)
- Redis connection pool (redis/)
- Read-through cached listings (cache/)
"""

from shared.infrastructure.db import (
    engine,
    SessionLocal,
    get_db,
    get_db_context,
    safe_commit,
)
from shared.infrastructure.redis.pool import (
    get_redis_sync_client,
    close_redis_sync_client,
)

__all__ = [
    # db
    "engine",
    "SessionLocal",
    "get_db",
    "get_db_context",
    "safe_commit",
    # redis
    "get_redis_sync_client",
    "close_redis_sync_client",
]
