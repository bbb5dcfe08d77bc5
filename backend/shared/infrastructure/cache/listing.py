"""
Read-through cache for "list all" endpoints.

A listing is stored as one JSON blob under a fixed key with an absolute
expiry. Any mutation of the underlying entity kind drops the key, so the
next read is a miss that reflects the latest state. Redis is advisory here:
when it is down every read falls through to the loader and invalidation
becomes a no-op.

Usage:
    listing = CachedListing(get_redis_sync_client(), "dishes_list", ttl_seconds=600)

    rows = listing.get_or_load(lambda: [d.model_dump() for d in repo.get_all()])
    ...
    repo.commit()
    listing.invalidate()
"""

from __future__ import annotations

import json
from typing import Any, Callable

import redis

from shared.config.logging import cache_logger as logger


class CachedListing:
    """Time-boxed cache entry wrapping one listing query."""

    def __init__(
        self,
        client: redis.Redis | None,
        key: str,
        ttl_seconds: int,
        *,
        enabled: bool = True,
    ):
        self._client = client
        self._key = key
        self._ttl_seconds = ttl_seconds
        self._enabled = enabled and client is not None

    @property
    def key(self) -> str:
        return self._key

    @property
    def enabled(self) -> bool:
        return self._enabled

    def get_or_load(self, loader: Callable[[], list[Any]]) -> list[Any]:
        """
        Return the cached listing, or call loader() and cache its result.

        The loader must return JSON-serializable rows; Decimal and datetime
        values are written as strings.
        """
        cached = self._read()
        if cached is not None:
            logger.debug("Cache HIT", key=self._key, count=len(cached))
            return cached

        logger.debug("Cache MISS", key=self._key)
        rows = loader()
        self._write(rows)
        return rows

    def invalidate(self) -> bool:
        """Drop the cached listing. Returns False when Redis could not be reached."""
        if not self._enabled:
            return False
        try:
            deleted = self._client.delete(self._key)
        except redis.RedisError as e:
            logger.warning("Failed to invalidate cache", key=self._key, error=str(e))
            return False
        logger.info("Cache invalidated", key=self._key, deleted=deleted)
        return True

    def _read(self) -> list[Any] | None:
        if not self._enabled:
            return None
        try:
            raw = self._client.get(self._key)
        except redis.RedisError as e:
            logger.warning("Redis cache error, falling back to store", key=self._key, error=str(e))
            return None
        if not raw:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Discarding unreadable cache entry", key=self._key)
            return None

    def _write(self, rows: list[Any]) -> None:
        if not self._enabled:
            return
        try:
            self._client.set(self._key, json.dumps(rows, default=str), ex=self._ttl_seconds)
        except redis.RedisError as e:
            logger.warning("Failed to cache listing", key=self._key, error=str(e))
            return
        logger.debug("Cached listing", key=self._key, count=len(rows), ttl=self._ttl_seconds)
