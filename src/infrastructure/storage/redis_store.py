"""Key-value store backed by Redis."""

import json
from typing import Any

import redis.asyncio as redis
from loguru import logger

from domain.exceptions import StorageError


class AsyncRedisStore:
    """Stores each key as a JSON string in Redis."""

    def __init__(self, url: str = "redis://localhost:6379/0", prefix: str = "cf-notes:"):
        self.url = url
        self.prefix = prefix
        self.client: redis.Redis | None = None

    async def connect(self) -> None:
        """Open the connection pool and check the server is reachable."""
        self.client = redis.from_url(self.url, decode_responses=True)
        try:
            await self.client.ping()
        except redis.RedisError as e:
            raise StorageError(f"Failed to connect to Redis at {self.url}: {e}") from e
        logger.debug(f"Connected to Redis at {self.url}")

    async def get(self, key: str) -> Any | None:
        client = self._require_client()
        try:
            raw = await client.get(self.prefix + key)
        except redis.RedisError as e:
            raise StorageError(f"Failed to read {key!r} from Redis: {e}", key=key) from e
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError as e:
            raise StorageError(f"Corrupt JSON under {key!r} in Redis", key=key) from e

    async def set(self, key: str, value: Any) -> None:
        client = self._require_client()
        try:
            await client.set(self.prefix + key, json.dumps(value, ensure_ascii=False))
        except redis.RedisError as e:
            raise StorageError(f"Failed to write {key!r} to Redis: {e}", key=key) from e

    async def close(self) -> None:
        if self.client is not None:
            await self.client.aclose()
            self.client = None
            logger.debug("Redis connection closed")

    def _require_client(self) -> redis.Redis:
        if self.client is None:
            raise StorageError("Redis store used before connect()")
        return self.client
