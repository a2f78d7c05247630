"""Key-value store adapters."""

from .file_store import JSONFileStore
from .interfaces import KeyValueStoreProtocol
from .redis_store import AsyncRedisStore

__all__ = ["AsyncRedisStore", "JSONFileStore", "KeyValueStoreProtocol"]
