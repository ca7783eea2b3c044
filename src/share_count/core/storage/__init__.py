"""Storage backends for cached share counts.

- MemoryStorageBackend: In-memory storage for development/testing
- RedisStorageBackend: Redis-based storage for production
"""

from share_count.core.storage.base import StorageBackend
from share_count.core.storage.config import create_storage_backend
from share_count.core.storage.memory import MemoryStorageBackend
from share_count.core.storage.redis import RedisStorageBackend

__all__ = [
    "StorageBackend",
    "MemoryStorageBackend",
    "RedisStorageBackend",
    "create_storage_backend",
]
