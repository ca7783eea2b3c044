"""Factory function for creating storage backends from config."""

from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from share_count.core.config import StorageBackendConfig
    from share_count.core.storage.memory import MemoryStorageBackend
    from share_count.core.storage.redis import RedisStorageBackend

    StorageType = Union[MemoryStorageBackend, RedisStorageBackend]


def create_storage_backend(config: "StorageBackendConfig") -> "StorageType":
    """Create storage backend instance from config.

    Args:
        config: Storage backend configuration

    Returns:
        Storage backend instance (MemoryStorageBackend or RedisStorageBackend)

    Raises:
        ValueError: If redis backend is selected but redis config is missing
    """
    if config.backend_type == "redis":
        from share_count.core.storage.redis import RedisStorageBackend

        redis_config = config.redis
        if redis_config is None:
            raise ValueError("Redis config required for redis backend")

        if redis_config.is_url_based():
            return RedisStorageBackend(url=redis_config.url, prefix=config.prefix)
        return RedisStorageBackend(
            host=redis_config.host or "localhost",
            port=redis_config.port,
            db=redis_config.db,
            password=redis_config.password,
            prefix=config.prefix,
        )

    from share_count.core.storage.memory import MemoryStorageBackend

    return MemoryStorageBackend()
