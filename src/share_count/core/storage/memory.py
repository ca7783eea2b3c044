"""In-memory storage backend implementation.

Simplified implementation for development and testing.
"""

from __future__ import annotations

import threading

from share_count.core.models import CachedPayload, Subject
from share_count.core.storage.base import storage_key


class MemoryStorageBackend:
    """In-memory storage backend using Python dict.

    Thread-safe implementation for local caching.
    For production, use RedisStorageBackend.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._data: dict[str, CachedPayload] = {}

    def get(self, subject: Subject) -> CachedPayload | None:
        with self._lock:
            return self._data.get(storage_key(subject))

    def set(self, subject: Subject, payload: CachedPayload) -> None:
        # CachedPayload is immutable, so body and timestamp are swapped as one.
        with self._lock:
            self._data[storage_key(subject)] = payload

    def delete(self, subject: Subject) -> bool:
        with self._lock:
            return self._data.pop(storage_key(subject), None) is not None

    def size(self) -> int:
        with self._lock:
            return len(self._data)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def close(self) -> None:
        pass
