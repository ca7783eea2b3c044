"""Redis storage backend implementation.

Hash-based storage for production caching.
"""

import logging

import redis

from share_count.core.models import CachedPayload, Subject
from share_count.core.storage.base import PAYLOAD_FIELD, TIMESTAMP_FIELD, storage_key

logger = logging.getLogger(__name__)


class RedisStorageBackend:
    """Redis storage backend with one hash per subject.

    Uses Redis data structures:
    - Hash: site-wide payload (key: {prefix}option)
    - Hash: per-item payload (key: {prefix}meta:{id})

    Each hash holds the raw payload and its refresh timestamp and is written
    with a single HSET, so readers never see one without the other.
    """

    def __init__(
        self,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        password: str | None = None,
        url: str | None = None,
        prefix: str = "share_count:",
        client: redis.Redis | None = None,
    ) -> None:
        self._host = host
        self._port = port
        self._db = db
        self._password = password
        self._url = url
        self._prefix = prefix
        self._client: redis.Redis | None = client

    def _get_client(self) -> redis.Redis:
        if self._client is None:
            if self._url:
                self._client = redis.from_url(self._url, decode_responses=True)
            else:
                self._client = redis.Redis(
                    host=self._host,
                    port=self._port,
                    db=self._db,
                    password=self._password,
                    decode_responses=True,
                )
        return self._client

    def _key(self, subject: Subject) -> str:
        return f"{self._prefix}{storage_key(subject)}"

    def get(self, subject: Subject) -> CachedPayload | None:
        client = self._get_client()
        data = client.hgetall(self._key(subject))
        body = data.get(PAYLOAD_FIELD) if data else None
        updated_at = data.get(TIMESTAMP_FIELD) if data else None
        if not body or updated_at is None:
            return None
        try:
            return CachedPayload(body=body, updated_at=int(updated_at))
        except ValueError:
            logger.warning("Ignoring corrupt timestamp for %s", self._key(subject))
            return None

    def set(self, subject: Subject, payload: CachedPayload) -> None:
        client = self._get_client()
        client.hset(
            self._key(subject),
            mapping={
                PAYLOAD_FIELD: payload.body,
                TIMESTAMP_FIELD: str(payload.updated_at),
            },
        )

    def delete(self, subject: Subject) -> bool:
        client = self._get_client()
        return client.delete(self._key(subject)) > 0

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
