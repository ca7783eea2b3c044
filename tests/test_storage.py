"""Tests for storage backends."""

from unittest.mock import MagicMock

import pytest

from share_count.core.config import StorageBackendConfig
from share_count.core.models import CachedPayload, Subject
from share_count.core.storage import (
    MemoryStorageBackend,
    RedisStorageBackend,
    create_storage_backend,
)

SITE = Subject(id="site", url="https://example.com", is_site=True)
POST = Subject(id="7", url="https://example.com/post", published_at=1_700_000_000)


class TestMemoryStorageBackend:
    def test_get_set_delete(self) -> None:
        storage = MemoryStorageBackend()
        payload = CachedPayload(body='{"Twitter": 1}', updated_at=10)

        assert storage.get(POST) is None
        storage.set(POST, payload)
        assert storage.get(POST) == payload
        assert storage.get(SITE) is None
        assert storage.size() == 1

        assert storage.delete(POST) is True
        assert storage.delete(POST) is False

    def test_site_and_items_are_separate(self) -> None:
        storage = MemoryStorageBackend()
        storage.set(SITE, CachedPayload(body="site", updated_at=1))
        storage.set(POST, CachedPayload(body="post", updated_at=2))

        assert storage.get(SITE).body == "site"
        assert storage.get(POST).body == "post"

        storage.clear()
        assert storage.size() == 0


class TestRedisStorageBackend:
    @pytest.fixture
    def client(self) -> MagicMock:
        return MagicMock()

    def test_set_writes_payload_and_timestamp_together(self, client: MagicMock) -> None:
        storage = RedisStorageBackend(client=client, prefix="sc:")
        storage.set(POST, CachedPayload(body='{"Twitter": 1}', updated_at=10))

        client.hset.assert_called_once_with(
            "sc:meta:7",
            mapping={"share_count": '{"Twitter": 1}', "share_count_datetime": "10"},
        )

    def test_site_key(self, client: MagicMock) -> None:
        storage = RedisStorageBackend(client=client, prefix="sc:")
        storage.set(SITE, CachedPayload(body="{}", updated_at=1))
        args, _ = client.hset.call_args
        assert args[0] == "sc:option"

    def test_get(self, client: MagicMock) -> None:
        client.hgetall.return_value = {
            "share_count": '{"Twitter": 1}',
            "share_count_datetime": "10",
        }
        storage = RedisStorageBackend(client=client)

        assert storage.get(POST) == CachedPayload(body='{"Twitter": 1}', updated_at=10)
        client.hgetall.assert_called_once_with("share_count:meta:7")

    @pytest.mark.parametrize(
        "stored",
        [
            {},
            {"share_count": '{"Twitter": 1}'},
            {"share_count_datetime": "10"},
            {"share_count": '{"Twitter": 1}', "share_count_datetime": "yesterday"},
        ],
    )
    def test_incomplete_entries_read_as_missing(self, client: MagicMock, stored) -> None:
        client.hgetall.return_value = stored
        storage = RedisStorageBackend(client=client)
        assert storage.get(POST) is None

    def test_delete_and_close(self, client: MagicMock) -> None:
        client.delete.return_value = 1
        storage = RedisStorageBackend(client=client)

        assert storage.delete(POST) is True
        storage.close()
        client.close.assert_called_once()


class TestCreateStorageBackend:
    def test_memory(self) -> None:
        assert isinstance(create_storage_backend(StorageBackendConfig()), MemoryStorageBackend)

    def test_redis(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REDIS_URL", "redis://localhost:6379/2")
        backend = create_storage_backend(StorageBackendConfig(backend_type="redis"))
        assert isinstance(backend, RedisStorageBackend)
