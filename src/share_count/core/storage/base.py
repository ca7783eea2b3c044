"""Storage backend interface and key layout."""

from typing import Protocol

from share_count.core.models import CachedPayload, Subject

# Attribute names shared by the site-wide settings and per-item metadata.
PAYLOAD_FIELD = "share_count"
TIMESTAMP_FIELD = "share_count_datetime"


def storage_key(subject: Subject) -> str:
    """Return the key under which a subject's payload lives.

    The site is stored as global options, items as metadata scoped to their id.
    """
    if subject.is_site:
        return "option"
    return f"meta:{subject.id}"


class StorageBackend(Protocol):
    """Persistent key/value store for cached payloads."""

    def get(self, subject: Subject) -> CachedPayload | None:
        ...

    def set(self, subject: Subject, payload: CachedPayload) -> None:
        ...

    def delete(self, subject: Subject) -> bool:
        ...

    def close(self) -> None:
        ...
