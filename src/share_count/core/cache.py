"""Refresh-on-read cache for social share counts."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any, Literal, overload

from share_count.core.channels import UnknownChannelResolver, extract_count, zero_count
from share_count.core.client import SharedCountClient
from share_count.core.config import ShareCountConfig
from share_count.core.models import CachedPayload, ParsedCounts, Subject, parse_payload
from share_count.core.policy import StalenessPolicy
from share_count.core.storage.base import StorageBackend
from share_count.core.subjects import SubjectResolver

logger = logging.getLogger(__name__)


class ShareCountCache:
    """Share counts per subject, re-fetched when the staleness policy says so.

    A read resolves the subject, loads its cached payload and asks the
    StalenessPolicy whether it is too old. Missing or stale payloads trigger
    one call to the SharedCount API. A successful response is stored together
    with the current time; a failed one leaves storage untouched and the
    previous payload, stale or not, is returned instead.

    Example:
        resolver = StaticSubjectResolver(site_url="https://example.com")
        resolver.add(42, url="https://example.com/hello", published_at=1700000000)

        cache = ShareCountCache(
            config=ShareCountConfig(api_key="secret"),
            resolver=resolver,
        )
        cache.get_single_count(42, "facebook")
    """

    def __init__(
        self,
        resolver: SubjectResolver,
        config: ShareCountConfig | None = None,
        storage: StorageBackend | None = None,
        client: SharedCountClient | None = None,
        policy: StalenessPolicy | None = None,
        unknown_channel: UnknownChannelResolver | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.config = config or ShareCountConfig()
        self._resolver = resolver

        if storage is not None:
            self._storage = storage
        else:
            from share_count.core.storage.config import create_storage_backend

            # config.storage is guaranteed to exist due to ShareCountConfig validation
            assert self.config.storage is not None
            self._storage = create_storage_backend(self.config.storage)

        self._client = client or SharedCountClient.from_config(self.config)
        self._policy = policy or StalenessPolicy(self.config.staleness_rules)
        self._unknown_channel = unknown_channel or zero_count
        self._clock = clock

    @property
    def storage(self) -> Any:
        return self._storage

    @property
    def resolver(self) -> SubjectResolver:
        return self._resolver

    @property
    def policy(self) -> StalenessPolicy:
        return self._policy

    def _fetch_and_store(self, subject: Subject, now: float) -> CachedPayload | None:
        """Fetch fresh counts and persist them; None if nothing usable came back."""
        body = self._client.fetch(subject.url)
        if body is None:
            return None
        if parse_payload(body) is None:
            logger.warning("Discarding malformed share counts for subject %s", subject.id)
            return None

        payload = CachedPayload(body=body, updated_at=int(now))
        self._storage.set(subject, payload)
        logger.info("Refreshed share counts for subject %s", subject.id)
        return payload

    def _load(self, subject_id: str | int, force: bool = False) -> CachedPayload | None:
        subject = self._resolver.resolve(subject_id)
        cached = self._storage.get(subject)
        now = self._clock()

        last_refresh = cached.updated_at if cached is not None else None
        if force or self._policy.needs_refresh(last_refresh, subject.published_at, now):
            fresh = self._fetch_and_store(subject, now)
            if fresh is not None:
                return fresh
            if cached is not None:
                logger.debug("Serving stale share counts for subject %s", subject.id)
        return cached

    @overload
    def get_counts(
        self, subject_id: str | int, structured: Literal[False] = ...
    ) -> CachedPayload | None: ...

    @overload
    def get_counts(
        self, subject_id: str | int, structured: Literal[True]
    ) -> ParsedCounts | None: ...

    def get_counts(
        self, subject_id: str | int, structured: bool = False
    ) -> CachedPayload | ParsedCounts | None:
        """Return the authoritative counts for a subject.

        Args:
            subject_id: Subject identifier, or the site id for site-wide counts
            structured: Return ParsedCounts instead of the raw CachedPayload

        Returns:
            The cached or freshly fetched payload, or None when nothing has
            ever been fetched successfully (or the stored payload is malformed
            and structured output was requested).

        Raises:
            SubjectNotFoundError: If the resolver does not know the subject.
        """
        payload = self._load(subject_id)
        if payload is None:
            return None
        if structured:
            return parse_payload(payload.body)
        return payload

    def refresh(self, subject_id: str | int) -> CachedPayload | None:
        """Fetch counts regardless of staleness, keeping the old payload on failure."""
        return self._load(subject_id, force=True)

    def get_single_count(self, subject_id: str | int, channel: str = "facebook") -> int:
        """Return one channel's count for a subject, 0 when nothing is cached."""
        counts = self.get_counts(subject_id, structured=True)
        if counts is None:
            return 0
        return extract_count(counts, channel, self._unknown_channel)

    def close(self) -> None:
        """Clean up resources."""
        self._storage.close()
        self._client.close()

    def __enter__(self) -> "ShareCountCache":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
        return None
