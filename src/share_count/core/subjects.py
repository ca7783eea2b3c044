"""Subject resolution: turn an identifier into a URL, title and image."""

from __future__ import annotations

import threading
from typing import Optional, Protocol, runtime_checkable

from share_count.core.config import SITE_SUBJECT_ID
from share_count.core.exceptions import SubjectNotFoundError
from share_count.core.models import Subject


@runtime_checkable
class SubjectResolver(Protocol):
    """Anything that can look up a subject by identifier."""

    def resolve(self, subject_id: str | int) -> Subject:
        """Return the subject or raise SubjectNotFoundError."""
        ...


class StaticSubjectResolver:
    """In-memory registry of the site and its content items.

    The site subject has no publish date, so it always lands in the oldest
    staleness tier. Items registered without an image use the default image.
    """

    def __init__(
        self,
        site_url: str,
        site_title: str = "",
        default_image: str = "",
        site_id: str = SITE_SUBJECT_ID,
    ) -> None:
        self._lock = threading.RLock()
        self._site_id = site_id
        self._default_image = default_image
        self._site = Subject(
            id=site_id,
            url=site_url,
            title=site_title,
            image=default_image,
            published_at=None,
            is_site=True,
        )
        self._items: dict[str, Subject] = {}

    def add(
        self,
        item_id: str | int,
        url: str,
        title: str = "",
        published_at: Optional[int] = None,
        image: Optional[str] = None,
    ) -> Subject:
        """Register a content item and return its subject."""
        key = str(item_id)
        if key == self._site_id:
            raise ValueError(f"{key!r} is reserved for the site-wide subject")
        subject = Subject(
            id=key,
            url=url,
            title=title,
            image=image or self._default_image,
            published_at=published_at,
        )
        with self._lock:
            self._items[key] = subject
        return subject

    def resolve(self, subject_id: str | int) -> Subject:
        key = str(subject_id)
        if key == self._site_id:
            return self._site
        with self._lock:
            subject = self._items.get(key)
        if subject is None:
            raise SubjectNotFoundError(key)
        return subject
