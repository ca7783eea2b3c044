"""Core components for share count caching."""

from share_count.core.cache import ShareCountCache
from share_count.core.client import SharedCountClient
from share_count.core.config import (
    RedisConfig,
    SharedCountSettings,
    ShareCountConfig,
    StalenessRule,
    StorageBackendConfig,
)
from share_count.core.exceptions import ShareCountError, SubjectNotFoundError
from share_count.core.models import CachedPayload, ParsedCounts, ShareLink, Subject
from share_count.core.policy import StalenessPolicy
from share_count.core.subjects import StaticSubjectResolver, SubjectResolver

__all__ = [
    "ShareCountCache",
    "SharedCountClient",
    "ShareCountConfig",
    "SharedCountSettings",
    "RedisConfig",
    "StalenessRule",
    "StorageBackendConfig",
    "ShareCountError",
    "SubjectNotFoundError",
    "CachedPayload",
    "ParsedCounts",
    "ShareLink",
    "Subject",
    "StalenessPolicy",
    "StaticSubjectResolver",
    "SubjectResolver",
]
