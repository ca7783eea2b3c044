"""
Share Count

Fetches and caches social share counts from the SharedCount API and renders
share links annotated with those counts.

Features:
- Age-based staleness policy: newer content is refreshed more often
- Refresh-on-read cache that falls back to stale data when the API fails
- Pluggable storage backends (in-memory, Redis)
- Share link rendering for the supported networks
"""

from share_count.core.cache import ShareCountCache
from share_count.core.config import ShareCountConfig, StalenessRule
from share_count.core.models import CachedPayload, ParsedCounts, ShareLink, Subject
from share_count.core.policy import StalenessPolicy
from share_count.core.subjects import StaticSubjectResolver
from share_count.rendering.links import LinkRenderer

__version__ = "0.1.0"
__all__ = [
    "ShareCountCache",
    "ShareCountConfig",
    "StalenessRule",
    "CachedPayload",
    "ParsedCounts",
    "ShareLink",
    "Subject",
    "StalenessPolicy",
    "StaticSubjectResolver",
    "LinkRenderer",
]
