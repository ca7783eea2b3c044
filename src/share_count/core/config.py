"""Configuration for the share count cache with pydantic-based settings."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_DOMAIN = "http://free.sharedcount.com"
SITE_SUBJECT_ID = "site"

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR


class StalenessRule(BaseModel):
    """One tier of the refresh schedule.

    Attributes:
        max_subject_age: Subjects published at most this many seconds ago fall
            into the tier. None matches any age, including no publish date.
        refresh_interval: Seconds a cached payload stays fresh in this tier.
    """

    max_subject_age: Optional[int] = Field(
        default=None, ge=0, description="Maximum subject age in seconds (None = any)"
    )
    refresh_interval: int = Field(
        gt=0, description="Seconds before a cached payload becomes stale"
    )


def default_staleness_rules() -> list[StalenessRule]:
    """Newer content churns faster, so it refreshes more often."""
    return [
        StalenessRule(max_subject_age=DAY, refresh_interval=30 * MINUTE),
        StalenessRule(max_subject_age=5 * DAY, refresh_interval=6 * HOUR),
        StalenessRule(max_subject_age=None, refresh_interval=2 * DAY),
    ]


class SharedCountSettings(BaseSettings):
    """SharedCount API credentials read from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="SHARED_COUNT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: str = Field(default="", description="SharedCount API key")
    api_domain: str = Field(
        default=DEFAULT_API_DOMAIN, description="Base URL of the SharedCount API"
    )
    site_url: str = Field(
        default="http://localhost", description="Canonical URL of the site subject"
    )
    site_title: str = Field(default="", description="Site name used in share links")
    default_image: str = Field(
        default="", description="Image used when a subject has none"
    )

    def is_configured(self) -> bool:
        """Check if an API key is set."""
        return bool(self.api_key)


class RedisConfig(BaseSettings):
    """Configuration for Redis connectivity."""

    model_config = SettingsConfigDict(
        env_prefix="REDIS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    url: Optional[str] = Field(default=None, description="Redis connection URL")
    host: Optional[str] = Field(default=None, description="Redis server host")
    port: int = Field(default=6379, description="Redis server port")
    db: int = Field(default=0, ge=0, description="Redis database number")
    password: Optional[str] = Field(default=None, description="Redis password")

    def is_configured(self) -> bool:
        """Check if Redis is configured."""
        return self.url is not None or self.host is not None

    def is_url_based(self) -> bool:
        """Check if Redis is configured using URL."""
        return self.url is not None


class StorageBackendConfig(BaseModel):
    """Configuration for storage backend selection and settings.

    Attributes:
        backend_type: Type of storage backend ('memory' or 'redis')
        redis: Redis connection configuration (required if backend_type='redis')
        prefix: Key prefix for storage backend
    """

    backend_type: Literal["memory", "redis"] = Field(
        default="memory", description="Storage backend type: 'memory' or 'redis'"
    )
    redis: Optional[RedisConfig] = Field(
        default=None,
        description="Redis configuration (required if backend_type='redis')",
    )
    prefix: str = Field(
        default="share_count:", description="Key prefix for storage backend"
    )

    @model_validator(mode="after")
    def validate_redis_required(self) -> "StorageBackendConfig":
        """Ensure Redis config is provided when backend_type is redis."""
        if self.backend_type == "redis" and self.redis is None:
            self.redis = RedisConfig()
            if not self.redis.is_configured():
                raise ValueError(
                    "Redis configuration required when backend_type='redis'. "
                    "Set REDIS_URL or REDIS_HOST environment variable."
                )
        return self


class ShareCountConfig(BaseModel):
    """Configuration for the share count cache.

    Attributes:
        api_key: SharedCount API key. An empty key disables all fetches.
        api_domain: Base URL of the SharedCount API
        request_timeout: Seconds to wait for the API (None waits forever)
        site_id: Identifier of the site-wide subject
        staleness_rules: Refresh tiers, newest content first
        storage: Storage backend configuration
    """

    api_key: str = Field(default="", description="SharedCount API key")
    api_domain: str = Field(
        default=DEFAULT_API_DOMAIN, description="Base URL of the SharedCount API"
    )
    request_timeout: Optional[float] = Field(
        default=10.0, gt=0, description="HTTP timeout in seconds"
    )
    site_id: str = Field(
        default=SITE_SUBJECT_ID, min_length=1, description="Site-wide subject id"
    )
    staleness_rules: list[StalenessRule] = Field(
        default_factory=default_staleness_rules,
        description="Refresh tiers ordered from newest to oldest content",
    )
    storage: Optional[StorageBackendConfig] = Field(
        default=None, description="Storage backend configuration"
    )

    @model_validator(mode="after")
    def validate_staleness_rules(self) -> "ShareCountConfig":
        """Validate tier ordering and the trailing catch-all tier."""
        rules = self.staleness_rules
        if not rules or rules[-1].max_subject_age is not None:
            raise ValueError(
                "staleness_rules must end with a catch-all rule (max_subject_age=None)"
            )
        bounded = [r.max_subject_age for r in rules[:-1]]
        if None in bounded:
            raise ValueError("only the last staleness rule may omit max_subject_age")
        if bounded != sorted(bounded):
            raise ValueError("staleness_rules must be ordered from newest to oldest")
        if self.storage is None:
            self.storage = StorageBackendConfig()
        return self

    @classmethod
    def from_env(cls, **overrides) -> "ShareCountConfig":
        """Build a config with API credentials taken from the environment."""
        settings = SharedCountSettings()
        values = {"api_key": settings.api_key, "api_domain": settings.api_domain}
        values.update(overrides)
        return cls(**values)

