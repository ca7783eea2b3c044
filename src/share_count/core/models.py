"""Data models for subjects, cached payloads and parsed counts."""

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Subject:
    """The site as a whole, or a single content item.

    Attributes:
        id: Subject identifier; the site-wide subject uses a sentinel id
        url: Canonical URL whose shares are counted
        title: Human readable title used in share links
        image: Image URL for networks that pin media
        published_at: Publish time in epoch seconds (None for the site)
        is_site: Whether this is the site-wide subject
    """

    id: str
    url: str
    title: str = ""
    image: str = ""
    published_at: Optional[int] = None
    is_site: bool = False


@dataclass(frozen=True)
class CachedPayload:
    """Raw provider response together with the time it was fetched."""

    body: str
    updated_at: int

    def to_dict(self) -> dict[str, Any]:
        return {"body": self.body, "updated_at": self.updated_at}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CachedPayload":
        return cls(body=data["body"], updated_at=int(data["updated_at"]))


class FacebookCounts(BaseModel):
    """Composite Facebook channel as reported by SharedCount."""

    model_config = ConfigDict(extra="allow")

    total_count: int = 0
    like_count: int = 0
    share_count: int = 0
    comment_count: int = 0
    click_count: int = 0
    commentsbox_count: int = 0


class ParsedCounts(BaseModel):
    """Validated SharedCount `/url` response.

    Field names follow the provider's keys. Channels missing from the
    response are 0; keys the schema does not know about are kept as extras.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    facebook: FacebookCounts = Field(default_factory=FacebookCounts, alias="Facebook")
    twitter: int = Field(default=0, alias="Twitter")
    pinterest: int = Field(default=0, alias="Pinterest")
    linkedin: int = Field(default=0, alias="LinkedIn")
    google_plus_one: int = Field(default=0, alias="GooglePlusOne")
    stumbleupon: int = Field(default=0, alias="StumbleUpon")
    delicious: int = Field(default=0, alias="Delicious")
    buzz: int = Field(default=0, alias="Buzz")
    diggs: int = Field(default=0, alias="Diggs")
    reddit: int = Field(default=0, alias="Reddit")

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the provider's key layout."""
        return self.model_dump(by_alias=True)


def parse_payload(body: Optional[str]) -> Optional[ParsedCounts]:
    """Parse a raw provider body, or return None if it is empty or malformed."""
    if not body:
        return None
    try:
        data = json.loads(body)
    except json.JSONDecodeError:
        logger.warning("Share count payload is not valid JSON")
        return None
    if not isinstance(data, dict):
        logger.warning("Share count payload is not a JSON object")
        return None
    if "Error" in data:
        logger.warning("Share count API reported an error: %s", data["Error"])
        return None
    if not any(data.get(field.alias) is not None for field in ParsedCounts.model_fields.values()):
        logger.warning("Share count payload has no known channels")
        return None
    # The provider reports missing counts as null.
    data = {k: v for k, v in data.items() if v is not None}
    if isinstance(data.get("Facebook"), dict):
        data["Facebook"] = {k: v for k, v in data["Facebook"].items() if v is not None}
    try:
        return ParsedCounts.model_validate(data)
    except ValidationError as exc:
        logger.warning("Share count payload failed validation: %s", exc)
        return None


@dataclass
class ShareLink:
    """Everything needed to render one share link."""

    type: str
    url: str
    title: str
    image: str
    count: int
    link: str = ""
    label: str = ""
    icon: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "url": self.url,
            "title": self.title,
            "image": self.image,
            "count": self.count,
            "link": self.link,
            "label": self.label,
            "icon": self.icon,
        }
