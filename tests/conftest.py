"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

import sys

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from share_count.core.subjects import StaticSubjectResolver  # noqa: E402

NOW = 1_700_000_000
MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR

SAMPLE_COUNTS = {
    "StumbleUpon": 3,
    "Reddit": None,
    "Facebook": {
        "commentsbox_count": 0,
        "click_count": 0,
        "total_count": 42,
        "comment_count": 5,
        "like_count": 12,
        "share_count": 25,
    },
    "Delicious": 0,
    "GooglePlusOne": 7,
    "Buzz": 0,
    "Twitter": 19,
    "Diggs": 0,
    "Pinterest": 4,
    "LinkedIn": 11,
}


class FakeClient:
    """SharedCount client stand-in returning queued bodies."""

    def __init__(self, *bodies):
        self.bodies = list(bodies)
        self.calls: list[str] = []
        self.closed = False

    def fetch(self, url):
        self.calls.append(url)
        if not self.bodies:
            return None
        return self.bodies.pop(0)

    def close(self):
        self.closed = True


class FakeClock:
    def __init__(self, now: float = NOW) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def sample_body() -> str:
    return json.dumps(SAMPLE_COUNTS)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def resolver() -> StaticSubjectResolver:
    resolver = StaticSubjectResolver(
        site_url="https://example.com",
        site_title="Example",
        default_image="https://example.com/logo.png",
    )
    resolver.add(1, url="https://example.com/new-post", title="New Post", published_at=NOW - HOUR)
    resolver.add(2, url="https://example.com/week-old", title="Week Old", published_at=NOW - 7 * DAY)
    return resolver
