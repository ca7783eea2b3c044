"""Tests for share link rendering."""

import io

import pytest

from share_count.core.cache import ShareCountCache
from share_count.core.config import ShareCountConfig
from share_count.core.models import ShareLink
from share_count.core.storage import MemoryStorageBackend
from share_count.rendering.links import LINK_TEMPLATES, LinkRenderer, render_fragment

from conftest import FakeClient


@pytest.fixture
def cache(resolver, clock, sample_body) -> ShareCountCache:
    return ShareCountCache(
        resolver=resolver,
        config=ShareCountConfig(api_key="test-key"),
        storage=MemoryStorageBackend(),
        client=FakeClient(sample_body),
        clock=clock,
    )


class TestLinkRenderer:
    """Test cases for LinkRenderer."""

    def test_render_in_requested_order(self, cache: ShareCountCache) -> None:
        output = LinkRenderer(cache).render(["twitter", "facebook"], 1)

        assert output.count("<a ") == 2
        twitter_at = output.index("Tweet")
        facebook_at = output.index(">Facebook<")
        assert twitter_at < facebook_at
        assert '<span class="share-count-value">19</span>' in output
        assert '<span class="share-count-value">42</span>' in output

    def test_single_type_string(self, cache: ShareCountCache) -> None:
        output = LinkRenderer(cache).render("linkedin", 1)
        assert output.count("<a ") == 1
        assert "LinkedIn" in output
        assert ">11<" in output

    def test_build_link_record(self, cache: ShareCountCache) -> None:
        link = LinkRenderer(cache).build_link("twitter", 1)

        assert link is not None
        assert link.type == "twitter"
        assert link.url == "https://example.com/new-post"
        assert link.title == "New Post"
        assert link.count == 19
        assert link.label == "Tweet"
        assert link.icon == "fa fa-twitter"
        assert link.link == (
            "https://twitter.com/share?url=https%3A%2F%2Fexample.com%2Fnew-post&text=New%20Post"
        )

    def test_pinterest_uses_default_image(self, cache: ShareCountCache) -> None:
        link = LinkRenderer(cache).build_link("pinterest", 1)
        assert link is not None
        assert "media=https%3A%2F%2Fexample.com%2Flogo.png" in link.link

    def test_site_subject(self, cache: ShareCountCache) -> None:
        link = LinkRenderer(cache).build_link("facebook", "site")
        assert link is not None
        assert link.url == "https://example.com"
        assert link.title == "Example"

    def test_unknown_type_is_skipped(self, cache: ShareCountCache) -> None:
        output = LinkRenderer(cache).render(["myspace", "twitter"], 1)
        assert output.count("<a ") == 1
        assert "myspace" not in output

    def test_unknown_type_does_not_fetch(self, resolver, clock, sample_body) -> None:
        client = FakeClient(sample_body)
        cache = ShareCountCache(
            resolver=resolver,
            config=ShareCountConfig(api_key="test-key"),
            storage=MemoryStorageBackend(),
            client=client,
            clock=clock,
        )

        assert LinkRenderer(cache).render(["myspace"], 1) == ""
        assert client.calls == []

    def test_on_link_hook(self, cache: ShareCountCache) -> None:
        def customize(link: ShareLink) -> ShareLink:
            if link.type == "myspace":
                link.link = "https://myspace.com/share"
                link.label = "MySpace"
                link.icon = "fa fa-users"
            else:
                link.label = link.label.upper()
            return link

        output = LinkRenderer(cache, on_link=customize).render(["myspace", "twitter"], 1)

        assert "MySpace" in output
        assert "TWEET" in output
        assert output.index("MySpace") < output.index("TWEET")

    def test_echo_writes_to_stream(self, cache: ShareCountCache) -> None:
        stream = io.StringIO()
        result = LinkRenderer(cache).render(["twitter"], 1, echo=True, stream=stream)

        assert result is None
        assert "Tweet" in stream.getvalue()

    def test_count_is_zero_without_data(self, resolver, clock) -> None:
        cache = ShareCountCache(
            resolver=resolver,
            storage=MemoryStorageBackend(),
            client=FakeClient(),
            clock=clock,
        )
        link = LinkRenderer(cache).build_link("facebook", 1)
        assert link is not None
        assert link.count == 0

    def test_all_templates_render(self, cache: ShareCountCache) -> None:
        output = LinkRenderer(cache).render(list(LINK_TEMPLATES), 1)
        assert output.count("<a ") == len(LINK_TEMPLATES)


class TestRenderFragment:
    def test_escapes_markup(self) -> None:
        link = ShareLink(
            type='twit"ter',
            url="u",
            title="t",
            image="",
            count=1,
            link='https://x.test/?a=1&b="2"',
            label="<b>Tweet</b>",
            icon="fa",
        )
        fragment = render_fragment(link)
        assert 'href="https://x.test/?a=1&amp;b=&quot;2&quot;"' in fragment
        assert "&lt;b&gt;Tweet&lt;/b&gt;" in fragment
        assert 'class="share-count twitter"' in fragment
