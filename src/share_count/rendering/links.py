"""Share link rendering with counts."""

from __future__ import annotations

import html
import logging
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TextIO
from urllib.parse import quote

from share_count.core.cache import ShareCountCache
from share_count.core.models import ShareLink, Subject
from share_count.core.subjects import SubjectResolver

logger = logging.getLogger(__name__)

LinkHook = Callable[[ShareLink], ShareLink]


@dataclass(frozen=True)
class LinkTemplate:
    """Share URL pattern, label and icon class for one channel.

    The pattern is formatted with ``url``, ``title`` and ``image``, each
    already percent-encoded.
    """

    pattern: str
    label: str
    icon: str


LINK_TEMPLATES: dict[str, LinkTemplate] = {
    "facebook": LinkTemplate(
        "https://www.facebook.com/plugins/like.php?href={url}",
        "Facebook",
        "fa fa-facebook",
    ),
    "facebook_likes": LinkTemplate(
        "https://www.facebook.com/plugins/like.php?href={url}",
        "Like",
        "fa fa-facebook",
    ),
    "facebook_shares": LinkTemplate(
        "https://www.facebook.com/plugins/share_button.php?href={url}",
        "Share",
        "fa fa-facebook",
    ),
    "twitter": LinkTemplate(
        "https://twitter.com/share?url={url}&text={title}",
        "Tweet",
        "fa fa-twitter",
    ),
    "pinterest": LinkTemplate(
        "https://pinterest.com/pin/create/button/?url={url}&media={image}&description={title}",
        "Pin",
        "fa fa-pinterest-p",
    ),
    "linkedin": LinkTemplate(
        "https://www.linkedin.com/shareArticle?mini=true&url={url}",
        "LinkedIn",
        "fa fa-linkedin",
    ),
    "google": LinkTemplate(
        "https://plus.google.com/share?url={url}",
        "Google+",
        "fa fa-google-plus",
    ),
    "stumbleupon": LinkTemplate(
        "https://www.stumbleupon.com/submit?url={url}&title={title}",
        "StumbleUpon",
        "fa fa-stumbleupon",
    ),
}


def css_class(value: str) -> str:
    """Strip everything but letters, digits, '-' and '_' from a class name."""
    return "".join(ch for ch in value if ch.isalnum() or ch in "-_")


def render_fragment(link: ShareLink) -> str:
    """Render one share link as an anchor element."""
    return (
        f'<a href="{html.escape(link.link)}" target="_blank" rel="noopener" '
        f'class="share-count {css_class(link.type)}">'
        f'<i class="{html.escape(link.icon)}"></i>'
        f'<span class="share-count-label">{html.escape(link.label)}</span> '
        f'<span class="share-count-value">{link.count}</span>'
        "</a>"
    )


class LinkRenderer:
    """Build and render share links for a subject.

    Args:
        cache: Source of the per-channel counts
        resolver: Subject resolver; defaults to the cache's resolver
        on_link: Hook called with each ShareLink before rendering. It may
            return a modified link, and may fill in a link for channels
            without a built-in template.
    """

    def __init__(
        self,
        cache: ShareCountCache,
        resolver: SubjectResolver | None = None,
        on_link: LinkHook | None = None,
    ) -> None:
        self._cache = cache
        self._resolver = resolver or cache.resolver
        self._on_link = on_link

    def _base_link(self, channel: str, subject: Subject) -> ShareLink:
        template = LINK_TEMPLATES.get(channel)
        # Untemplated channels are counted only when a hook may claim them.
        count = 0
        if template is not None or self._on_link is not None:
            count = self._cache.get_single_count(subject.id, channel)
        link = ShareLink(
            type=channel,
            url=subject.url,
            title=subject.title,
            image=subject.image,
            count=count,
        )
        if template is not None:
            link.link = template.pattern.format(
                url=quote(subject.url, safe=""),
                title=quote(subject.title, safe=""),
                image=quote(subject.image, safe=""),
            )
            link.label = template.label
            link.icon = template.icon
        return link

    def build_link(self, channel: str, subject_id: str | int) -> ShareLink | None:
        """Return the link record for one channel, or None if it cannot be built."""
        subject = self._resolver.resolve(subject_id)
        link = self._base_link(channel, subject)
        if self._on_link is not None:
            link = self._on_link(link)
        if not link.link:
            logger.warning("No share link template for channel %r", channel)
            return None
        return link

    def build_links(self, channels: str | Iterable[str], subject_id: str | int) -> list[ShareLink]:
        if isinstance(channels, str):
            channels = [channels]
        links = []
        for channel in channels:
            link = self.build_link(channel, subject_id)
            if link is not None:
                links.append(link)
        return links

    def render(
        self,
        channels: str | Iterable[str],
        subject_id: str | int,
        echo: bool = False,
        stream: TextIO | None = None,
    ) -> str | None:
        """Render share links in the requested order.

        Returns the concatenated HTML, or writes it to ``stream`` (stdout by
        default) and returns None when ``echo`` is true.
        """
        output = "".join(render_fragment(link) for link in self.build_links(channels, subject_id))
        if echo:
            (stream or sys.stdout).write(output)
            return None
        return output
