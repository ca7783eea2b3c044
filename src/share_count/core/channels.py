"""Mapping from channel names to counts inside a parsed payload."""

from collections.abc import Callable

from share_count.core.models import ParsedCounts

UnknownChannelResolver = Callable[[str, ParsedCounts], int]

CHANNEL_EXTRACTORS: dict[str, Callable[[ParsedCounts], int]] = {
    "facebook": lambda c: c.facebook.total_count,
    "facebook_likes": lambda c: c.facebook.like_count,
    "facebook_shares": lambda c: c.facebook.share_count,
    "facebook_comments": lambda c: c.facebook.comment_count,
    "twitter": lambda c: c.twitter,
    "pinterest": lambda c: c.pinterest,
    "linkedin": lambda c: c.linkedin,
    "google": lambda c: c.google_plus_one,
    "stumbleupon": lambda c: c.stumbleupon,
}


def zero_count(channel: str, counts: ParsedCounts) -> int:
    """Default resolver for channels without an extractor."""
    return 0


def extract_count(
    counts: ParsedCounts,
    channel: str,
    unknown_channel: UnknownChannelResolver = zero_count,
) -> int:
    """Return the count for a channel, deferring unknown names to a resolver."""
    extractor = CHANNEL_EXTRACTORS.get(channel)
    if extractor is None:
        return int(unknown_channel(channel, counts))
    return extractor(counts)
