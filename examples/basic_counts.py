"""
Example: Basic share count usage.

This example shows how to build a ShareCountCache, read counts for the site
and a single post, and render share links.

Set SHARED_COUNT_API_KEY before running; without a key no request is made
and every count reads as 0.
"""

import logging
import time

from share_count import LinkRenderer, ShareCountCache, ShareCountConfig, StaticSubjectResolver


def main():
    logging.basicConfig(level=logging.INFO)

    resolver = StaticSubjectResolver(
        site_url="https://www.python.org",
        site_title="Python",
        default_image="https://www.python.org/static/opengraph-icon-200x200.png",
    )
    resolver.add(
        1,
        url="https://www.python.org/downloads/",
        title="Download Python",
        published_at=int(time.time()) - 3 * 24 * 3600,
    )

    cache = ShareCountCache(resolver=resolver, config=ShareCountConfig.from_env())

    print("=== Site counts ===")
    counts = cache.get_counts("site", structured=True)
    if counts is None:
        print("No counts available yet")
    else:
        for key, value in counts.to_dict().items():
            print(f"{key}: {value}")

    print("\n=== Single counts for post 1 ===")
    for channel in ["facebook", "twitter", "pinterest", "linkedin"]:
        print(f"{channel}: {cache.get_single_count(1, channel)}")

    print("\n=== Share links ===")
    LinkRenderer(cache).render(["facebook", "twitter", "pinterest"], 1, echo=True)
    print()


if __name__ == "__main__":
    main()
