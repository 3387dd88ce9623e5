"""News aggregation: fetch, normalise and validate raw articles."""

import re
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from current_affairs.core import NewsFeed
from current_affairs.core.entities import NewsItem, NewsSource

MIN_CONTENT_LENGTH = 100
DEFAULT_AUTHOR = "Staff Reporter"

SOURCE_DOMAINS: dict[str, NewsSource] = {
    "pib.gov.in": NewsSource.PIB,
    "thehindu.com": NewsSource.THE_HINDU,
    "indianexpress.com": NewsSource.INDIAN_EXPRESS,
    "economictimes.com": NewsSource.ECONOMIC_TIMES,
    "downtoearth.org": NewsSource.DOWN_TO_EARTH,
}

SOURCE_ID_PREFIXES: dict[NewsSource, str] = {
    NewsSource.PIB: "pib",
    NewsSource.THE_HINDU: "hindu",
    NewsSource.INDIAN_EXPRESS: "ie",
    NewsSource.ECONOMIC_TIMES: "et",
    NewsSource.DOWN_TO_EARTH: "dte",
}

SOURCE_URLS: dict[NewsSource, str] = {
    NewsSource.PIB: "https://pib.gov.in",
    NewsSource.THE_HINDU: "https://thehindu.com",
    NewsSource.INDIAN_EXPRESS: "https://indianexpress.com",
    NewsSource.ECONOMIC_TIMES: "https://economictimes.com",
    NewsSource.DOWN_TO_EARTH: "https://downtoearth.org.in",
}

# (substring, tag) pairs
BULLETIN_TAGS = [
    ("scheme", "scheme"),
    ("cabinet", "cabinet decision"),
    ("minister", "ministerial announcement"),
    ("policy", "policy"),
    ("budget", "budget"),
]
EDITORIAL_TAGS = [
    ("analysis", "analysis"),
    ("opinion", "opinion"),
    ("perspective", "perspective"),
    ("debate", "debate"),
]

AUTHOR_PATTERN = re.compile(r"By\s+([^,\n]+)", re.IGNORECASE)


class NewsAggregator:
    """Pull articles from a feed and keep only well-formed ones."""

    def __init__(
        self,
        feed: NewsFeed,
        sources: Optional[list[NewsSource]] = None,
    ) -> None:
        self.feed = feed
        self.sources = sources or list(NewsSource)

    async def fetch_news(self, source: NewsSource, day: date) -> list[NewsItem]:
        """Articles one source published on a given day, unvalidated."""
        return await self.feed.fetch_items(source, day)

    def validate_news_item(self, item: NewsItem) -> bool:
        if not item.id or not item.title or not item.content or not item.source:
            return False
        if len(item.content) < MIN_CONTENT_LENGTH:
            return False
        if not isinstance(item.published_at, datetime):
            return False
        if not item.tags:
            return False
        return True

    async def fetch_multiple_sources(
        self, sources: list[NewsSource], day: date
    ) -> list[NewsItem]:
        """Merge sources for a day, drop invalid items, newest first.

        Items published at the same moment keep source order.
        """
        items: list[NewsItem] = []
        for source in sources:
            items.extend(await self.fetch_news(source, day))

        return sort_newest_first([item for item in items if self.validate_news_item(item)])

    async def fetch_weekly_news(self, start: date) -> dict[str, list[NewsItem]]:
        """Seven consecutive days keyed "day1" .. "day7"."""
        weekly: dict[str, list[NewsItem]] = {}
        for offset in range(7):
            day = start + timedelta(days=offset)
            weekly[f"day{offset + 1}"] = await self.fetch_multiple_sources(self.sources, day)
        return weekly

    async def parse_rss_feed(self, feed_url: str) -> list[NewsItem]:
        """Resolve a feed URL to its publisher and return that publisher's items."""
        return await self.feed.fetch_all(source_for_url(feed_url))

    def parse_raw_content(
        self,
        raw: str,
        source: NewsSource,
        received_at: Optional[datetime] = None,
    ) -> NewsItem:
        """
        Normalise a raw article body into a NewsItem.

        The first line is the title and the rest is the body. Government bulletins
        get policy tags; every other source is treated as editorial and gets an
        author line and editorial tags.

        Args:
            raw: Raw article text
            source: Publisher of the text
            received_at: Timestamp used for the id and publish date (defaults to now)
        """
        moment = received_at or datetime.now(timezone.utc)
        lines = raw.split("\n")
        title = lines[0].strip() or "Untitled"
        body = "\n".join(lines[1:]).strip()
        lowered = raw.lower()

        if source == NewsSource.PIB:
            author = None
            tags = [tag for needle, tag in BULLETIN_TAGS if needle in lowered]
        else:
            match = AUTHOR_PATTERN.search(raw)
            author = match.group(1).strip() if match else DEFAULT_AUTHOR
            tags = [tag for needle, tag in EDITORIAL_TAGS if needle in lowered]

        return NewsItem(
            id=f"{SOURCE_ID_PREFIXES[source]}-{int(moment.timestamp() * 1000)}",
            source=source,
            title=title,
            content=body,
            published_at=moment,
            url=SOURCE_URLS[source],
            tags=tags,
            author=author,
            original_length=len(raw),
        )


def source_for_url(feed_url: str) -> NewsSource:
    """Publisher whose domain appears in the URL; PIB when none does."""
    for domain, source in SOURCE_DOMAINS.items():
        if domain in feed_url:
            return source
    return NewsSource.PIB


def sort_newest_first(items: list[NewsItem]) -> list[NewsItem]:
    """Stable sort by publish time, newest first. Expects validated items."""
    return sorted(items, key=lambda item: _timestamp(item.published_at), reverse=True)


def _timestamp(published_at: datetime) -> float:
    if published_at.tzinfo is None:
        published_at = published_at.replace(tzinfo=timezone.utc)
    return published_at.timestamp()
