"""Static mock feed standing in for the publishers' RSS feeds."""

from datetime import date, datetime, time, timedelta, timezone
from pathlib import Path
from typing import Optional

import yaml

from current_affairs.core import NewsFeed
from current_affairs.core.entities import NewsItem, NewsSource

DEFAULT_DATA_PATH = Path(__file__).resolve().parents[2] / "data" / "mock_news.yaml"
DAYS_IN_FEED = 7
PUBLISH_TIME = time(10, 0, tzinfo=timezone.utc)


def load_mock_records(path: Path = DEFAULT_DATA_PATH) -> dict[str, list[dict]]:
    """Load raw day-keyed records ("day1" .. "day7") from YAML."""
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


class MockNewsFeed(NewsFeed):
    """Serve a week of bundled articles relative to a reference date.

    Day N of the bundle is treated as published (8 - N) days before
    ``today`` at 10:00 UTC, so day7 is always yesterday.
    """

    emoji = "🗞️"
    name = "Mock news feed"

    def __init__(
        self,
        today: Optional[date] = None,
        data_path: Optional[Path] = None,
    ) -> None:
        self.today = today
        self.records = load_mock_records(data_path or DEFAULT_DATA_PATH)

    def _today(self) -> date:
        return self.today or date.today()

    def day_number(self, day: date) -> int:
        """Map a calendar date onto the bundle, clamping to day1..day7."""
        days_back = (self._today() - day).days
        return min(max(DAYS_IN_FEED + 1 - days_back, 1), DAYS_IN_FEED)

    def items_for_day(self, day_number: int) -> list[NewsItem]:
        records = self.records.get(f"day{day_number}", [])
        return [self._to_item(record, day_number) for record in records]

    def all_items(self) -> list[NewsItem]:
        items: list[NewsItem] = []
        for day_number in range(1, DAYS_IN_FEED + 1):
            items.extend(self.items_for_day(day_number))
        return items

    async def fetch_items(self, source: NewsSource, day: date) -> list[NewsItem]:
        return [item for item in self.items_for_day(self.day_number(day)) if item.source == source]

    async def fetch_all(self, source: NewsSource) -> list[NewsItem]:
        return [item for item in self.all_items() if item.source == source]

    def _to_item(self, record: dict, day_number: int) -> NewsItem:
        # Records with an unknown source keep source=None and fail validation downstream
        try:
            source = NewsSource(record.get("source"))
        except ValueError:
            source = None

        published_day = self._today() - timedelta(days=DAYS_IN_FEED + 1 - day_number)
        content = record.get("content", "")

        return NewsItem(
            id=record.get("id", ""),
            source=source,
            title=record.get("title", ""),
            content=content,
            published_at=datetime.combine(published_day, PUBLISH_TIME),
            url=record.get("url", ""),
            tags=list(record.get("tags") or []),
            author=record.get("author"),
            image_url=record.get("image_url"),
            original_length=record.get("original_length", len(content)),
        )
