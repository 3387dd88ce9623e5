"""Tests for the bundled mock news feed."""

from datetime import date, datetime, timezone
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from current_affairs.adapters.sources import MockNewsFeed, load_mock_records
from current_affairs.aggregator import NewsAggregator
from current_affairs.core import NewsSource


def test_bundle_has_seven_days_of_five_sources() -> None:
    """Test the bundled YAML covers every source on every day."""
    records = load_mock_records()

    assert list(records) == [f"day{n}" for n in range(1, 8)]
    for day_records in records.values():
        assert sorted(record["source"] for record in day_records) == sorted(
            source.value for source in NewsSource
        )


def test_day_number_is_relative_and_clamped() -> None:
    """Test calendar dates map onto day1..day7."""
    feed = MockNewsFeed(today=date(2024, 9, 8))

    assert feed.day_number(date(2024, 9, 1)) == 1
    assert feed.day_number(date(2024, 9, 7)) == 7
    assert feed.day_number(date(2024, 8, 1)) == 1
    assert feed.day_number(date(2024, 9, 8)) == 7


@pytest.mark.asyncio
async def test_fetch_items_for_source_and_day() -> None:
    """Test items are filtered by source and dated relative to today."""
    feed = MockNewsFeed(today=date(2024, 9, 8))

    items = await feed.fetch_items(NewsSource.PIB, date(2024, 9, 1))

    assert [item.id for item in items] == ["pib-001"]
    item = items[0]
    assert item.title.startswith("Cabinet approves PM-VISHWAKARMA Scheme")
    assert item.published_at == datetime(2024, 9, 1, 10, tzinfo=timezone.utc)
    assert "scheme" in item.tags
    assert item.author is None


@pytest.mark.asyncio
async def test_fetch_all_returns_week_for_source() -> None:
    """Test fetch_all spans the whole bundle."""
    feed = MockNewsFeed(today=date(2024, 9, 8))

    items = await feed.fetch_all(NewsSource.THE_HINDU)

    assert [item.id for item in items] == [f"hindu-00{n}" for n in range(1, 8)]
    assert items[0].author == "Legal Correspondent"


@pytest.mark.asyncio
async def test_unknown_source_is_rejected_downstream() -> None:
    """Test records with an unknown source never pass validation."""
    with TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "news.yaml"
        path.write_text(
            "day7:\n"
            "  - id: x-1\n"
            "    source: Tabloid\n"
            "    title: Gossip\n"
            f"    content: {'a' * 120}\n"
            "    tags: [gossip]\n",
            encoding="utf-8",
        )
        feed = MockNewsFeed(today=date(2024, 9, 8), data_path=path)

    item = feed.items_for_day(7)[0]
    assert item.source is None
    assert not NewsAggregator(feed).validate_news_item(item)
