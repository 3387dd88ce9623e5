"""Tests for text and RSS rendering."""

from datetime import date, datetime, timezone
from xml.etree import ElementTree as ET

from current_affairs.adapters.export import TextExporter
from current_affairs.adapters.export.text_exporter import long_date, short_date
from current_affairs.core import NewsItem, NewsSource
from current_affairs.generators import CompilationGenerator


def test_date_formats() -> None:
    """Test short and long date formatting."""
    assert short_date(date(2024, 9, 1)) == "1/9/2024"
    assert short_date(None) == "-"
    assert long_date(date(2024, 9, 1)) == "Sunday, 1 September 2024"


def test_render_quiz(make_analysis) -> None:
    """Test quiz layout and answer key."""
    questions = make_analysis("a").questions.prelims[:2]

    text = TextExporter().render_quiz(questions)

    assert text.startswith("📝 UPSC DAILY QUIZ")
    assert "Q1. Q1 on a?" in text
    assert "a) a\nb) b\nc) c\nd) d" in text
    assert "1. (a) - Because." in text
    assert "2. (a) - Because." in text


def test_render_weekly_report(make_analysis) -> None:
    """Test weekly report heading and sections."""
    generator = CompilationGenerator(seed=1)
    daily = generator.generate_daily_brief([make_analysis("a")], date(2024, 9, 1))
    weekly = generator.generate_weekly_compilation([daily])

    text = TextExporter().render_report(weekly)

    assert text.startswith("WEEKLY COMPILATION - Week 36")
    assert "Period: 1/9/2024 to 1/9/2024" in text
    assert "TRENDING TOPICS" in text
    assert "• Current Developments (Frequency: 1, Importance: Moderate)" in text


def test_render_rss_feed() -> None:
    """Test news items render as RSS 2.0 items."""
    item = NewsItem(
        id="hindu-1",
        source=NewsSource.THE_HINDU,
        title="Bench to examine Article 32",
        content="c" * 250,
        published_at=datetime(2024, 9, 1, 10, tzinfo=timezone.utc),
        url="https://thehindu.com/1",
        tags=["judiciary", "constitution"],
        author="Legal Correspondent",
    )

    xml = TextExporter().render_rss_feed([item], built_at=datetime(2024, 9, 2, tzinfo=timezone.utc))

    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<rss version="2.0">')
    channel = ET.fromstring(xml.split("\n", 1)[1]).find("channel")
    assert channel.findtext("lastBuildDate") == "Mon, 02 Sep 2024 00:00:00 GMT"
    entry = channel.find("item")
    assert entry.findtext("title") == "Bench to examine Article 32"
    assert entry.findtext("description") == "c" * 200 + "..."
    assert entry.findtext("pubDate") == "Sun, 01 Sep 2024 10:00:00 GMT"
    assert entry.findtext("guid") == "hindu-1"
    assert entry.findtext("author") == "Legal Correspondent"
    assert [c.text for c in entry.findall("category")] == ["judiciary", "constitution"]
