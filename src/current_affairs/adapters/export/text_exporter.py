"""Plain-text and RSS renderers for compilations and news items."""

from datetime import date, datetime, timezone
from email.utils import format_datetime
from typing import Optional, Union
from xml.etree import ElementTree as ET

from current_affairs.core import CompilationExporter
from current_affairs.core.entities import (
    DailyCompilation,
    NewsItem,
    PrelimsQuestion,
    WeeklyCompilation,
)

FEED_TITLE = "UPSC Current Affairs Feed"
FEED_LINK = "https://communityias.com/current-affairs"
FEED_DESCRIPTION = "Curated current affairs for UPSC preparation"


def short_date(day: Optional[date]) -> str:
    """Day/month/year without zero padding, e.g. 5/9/2026."""
    if day is None:
        return "-"
    return f"{day.day}/{day.month}/{day.year}"


def long_date(day: date) -> str:
    """Weekday, day month year, e.g. Saturday, 5 September 2026."""
    return f"{day.strftime('%A')}, {day.day} {day.strftime('%B')} {day.year}"


def option_letter(index: int) -> str:
    return chr(ord("a") + index)


class TextExporter(CompilationExporter):
    """Render quizzes and printable reports as plain text."""

    def render_quiz(self, questions: list[PrelimsQuestion]) -> str:
        lines = ["📝 UPSC DAILY QUIZ", "=" * 18, ""]

        for number, question in enumerate(questions, 1):
            lines.append(f"Q{number}. {question.question}")
            lines.append("")
            for index, option in enumerate(question.options):
                lines.append(f"{option_letter(index)}) {option}")
            lines.append("")

        lines.extend(["", "📊 ANSWER KEY", "=" * 12, ""])
        for number, question in enumerate(questions, 1):
            lines.append(f"{number}. ({option_letter(question.correct_answer)}) - {question.explanation}")
            lines.append("")

        return "\n".join(lines)

    def render_report(self, compilation: Union[DailyCompilation, WeeklyCompilation]) -> str:
        if isinstance(compilation, DailyCompilation):
            return self._daily_report(compilation)
        return self._weekly_report(compilation)

    def _daily_report(self, compilation: DailyCompilation) -> str:
        lines = [
            f"DAILY CURRENT AFFAIRS - {short_date(compilation.brief_date)}",
            "",
            compilation.brief_summary,
            "",
            "TOP STORIES",
            "=" * 11,
            "",
        ]

        for index, story in enumerate(compilation.top_stories, 1):
            news = story.news_item
            lines.append(f"{index}. {news.title}")
            lines.append(f"Subject: {news.primary_subject.value} | Score: {news.relevance_score}")
            lines.append(f"Summary: {story.summary.two_minute_read[:200]}...")
            lines.append("")

        lines.extend(["", "DAILY QUIZ", "=" * 10, ""])
        for number, question in enumerate(compilation.quiz, 1):
            lines.append(f"Q{number}. {question.question}")
            for index, option in enumerate(question.options):
                lines.append(f"   {option_letter(index)}) {option}")
            lines.append("")

        return "\n".join(lines)

    def _weekly_report(self, compilation: WeeklyCompilation) -> str:
        lines = [
            f"WEEKLY COMPILATION - Week {compilation.week_number}",
            "",
            f"Period: {short_date(compilation.start_date)} to {short_date(compilation.end_date)}",
            "",
            "WEEKLY HIGHLIGHTS",
            "=" * 16,
            "",
        ]
        lines.extend(f"• {highlight}" for highlight in compilation.highlights)

        lines.extend(["", "", "TRENDING TOPICS", "=" * 15, ""])
        for topic in compilation.trending_topics:
            lines.append(
                f"• {topic.topic} (Frequency: {topic.frequency}, Importance: {topic.importance.value})"
            )

        return "\n".join(lines) + "\n"

    def render_rss_feed(self, items: list[NewsItem], built_at: Optional[datetime] = None) -> str:
        """Render news items as an RSS 2.0 document."""
        rss = ET.Element("rss", version="2.0")
        channel = ET.SubElement(rss, "channel")
        ET.SubElement(channel, "title").text = FEED_TITLE
        ET.SubElement(channel, "link").text = FEED_LINK
        ET.SubElement(channel, "description").text = FEED_DESCRIPTION
        ET.SubElement(channel, "language").text = "en"
        ET.SubElement(channel, "lastBuildDate").text = _rfc822(built_at or datetime.now(timezone.utc))

        for item in items:
            entry = ET.SubElement(channel, "item")
            ET.SubElement(entry, "title").text = item.title
            ET.SubElement(entry, "link").text = item.url
            ET.SubElement(entry, "description").text = f"{item.content[:200]}..."
            if item.published_at is not None:
                ET.SubElement(entry, "pubDate").text = _rfc822(item.published_at)
            ET.SubElement(entry, "guid").text = item.id
            if item.author:
                ET.SubElement(entry, "author").text = item.author
            for tag in item.tags:
                ET.SubElement(entry, "category").text = tag

        ET.indent(rss)
        return '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(rss, encoding="unicode")


def _rfc822(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return format_datetime(moment.astimezone(timezone.utc), usegmt=True)
