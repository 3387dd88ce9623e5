"""Business logic use cases."""

from datetime import date, datetime, time, timedelta, timezone
from pathlib import Path
from typing import Optional

from current_affairs.aggregator import NewsAggregator, sort_newest_first
from current_affairs.analyzers import ContentAnalyzer, RelevanceFilter, TrendAnalyzer
from current_affairs.core import (
    DailyCompilation,
    NewsAnalysis,
    NewsItem,
    NewsSource,
    ProcessedNewsItem,
    TrendAnalysis,
    WeeklyCompilation,
)
from current_affairs.generators import CompilationGenerator


class PipelineService:
    """Run the aggregation, scoring, analysis and compilation stages over a batch.

    A failing source or item is reported and skipped; the batch always completes.
    """

    def __init__(
        self,
        aggregator: NewsAggregator,
        relevance_filter: RelevanceFilter,
        content_analyzer: ContentAnalyzer,
        compilation_generator: CompilationGenerator,
        trend_analyzer: TrendAnalyzer,
        sources: Optional[list[NewsSource]] = None,
    ) -> None:
        self.aggregator = aggregator
        self.relevance_filter = relevance_filter
        self.content_analyzer = content_analyzer
        self.compilation_generator = compilation_generator
        self.trend_analyzer = trend_analyzer
        self.sources = sources or list(NewsSource)

    async def collect_news(self, day: date) -> list[NewsItem]:
        """Fetch every configured source for a day and drop malformed items."""
        print("\n" + "=" * 70)
        print(f"📥 STAGE 1: COLLECTING NEWS FOR {day.isoformat()}")
        print("=" * 70)

        collected: list[NewsItem] = []
        for source in self.sources:
            try:
                items = await self.aggregator.fetch_news(source, day)
            except Exception as e:
                print(f"  └─ {source.value}: ❌ error - {e}")
                continue

            valid = [item for item in items if self.aggregator.validate_news_item(item)]
            dropped = len(items) - len(valid)
            line = f"  └─ {source.value}: {len(valid)} items"
            if dropped:
                line += f" ({dropped} invalid dropped)"
            print(line)
            collected.extend(valid)

        print(f"\n✓ Total collected: {len(collected)} items")
        return sort_newest_first(collected)

    def filter_news(self, items: list[NewsItem]) -> list[ProcessedNewsItem]:
        print("\n" + "=" * 70)
        print(f"🔍 STAGE 2: RELEVANCE FILTER (threshold {self.relevance_filter.threshold})")
        print("=" * 70)

        processed = self.relevance_filter.filter_by_relevance(items)

        print(f"✓ Passed: {len(processed)} of {len(items)}")
        for news in processed:
            print(f"  • [{news.relevance_score}] {news.title[:70]}")
            print(f"    └─ {news.primary_subject.value}, {news.source.value}")
        return processed

    async def analyze_news(self, processed: list[ProcessedNewsItem]) -> list[NewsAnalysis]:
        """Generate an analysis per item, skipping items that fail."""
        print("\n" + "=" * 70)
        print("📝 STAGE 3: CONTENT ANALYSIS")
        print("=" * 70)

        analyses: list[NewsAnalysis] = []
        for i, news in enumerate(processed, 1):
            try:
                analysis = self.content_analyzer.generate_analysis(news)
            except Exception as e:
                title = getattr(news, "title", repr(news))
                print(f"  [{i}/{len(processed)}] ⚠️  Skipped {title[:60]}: {e}")
                continue

            analyses.append(analysis)
            print(
                f"  [{i}/{len(processed)}] ✓ {news.title[:60]} "
                f"({len(analysis.key_points)} key points, {len(analysis.facts)} facts)"
            )

        print(f"\n✓ Analysed: {len(analyses)} of {len(processed)}")
        return analyses

    async def run_day(self, day: date) -> tuple[DailyCompilation, list[NewsAnalysis]]:
        """Build the daily brief for one day.

        Returns:
            Tuple of (daily compilation, analyses it was built from)
        """
        items = await self.collect_news(day)
        processed = self.filter_news(items)
        analyses = await self.analyze_news(processed)

        daily = self.compilation_generator.generate_daily_brief(analyses, day)
        print(f"\n📅 Daily brief ready: {daily.total_selected} stories, {len(daily.quiz)} quiz questions")
        return daily, analyses

    async def run_week(
        self, start: date
    ) -> tuple[WeeklyCompilation, TrendAnalysis, list[DailyCompilation]]:
        """Build seven daily briefs, the weekly compilation and the trend analysis."""
        dailies: list[DailyCompilation] = []
        analyses: list[NewsAnalysis] = []

        for offset in range(7):
            daily, day_analyses = await self.run_day(start + timedelta(days=offset))
            dailies.append(daily)
            analyses.extend(day_analyses)

        print("\n" + "=" * 70)
        print("📊 STAGE 4: WEEKLY COMPILATION AND TRENDS")
        print("=" * 70)

        weekly = self.compilation_generator.generate_weekly_compilation(dailies)
        trend = self.trend_analyzer.analyze_trends(
            analyses,
            period_start=datetime.combine(start, time.min, tzinfo=timezone.utc),
            period_end=datetime.combine(start + timedelta(days=7), time.min, tzinfo=timezone.utc),
        )

        print(f"✓ Week {weekly.week_number}: {len(weekly.trending_topics)} trending topics")
        print(f"✓ Consolidated quiz: {len(weekly.consolidated_quiz)} questions")
        print(f"✓ Recurring themes: {len(trend.recurring_themes)}")
        print(f"✓ Exam predictions: {len(trend.exam_predictions)}")
        return weekly, trend, dailies

    def save_document(self, content: str, output_path: Path) -> None:
        """Save a rendered document to file."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
        print(f"📁 Saved {output_path}")
