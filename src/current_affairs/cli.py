"""CLI entry point for the current-affairs pipeline demo."""

import asyncio
from datetime import date, timedelta
from pathlib import Path
from typing import Optional

import typer

from current_affairs.adapters.export import TextExporter
from current_affairs.adapters.lessons import InMemoryLessonCatalog
from current_affairs.adapters.sources import MockNewsFeed
from current_affairs.aggregator import NewsAggregator
from current_affairs.analyzers import ContentAnalyzer, RelevanceFilter, TrendAnalyzer
from current_affairs.config import get_settings
from current_affairs.generators import CompilationGenerator
from current_affairs.integration import IntegrationService
from current_affairs.use_cases import PipelineService


def main(
    config: Path = typer.Option(Path("config.yaml"), "--config", help="Path to YAML settings"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Quiz sampling seed (overrides config)"),
    save: bool = typer.Option(False, "--save", help="Write quiz, reports and RSS feed to the output dir"),
) -> None:
    """Run the current-affairs pipeline over the bundled week of mock news."""
    asyncio.run(async_run(config, seed, save))


def app() -> None:
    """CLI entry point."""
    typer.run(main)


async def async_run(config: Path, seed: Optional[int], save: bool) -> None:
    """Async implementation of the demo run."""
    settings = get_settings(config)
    quiz_seed = seed if seed is not None else settings.quiz_seed
    today = settings.reference_date or date.today()
    start = today - timedelta(days=7)

    print("\n" + "=" * 70)
    print("🇮🇳 UPSC CURRENT AFFAIRS PIPELINE")
    print("=" * 70)
    print("\n⚙️  Settings:")
    print(f"  • Week: {start.isoformat()} - {(today - timedelta(days=1)).isoformat()}")
    print(f"  • Relevance threshold: {settings.relevance_threshold}")
    print(f"  • Quiz seed: {quiz_seed if quiz_seed is not None else 'random'}")
    print(f"  • Sources: {', '.join(settings.sources.enabled)}")

    feed = MockNewsFeed(today=today)
    sources = settings.enabled_sources
    aggregator = NewsAggregator(feed, sources=sources)
    exporter = TextExporter()
    generator = CompilationGenerator(
        seed=quiz_seed,
        exporter=exporter,
        top_stories=settings.compilation.top_stories,
        daily_quiz_size=settings.compilation.daily_quiz_size,
        weekly_quiz_size=settings.compilation.weekly_quiz_size,
        mains_limit=settings.compilation.weekly_mains_limit,
        predicted_topic_limit=settings.compilation.weekly_predicted_topics,
    )
    trend_analyzer = TrendAnalyzer(prediction_limit=settings.trend_prediction_limit)

    service = PipelineService(
        aggregator=aggregator,
        relevance_filter=RelevanceFilter(threshold=settings.relevance_threshold),
        content_analyzer=ContentAnalyzer(),
        compilation_generator=generator,
        trend_analyzer=trend_analyzer,
        sources=sources,
    )

    weekly, trend, dailies = await service.run_week(start)
    latest = dailies[-1]

    print("\n" + "=" * 70)
    print("📰 LATEST DAILY BRIEF")
    print("=" * 70)
    print(latest.brief_summary)

    print("\n" + "=" * 70)
    print("🗓️  WEEKLY HIGHLIGHTS")
    print("=" * 70)
    for highlight in weekly.highlights:
        print(f"  • {highlight}")
    for topic in weekly.predicted_topics:
        print(f"  🎯 {topic.topic} ({topic.probability:g}%) - {topic.reasoning}")

    print("\n" + trend_analyzer.generate_trend_report(trend))

    # Integration with the lesson catalog
    integration = IntegrationService(InMemoryLessonCatalog())
    analyses = [story for daily in dailies for story in daily.top_stories]
    bank = integration.create_question_bank(analyses)

    print("=" * 70)
    print("🔗 LESSON INTEGRATION")
    print("=" * 70)
    if latest.top_stories:
        top_story = latest.top_stories[0]
        print(f"Top story: {top_story.news_item.title}")
        for link in integration.link_to_static_content(top_story):
            print(f"  └─ {link.lesson_id} {link.lesson_title}: {link.relevance}")
    print(f"\n✓ Question bank: {bank.total_questions} questions")
    for subject, count in bank.by_subject.items():
        print(f"  • {subject.value}: {count}")

    if save:
        output_dir = settings.output_dir
        service.save_document(generator.generate_quiz(weekly.consolidated_quiz), output_dir / "weekly_quiz.txt")
        service.save_document(generator.generate_pdf(latest).decode("utf-8"), output_dir / "daily_report.txt")
        service.save_document(generator.generate_pdf(weekly).decode("utf-8"), output_dir / "weekly_report.txt")
        service.save_document(trend_analyzer.generate_revision_notes(trend.recurring_themes), output_dir / "revision_notes.txt")
        items = [story.news_item.item for story in analyses]
        service.save_document(exporter.render_rss_feed(items), output_dir / "feed.xml")

    print("\n" + "=" * 70)
    print("✅ DONE!")
    print("=" * 70)
    print()


if __name__ == "__main__":
    app()
