"""Tests for trend analysis."""

from datetime import datetime, timezone

from current_affairs.analyzers import TrendAnalyzer
from current_affairs.analyzers.trend_analyzer import emerging_importance, theme_importance
from current_affairs.core import ExamType, NewsSource, SubjectArea
from current_affairs.core.entities import RecurringTheme, ThemeImportance

PERIOD_START = datetime(2024, 9, 1, tzinfo=timezone.utc)
PERIOD_END = datetime(2024, 9, 8, tzinfo=timezone.utc)


def test_recurring_themes_need_two_occurrences(make_analysis) -> None:
    """Test themes seen once are dropped and the rest are ranked."""
    analyses = [
        make_analysis("a", title="Climate change talks", subject=SubjectArea.ENVIRONMENT,
                      score=80, topics=["Climate Change"]),
        make_analysis("b", subject=SubjectArea.ENVIRONMENT, score=80, topics=["Climate Change"]),
        make_analysis("c", subject=SubjectArea.ENVIRONMENT, score=80, topics=["Climate Change"]),
        make_analysis("d", subject=SubjectArea.ECONOMY, score=50, topics=["Public Finance"]),
    ]

    themes = TrendAnalyzer().identify_recurring_themes(analyses)

    assert [t.theme for t in themes] == ["Climate Change", "Environment"]
    climate = themes[0]
    assert climate.occurrences == 3
    assert climate.news_items == ["a", "b", "c"]
    assert climate.importance == ThemeImportance.MODERATE


def test_theme_importance_tiers() -> None:
    """Test theme tiers from occurrences and average relevance."""
    assert theme_importance(12, 90.0) == ThemeImportance.CRITICAL
    assert theme_importance(6, 100.0) == ThemeImportance.IMPORTANT
    assert theme_importance(5, 100.0) == ThemeImportance.MODERATE


def test_emerging_topics_window(make_analysis) -> None:
    """Test only topics first seen within seven days of period end qualify."""
    analyses = [
        make_analysis("a", topics=["Space Missions"],
                      published_at=datetime(2024, 9, 6, 10, tzinfo=timezone.utc)),
        make_analysis("b", topics=["Space Missions"],
                      published_at=datetime(2024, 9, 7, 10, tzinfo=timezone.utc)),
        make_analysis("c", topics=["Old Story"],
                      published_at=datetime(2024, 8, 29, 10, tzinfo=timezone.utc)),
        make_analysis("d", topics=["Old Story"],
                      published_at=datetime(2024, 9, 7, 10, tzinfo=timezone.utc)),
    ]

    emerging = TrendAnalyzer().identify_emerging_topics(analyses, PERIOD_END)

    assert [t.topic for t in emerging] == ["Space Missions"]
    assert emerging[0].growth_rate == 1.26
    assert emerging[0].first_appeared == datetime(2024, 9, 6, 10, tzinfo=timezone.utc)


def test_emerging_importance_labels() -> None:
    """Test emerging topic labels."""
    assert emerging_importance(1.5, 2).startswith("High")
    assert emerging_importance(0.5, 3).startswith("Medium")
    assert emerging_importance(0.4, 1).startswith("Low")


def test_distributions(make_analysis) -> None:
    """Test subject shares are rounded percentages and sources are counted."""
    analyses = [
        make_analysis("a", subject=SubjectArea.POLITY, source=NewsSource.PIB),
        make_analysis("b", subject=SubjectArea.POLITY, source=NewsSource.THE_HINDU),
        make_analysis("c", subject=SubjectArea.ECONOMY, source=NewsSource.PIB),
    ]
    analyzer = TrendAnalyzer()

    assert analyzer.subject_distribution(analyses) == {SubjectArea.POLITY: 67, SubjectArea.ECONOMY: 33}
    assert analyzer.source_distribution(analyses) == {NewsSource.PIB: 2, NewsSource.THE_HINDU: 1}


def test_analyze_trends_predictions(make_analysis) -> None:
    """Test predictions are ranked, capped and include subject predictions."""
    analyses = [
        make_analysis(str(n), subject=SubjectArea.POLITY, score=70, topics=["Judicial System"])
        for n in range(3)
    ]

    trend = TrendAnalyzer().analyze_trends(analyses, PERIOD_START, PERIOD_END)

    probabilities = [p.probability for p in trend.exam_predictions]
    assert probabilities == sorted(probabilities, reverse=True)
    subject_prediction = next(
        p for p in trend.exam_predictions if p.topic == "Polity - Current Developments"
    )
    assert subject_prediction.probability == 95
    assert subject_prediction.exam_type == ExamType.BOTH

    limited = TrendAnalyzer(prediction_limit=2).analyze_trends(analyses, PERIOD_START, PERIOD_END)
    assert len(limited.exam_predictions) == 2


def test_analyze_trends_empty() -> None:
    """Test an empty window yields empty sections."""
    trend = TrendAnalyzer().analyze_trends([], PERIOD_START, PERIOD_END)

    assert trend.recurring_themes == []
    assert trend.emerging_topics == []
    assert trend.subject_distribution == {}
    assert trend.exam_predictions == []


def test_revision_notes_and_report(make_analysis) -> None:
    """Test text reports carry their headings."""
    analyzer = TrendAnalyzer()
    themes = [
        RecurringTheme("Climate Change", 12, ["a"], ThemeImportance.CRITICAL),
        RecurringTheme("Federalism", 2, ["b"], ThemeImportance.MODERATE),
    ]

    notes = analyzer.generate_revision_notes(themes)
    assert notes.startswith("📚 WEEKLY REVISION NOTES")
    assert "1. CLIMATE CHANGE" in notes
    assert "   • India's climate commitments and net-zero targets" in notes
    assert "   • Recent developments in Federalism" in notes
    assert "🎯 FOCUS AREAS" in notes
    assert "⭐ Climate Change: Requires detailed understanding and current updates" in notes
    assert "⭐ Federalism" not in notes

    trend = analyzer.analyze_trends([make_analysis("a"), make_analysis("b")], PERIOD_START, PERIOD_END)
    report = analyzer.generate_trend_report(trend)
    assert "Period: 2024-09-01 to 2024-09-08" in report
    assert "• Polity: 100%" in report
