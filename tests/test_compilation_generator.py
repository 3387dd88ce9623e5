"""Tests for daily and weekly compilation."""

from collections import Counter
from dataclasses import replace
from datetime import date, timedelta

from current_affairs.core import Difficulty, SubjectArea
from current_affairs.core.entities import TopicImportance
from current_affairs.generators import CompilationGenerator, week_number
from current_affairs.generators.compilation_generator import (
    dedupe_questions,
    topic_importance,
    trending_probability,
)

BRIEF_DATE = date(2024, 9, 1)


def test_daily_brief_top_stories(make_analysis) -> None:
    """Test the ten highest-scoring analyses are selected in order."""
    analyses = [make_analysis(f"n{score}", score=score) for score in range(41, 53)]
    generator = CompilationGenerator(seed=1)

    daily = generator.generate_daily_brief(analyses, BRIEF_DATE)

    assert daily.total_processed == 12
    assert daily.total_selected == 10
    assert [s.news_item.relevance_score for s in daily.top_stories] == list(range(52, 42, -1))


def test_daily_quiz_difficulty_mix(make_analysis) -> None:
    """Test the daily quiz follows a 3:5:2 mix when enough questions exist."""
    analyses = [make_analysis(f"n{n}") for n in range(6)]

    quiz = CompilationGenerator(seed=3).generate_daily_brief(analyses, BRIEF_DATE).quiz

    counts = Counter(q.difficulty for q in quiz)
    assert len(quiz) == 10
    assert counts == {Difficulty.EASY: 3, Difficulty.MEDIUM: 5, Difficulty.HARD: 2}


def test_daily_quiz_with_few_questions(make_analysis) -> None:
    """Test the quiz shrinks when the pool is small."""
    quiz = CompilationGenerator(seed=3).generate_daily_brief([make_analysis("solo")], BRIEF_DATE).quiz

    assert len(quiz) == 5


def test_short_daily_quiz_keeps_medium(make_analysis) -> None:
    """Test a quiz shorter than ten still mixes in medium questions."""
    analyses = [make_analysis(f"n{n}") for n in range(6)]
    generator = CompilationGenerator(seed=3, daily_quiz_size=3)

    quiz = generator.generate_daily_brief(analyses, BRIEF_DATE).quiz

    counts = Counter(q.difficulty for q in quiz)
    assert len(quiz) == 3
    assert counts == {Difficulty.EASY: 1, Difficulty.MEDIUM: 2}


def test_daily_brief_ties_keep_input_order(make_analysis) -> None:
    """Test equal relevance scores keep their incoming order."""
    analyses = [make_analysis("low", score=45)] + [make_analysis(f"tie{n}", score=70) for n in range(12)]
    generator = CompilationGenerator(seed=1)

    daily = generator.generate_daily_brief(analyses, BRIEF_DATE)

    assert [s.news_item.id for s in daily.top_stories] == [f"tie{n}" for n in range(10)]


def test_seeded_quiz_is_reproducible(make_analysis) -> None:
    """Test the same seed yields the same quiz."""
    analyses = [make_analysis(f"n{n}") for n in range(6)]

    first = CompilationGenerator(seed=42).generate_daily_brief(analyses, BRIEF_DATE).quiz
    second = CompilationGenerator(seed=42).generate_daily_brief(analyses, BRIEF_DATE).quiz

    assert [q.id for q in first] == [q.id for q in second]


def test_brief_summary(make_analysis) -> None:
    """Test the brief summary heading, groups and statistics."""
    analyses = [
        make_analysis("a", title="Polity story", subject=SubjectArea.POLITY, score=90),
        make_analysis("b", title="Budget story", subject=SubjectArea.ECONOMY, score=60),
    ]
    generator = CompilationGenerator(seed=1)

    summary = generator.generate_brief_summary(analyses, BRIEF_DATE)

    assert summary.startswith("📅 Daily Current Affairs Brief - Sunday, 1 September 2024")
    assert "• Polity story (Relevance: 90/100)" in summary
    assert "💹 ECONOMY" in summary
    assert "• Average relevance score: 75.0" in summary
    assert "• High-priority topics: 1" in summary

    empty = generator.generate_brief_summary([], BRIEF_DATE)
    assert "• Average relevance score: 0.0" in empty
    assert "• Most covered subject: General" in empty


def test_categorize_updates(make_analysis) -> None:
    """Test stories are bucketed by subject with a content fallback."""
    stories = [
        make_analysis("a", title="Court ruling", subject=SubjectArea.POLITY, key_points=["Bench formed"]),
        make_analysis("b", title="Trade pact", subject=SubjectArea.INTERNATIONAL_RELATIONS, key_points=[]),
        make_analysis("c", title="Chip plant", subject=SubjectArea.SCIENCE_TECH,
                      content="The government will fund the plant."),
        make_analysis("d", title="Old fort", subject=SubjectArea.HISTORY, content="Restoration begins."),
    ]

    updates = CompilationGenerator(seed=1).categorize_updates(stories)

    assert updates.government == ["Court ruling - Bench formed", "Chip plant - Key point of c"]
    assert updates.international == ["Trade pact"]
    assert updates.economy == []
    assert updates.environment == []


def test_weekly_compilation_empty() -> None:
    """Test an empty week yields an empty compilation."""
    weekly = CompilationGenerator(seed=1).generate_weekly_compilation([])

    assert weekly.week_number == 0
    assert weekly.start_date is None
    assert weekly.highlights == []
    assert weekly.consolidated_quiz == []


def test_weekly_compilation(make_analysis) -> None:
    """Test a week of briefs rolls up into a compilation."""
    generator = CompilationGenerator(seed=5)
    dailies = []
    for offset in range(7):
        day = BRIEF_DATE + timedelta(days=offset)
        analyses = [
            make_analysis(f"d{offset}-{n}", score=50 + n, topics=[f"Topic {n % 3}"])
            for n in range(4)
        ]
        dailies.append(generator.generate_daily_brief(analyses, day))

    weekly = generator.generate_weekly_compilation(dailies)

    assert weekly.week_number == 36
    assert weekly.start_date == BRIEF_DATE
    assert weekly.end_date == date(2024, 9, 7)
    assert len(weekly.highlights) == 8
    assert weekly.highlights[0].startswith("1/9/2024: Story d0-3 (Polity, Score: 53)")
    assert weekly.highlights[-1] == "Weekly Statistics: 28 news processed, 28 selected for UPSC relevance"
    assert [t.topic for t in weekly.trending_topics][0] == "Topic 0"
    assert weekly.trending_topics[0].frequency == 14

    quiz = weekly.consolidated_quiz
    assert len(quiz) == 20
    prefixes = [q.question[:50] for q in quiz]
    assert len(prefixes) == len(set(prefixes))

    assert len(weekly.mains_topics) == 10
    assert [note.subject for note in weekly.revision_notes] == [SubjectArea.POLITY]
    assert len(weekly.revision_notes[0].points) == 10

    probabilities = [p.probability for p in weekly.predicted_topics]
    assert probabilities == sorted(probabilities, reverse=True)
    assert len(weekly.predicted_topics) <= 10
    assert all(p <= 95 for p in probabilities)


def test_government_focus_predictions(make_analysis) -> None:
    """Test high-scoring bulletins add fixed-probability predictions."""
    generator = CompilationGenerator(seed=1)
    daily = generator.generate_daily_brief(
        [make_analysis("pib", score=85, topics=["Public Finance"])], BRIEF_DATE
    )

    weekly = generator.generate_weekly_compilation([daily])

    focus = [p for p in weekly.predicted_topics if p.probability == 75]
    assert [p.topic for p in focus] == ["Public Finance"]


def test_dedupe_questions(make_analysis) -> None:
    """Test questions sharing a 50-character prefix are dropped."""
    base = make_analysis("a").questions.prelims[0]
    stem = "Consider the following statements about the new scheme"
    first = replace(base, question=stem + " (1)")
    twin = replace(base, id="other", question=stem + " (2)")
    distinct = replace(base, id="third", question="Which body approved it?")

    assert dedupe_questions([first, twin, distinct]) == [first, distinct]


def test_topic_importance_tiers() -> None:
    """Test trending tiers are monotonic in frequency."""
    assert topic_importance(1, 50) == TopicImportance.MODERATE
    assert topic_importance(5, 100) == TopicImportance.HIGH
    assert topic_importance(6, 100) == TopicImportance.CRITICAL


def test_topic_importance_follows_max_relevance() -> None:
    """Test tiers rise with max relevance at a fixed frequency."""
    assert topic_importance(5, 50) == TopicImportance.MODERATE
    assert topic_importance(5, 51) == TopicImportance.HIGH
    assert topic_importance(5, 100) == TopicImportance.HIGH
    assert topic_importance(5, 101) == TopicImportance.CRITICAL

    order = [TopicImportance.MODERATE, TopicImportance.HIGH, TopicImportance.CRITICAL]
    for frequency in (1, 5, 9):
        ranks = [order.index(topic_importance(frequency, relevance)) for relevance in range(40, 101)]
        assert ranks == sorted(ranks)


def test_consolidated_quiz_drops_shared_prefix(make_analysis) -> None:
    """Test the weekly quiz keeps one of two questions sharing a 50-character prefix."""
    generator = CompilationGenerator(seed=5, weekly_quiz_size=20)
    monday = generator.generate_daily_brief([make_analysis("a")], BRIEF_DATE)
    tuesday = generator.generate_daily_brief([make_analysis("b")], BRIEF_DATE + timedelta(days=1))
    stem = "Which ministry notified the revised procurement rules for"
    monday = replace(monday, quiz=[replace(monday.quiz[0], id="mon", question=stem + " rail?")])
    tuesday = replace(tuesday, quiz=[replace(tuesday.quiz[0], id="tue", question=stem + " ports?")])

    quiz = generator.consolidated_quiz([monday, tuesday])

    assert [q.id for q in quiz] == ["mon"]


def test_trending_probability() -> None:
    """Test tier multipliers and the 95 cap."""
    assert trending_probability(5, TopicImportance.MODERATE) == 50
    assert trending_probability(5, TopicImportance.HIGH) == 60
    assert trending_probability(5, TopicImportance.CRITICAL) == 75
    assert trending_probability(10, TopicImportance.CRITICAL) == 95


def test_week_number() -> None:
    """Test Sunday-first week numbering."""
    assert week_number(date(2024, 1, 1)) == 1
    assert week_number(date(2024, 9, 1)) == 36
    assert week_number(date(2023, 1, 7)) == 1
    assert week_number(date(2023, 1, 8)) == 2


def test_export_hooks(make_analysis) -> None:
    """Test quiz text and report bytes come from the exporter."""
    generator = CompilationGenerator(seed=1)
    daily = generator.generate_daily_brief([make_analysis("a")], BRIEF_DATE)

    assert "📊 ANSWER KEY" in generator.generate_quiz(daily.quiz)
    report = generator.generate_pdf(daily)
    assert isinstance(report, bytes)
    assert report.decode("utf-8").startswith("DAILY CURRENT AFFAIRS - 1/9/2024")
