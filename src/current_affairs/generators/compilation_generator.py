"""Daily brief and weekly compilation builder."""

import math
import random
from datetime import date
from typing import Optional, TypeVar, Union

from current_affairs.adapters.export.text_exporter import TextExporter, long_date, short_date
from current_affairs.core import CompilationExporter, taxonomy
from current_affairs.core.entities import (
    DailyCompilation,
    Difficulty,
    ImportantUpdates,
    MainsQuestion,
    NewsAnalysis,
    NewsSource,
    PredictedTopic,
    PrelimsQuestion,
    RevisionNote,
    SubjectArea,
    TopicImportance,
    TrendingTopic,
    WeeklyCompilation,
)

T = TypeVar("T")

DEDUP_PREFIX_LENGTH = 50
HIGH_PRIORITY_SCORE = 80
GOVERNMENT_FOCUS_SCORE = 80
GOVERNMENT_FOCUS_PROBABILITY = 75


class CompilationGenerator:
    """Roll analyses up into daily briefs and daily briefs into weekly compilations.

    All random sampling goes through ``self.rng``; pass ``seed`` or ``rng`` for
    reproducible quizzes.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        exporter: Optional[CompilationExporter] = None,
        top_stories: int = 10,
        daily_quiz_size: int = 10,
        weekly_quiz_size: int = 20,
        mains_limit: int = 10,
        predicted_topic_limit: int = 10,
    ) -> None:
        self.rng = rng or random.Random(seed)
        self.exporter = exporter or TextExporter()
        self.top_stories = top_stories
        self.daily_quiz_size = daily_quiz_size
        self.weekly_quiz_size = weekly_quiz_size
        self.mains_limit = mains_limit
        self.predicted_topic_limit = predicted_topic_limit

    # Daily

    def generate_daily_brief(self, analyses: list[NewsAnalysis], brief_date: date) -> DailyCompilation:
        ranked = sorted(analyses, key=lambda a: a.news_item.relevance_score, reverse=True)
        top_stories = ranked[:self.top_stories]

        questions = [q for analysis in analyses for q in analysis.questions.prelims]

        return DailyCompilation(
            brief_date=brief_date,
            top_stories=top_stories,
            quiz=self.select_diverse_questions(questions, self.daily_quiz_size),
            brief_summary=self.generate_brief_summary(top_stories, brief_date),
            important_updates=self.categorize_updates(top_stories),
            total_processed=len(analyses),
            total_selected=len(top_stories),
        )

    def select_diverse_questions(self, questions: list[PrelimsQuestion], count: int) -> list[PrelimsQuestion]:
        """Approximate a 3:5:2 easy/medium/hard mix, sampling within each band.

        Quizzes shorter than ten scale the easy and hard shares down so that
        medium questions keep a place.
        """
        easy = [q for q in questions if q.difficulty == Difficulty.EASY]
        medium = [q for q in questions if q.difficulty == Difficulty.MEDIUM]
        hard = [q for q in questions if q.difficulty == Difficulty.HARD]

        easy_count = min(3, math.ceil(count * 0.3), len(easy))
        hard_count = min(2, count // 5, len(hard))
        medium_count = count - easy_count - hard_count

        selected = self._sample(easy, easy_count)
        selected.extend(self._sample(medium, medium_count))
        selected.extend(self._sample(hard, hard_count))
        return selected[:count]

    def generate_brief_summary(self, top_stories: list[NewsAnalysis], brief_date: date) -> str:
        lines = [
            f"📅 Daily Current Affairs Brief - {long_date(brief_date)}",
            "",
            f"Today's top {len(top_stories)} UPSC-relevant developments:",
            "",
        ]

        groups: dict[SubjectArea, list[NewsAnalysis]] = {}
        for story in top_stories:
            groups.setdefault(story.news_item.primary_subject, []).append(story)

        for subject, stories in groups.items():
            emoji = taxonomy.SUBJECT_EMOJI.get(subject, "📌")
            lines.append(f"{emoji} {subject.value.upper()}")
            for story in stories:
                news = story.news_item
                lines.append(f"• {news.title} (Relevance: {news.relevance_score}/100)")
            lines.append("")

        most_covered = max(groups, key=lambda s: len(groups[s])).value if groups else "General"
        high_priority = sum(
            1 for story in top_stories if story.news_item.relevance_score >= HIGH_PRIORITY_SCORE
        )

        lines.append("📊 Today's Statistics:")
        lines.append(f"• Most covered subject: {most_covered}")
        lines.append(f"• Average relevance score: {average_relevance(top_stories)}")
        lines.append(f"• High-priority topics: {high_priority}")

        return "\n".join(lines) + "\n"

    def categorize_updates(self, stories: list[NewsAnalysis]) -> ImportantUpdates:
        """Bucket stories into government, economy, international and environment updates."""
        buckets: dict[str, list[str]] = {
            "government": [],
            "economy": [],
            "international": [],
            "environment": [],
        }

        for story in stories:
            news = story.news_item
            update = f"{news.title} - {story.key_points[0]}" if story.key_points else news.title

            bucket = taxonomy.UPDATE_BUCKETS.get(news.primary_subject)
            if bucket is None:
                content = news.content.lower()
                bucket = next(
                    (name for keyword, name in taxonomy.UPDATE_FALLBACK_KEYWORDS if keyword in content),
                    None,
                )
            if bucket is not None:
                buckets[bucket].append(update)

        return ImportantUpdates(**buckets)

    # Weekly

    def generate_weekly_compilation(self, dailies: list[DailyCompilation]) -> WeeklyCompilation:
        if not dailies:
            return WeeklyCompilation(
                week_number=0,
                start_date=None,
                end_date=None,
                highlights=[],
                trending_topics=[],
                consolidated_quiz=[],
                mains_topics=[],
                revision_notes=[],
                predicted_topics=[],
            )

        trending = self.trending_topics(dailies)

        return WeeklyCompilation(
            week_number=week_number(dailies[0].brief_date),
            start_date=dailies[0].brief_date,
            end_date=dailies[-1].brief_date,
            highlights=self.weekly_highlights(dailies),
            trending_topics=trending,
            consolidated_quiz=self.consolidated_quiz(dailies),
            mains_topics=self.mains_topics(dailies),
            revision_notes=self.revision_notes(dailies),
            predicted_topics=self.predict_topics(trending, dailies),
        )

    def weekly_highlights(self, dailies: list[DailyCompilation]) -> list[str]:
        highlights = []
        for daily in dailies:
            if daily.top_stories:
                news = daily.top_stories[0].news_item
                highlights.append(
                    f"{short_date(daily.brief_date)}: {news.title} "
                    f"({news.primary_subject.value}, Score: {news.relevance_score})"
                )

        processed = sum(daily.total_processed for daily in dailies)
        selected = sum(daily.total_selected for daily in dailies)
        highlights.append(
            f"Weekly Statistics: {processed} news processed, {selected} selected for UPSC relevance"
        )
        return highlights

    def trending_topics(self, dailies: list[DailyCompilation]) -> list[TrendingTopic]:
        frequency: dict[str, int] = {}
        max_relevance: dict[str, int] = {}

        for daily in dailies:
            for story in daily.top_stories:
                news = story.news_item
                for topic in news.syllabus_topics:
                    frequency[topic] = frequency.get(topic, 0) + 1
                    max_relevance[topic] = max(max_relevance.get(topic, 0), news.relevance_score)

        trending = [
            TrendingTopic(
                topic=topic,
                frequency=count,
                importance=topic_importance(count, max_relevance[topic]),
            )
            for topic, count in frequency.items()
        ]
        trending.sort(key=lambda t: t.frequency, reverse=True)
        return trending[:10]

    def consolidated_quiz(self, dailies: list[DailyCompilation]) -> list[PrelimsQuestion]:
        questions = dedupe_questions([q for daily in dailies for q in daily.quiz])
        return self.select_balanced_questions(questions, self.weekly_quiz_size)

    def select_balanced_questions(self, questions: list[PrelimsQuestion], count: int) -> list[PrelimsQuestion]:
        """Sample evenly per topic, then fill the remaining slots from the rest."""
        if not questions:
            return []

        groups: dict[str, list[PrelimsQuestion]] = {}
        for question in questions:
            groups.setdefault(question.topic, []).append(question)

        per_topic = count // len(groups)
        selected: list[PrelimsQuestion] = []
        for group in groups.values():
            selected.extend(self._sample(group, per_topic))

        if len(selected) < count:
            taken = {id(q) for q in selected}
            remaining = [q for q in questions if id(q) not in taken]
            selected.extend(self._sample(remaining, count - len(selected)))

        return selected[:count]

    def mains_topics(self, dailies: list[DailyCompilation]) -> list[MainsQuestion]:
        questions = [
            q
            for daily in dailies
            for story in daily.top_stories
            for q in story.questions.mains
        ]
        return questions[:self.mains_limit]

    def revision_notes(self, dailies: list[DailyCompilation]) -> list[RevisionNote]:
        notes: dict[SubjectArea, list[str]] = {}
        for daily in dailies:
            for story in daily.top_stories:
                points = notes.setdefault(story.news_item.primary_subject, [])
                for point in story.key_points[:3]:
                    if point not in points:
                        points.append(point)

        return [RevisionNote(subject=subject, points=points[:10]) for subject, points in notes.items()]

    def predict_topics(
        self, trending: list[TrendingTopic], dailies: list[DailyCompilation]
    ) -> list[PredictedTopic]:
        predictions = [
            PredictedTopic(
                topic=topic.topic,
                probability=trending_probability(topic.frequency, topic.importance),
                reasoning=(
                    f"High frequency ({topic.frequency} occurrences) with "
                    f"{topic.importance.value} importance indicates exam relevance"
                ),
            )
            for topic in trending[:5]
        ]

        predictions.extend(
            PredictedTopic(
                topic=area,
                probability=GOVERNMENT_FOCUS_PROBABILITY,
                reasoning="Recent government initiatives indicate policy priority",
            )
            for area in self._government_focus(dailies)
        )

        predictions.sort(key=lambda p: p.probability, reverse=True)
        return predictions[:self.predicted_topic_limit]

    def _government_focus(self, dailies: list[DailyCompilation]) -> list[str]:
        areas: list[str] = []
        for daily in dailies:
            for story in daily.top_stories:
                news = story.news_item
                if news.source == NewsSource.PIB and news.relevance_score > GOVERNMENT_FOCUS_SCORE:
                    for topic in news.syllabus_topics:
                        if topic not in areas:
                            areas.append(topic)
        return areas[:5]

    # Export hooks

    def generate_quiz(self, questions: list[PrelimsQuestion]) -> str:
        return self.exporter.render_quiz(questions)

    def generate_pdf(self, compilation: Union[DailyCompilation, WeeklyCompilation]) -> bytes:
        """Printable report as UTF-8 bytes; real PDF rendering happens downstream."""
        return self.exporter.render_report(compilation).encode("utf-8")

    def _sample(self, items: list[T], count: int) -> list[T]:
        if count <= 0:
            return []
        return self.rng.sample(items, min(count, len(items)))


def average_relevance(stories: list[NewsAnalysis]) -> str:
    if not stories:
        return "0.0"
    total = sum(story.news_item.relevance_score for story in stories)
    return f"{total / len(stories):.1f}"


def topic_importance(frequency: int, max_relevance: int) -> TopicImportance:
    score = frequency * 10 + max_relevance
    if score > 150:
        return TopicImportance.CRITICAL
    if score > 100:
        return TopicImportance.HIGH
    return TopicImportance.MODERATE


def trending_probability(frequency: int, importance: TopicImportance) -> float:
    base = frequency * 10
    if importance == TopicImportance.CRITICAL:
        base *= 1.5
    elif importance == TopicImportance.HIGH:
        base *= 1.2
    return min(base, 95)


def dedupe_questions(questions: list[PrelimsQuestion]) -> list[PrelimsQuestion]:
    """Drop questions whose first 50 characters repeat an earlier one."""
    seen: set[str] = set()
    unique = []
    for question in questions:
        key = question.question[:DEDUP_PREFIX_LENGTH]
        if key not in seen:
            seen.add(key)
            unique.append(question)
    return unique


def week_number(day: date) -> int:
    """Week of the year, counting from the week containing January 1st (Sunday-first)."""
    jan_first = date(day.year, 1, 1)
    days_elapsed = (day - jan_first).days
    jan_first_weekday = (jan_first.weekday() + 1) % 7
    return math.ceil((days_elapsed + jan_first_weekday + 1) / 7)
