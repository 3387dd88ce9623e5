"""Trend detection and exam-topic prediction over a window of analyses."""

import dataclasses
import math
import re
from datetime import datetime, timezone
from typing import Optional

from current_affairs.core import taxonomy
from current_affairs.core.entities import (
    EmergingTopic,
    ExamPrediction,
    ExamType,
    NewsAnalysis,
    NewsSource,
    RecurringTheme,
    SubjectArea,
    ThemeImportance,
    TrendAnalysis,
)

SECONDS_PER_DAY = 86400
EMERGING_WINDOW_DAYS = 7
EMERGING_MIN_GROWTH = 0.3
SUBJECT_SHARE_THRESHOLD = 15


class TrendAnalyzer:
    """Recurring themes, emerging topics, distributions and ranked predictions."""

    def __init__(
        self,
        theme_patterns: Optional[list[tuple[str, str]]] = None,
        prediction_limit: int = 15,
    ) -> None:
        patterns = theme_patterns or taxonomy.THEME_PATTERNS
        self.theme_patterns = [
            (re.compile(pattern, re.IGNORECASE), theme) for pattern, theme in patterns
        ]
        self.prediction_limit = prediction_limit

    def analyze_trends(
        self,
        analyses: list[NewsAnalysis],
        period_start: datetime,
        period_end: datetime,
    ) -> TrendAnalysis:
        draft = TrendAnalysis(
            period_start=period_start,
            period_end=period_end,
            recurring_themes=self.identify_recurring_themes(analyses),
            emerging_topics=self.identify_emerging_topics(analyses, period_end),
            subject_distribution=self.subject_distribution(analyses),
            source_distribution=self.source_distribution(analyses),
            exam_predictions=[],
        )
        return dataclasses.replace(draft, exam_predictions=self.predict_exam_topics(draft))

    def predict_exam_topics(
        self, trend: TrendAnalysis, limit: Optional[int] = None
    ) -> list[ExamPrediction]:
        """Merge theme, emerging-topic and subject predictions, most probable first."""
        if limit is None:
            limit = self.prediction_limit

        predictions = [self._theme_prediction(theme) for theme in trend.recurring_themes]
        predictions.extend(
            self._emerging_prediction(topic, trend.period_end) for topic in trend.emerging_topics
        )
        predictions.extend(self._subject_predictions(trend.subject_distribution))

        predictions.sort(key=lambda p: p.probability, reverse=True)
        return predictions[:limit]

    # Themes

    def extract_themes(self, analysis: NewsAnalysis) -> list[str]:
        """Distinct themes of one analysis, in discovery order."""
        news = analysis.news_item
        themes = self._themes_in(news.title)
        for point in analysis.key_points:
            themes.extend(self._themes_in(point))
        themes.extend(news.syllabus_topics)
        themes.append(news.primary_subject.value)
        return list(dict.fromkeys(themes))

    def _themes_in(self, text: str) -> list[str]:
        return [theme for pattern, theme in self.theme_patterns if pattern.search(text)]

    def identify_recurring_themes(self, analyses: list[NewsAnalysis]) -> list[RecurringTheme]:
        counts: dict[str, int] = {}
        items: dict[str, list[str]] = {}
        relevance: dict[str, int] = {}

        for analysis in analyses:
            news = analysis.news_item
            for theme in self.extract_themes(analysis):
                counts[theme] = counts.get(theme, 0) + 1
                items.setdefault(theme, []).append(news.id)
                relevance[theme] = relevance.get(theme, 0) + news.relevance_score

        themes = [
            RecurringTheme(
                theme=theme,
                occurrences=count,
                news_items=items[theme],
                importance=theme_importance(count, relevance[theme] / count),
            )
            for theme, count in counts.items()
            if count >= 2
        ]
        themes.sort(key=lambda t: t.occurrences, reverse=True)
        return themes

    # Emerging topics

    def identify_emerging_topics(
        self, analyses: list[NewsAnalysis], period_end: datetime
    ) -> list[EmergingTopic]:
        """Topics first seen within the trailing week that recur quickly."""
        timeline: dict[str, list[datetime]] = {}
        for analysis in analyses:
            published = analysis.news_item.published_at
            if published is None:
                continue
            for topic in analysis.news_item.syllabus_topics:
                timeline.setdefault(topic, []).append(published)

        emerging: list[EmergingTopic] = []
        for topic, dates in timeline.items():
            first_seen = min(dates)
            days_since_first = _days_between(first_seen, period_end)
            growth = len(dates) / max(days_since_first, 1)

            if days_since_first <= EMERGING_WINDOW_DAYS and growth > EMERGING_MIN_GROWTH:
                emerging.append(EmergingTopic(
                    topic=topic,
                    growth_rate=round(growth, 2),
                    first_appeared=first_seen,
                    predicted_importance=emerging_importance(growth, len(dates)),
                ))

        emerging.sort(key=lambda t: t.growth_rate, reverse=True)
        return emerging

    # Distributions

    def subject_distribution(self, analyses: list[NewsAnalysis]) -> dict[SubjectArea, int]:
        """Share of analyses per primary subject, as rounded percentages."""
        counts: dict[SubjectArea, int] = {}
        for analysis in analyses:
            subject = analysis.news_item.primary_subject
            counts[subject] = counts.get(subject, 0) + 1

        total = len(analyses)
        return {
            subject: math.floor(count * 100 / total + 0.5)
            for subject, count in counts.items()
        }

    def source_distribution(self, analyses: list[NewsAnalysis]) -> dict[NewsSource, int]:
        counts: dict[NewsSource, int] = {}
        for analysis in analyses:
            source = analysis.news_item.source
            counts[source] = counts.get(source, 0) + 1
        return counts

    # Predictions

    def _theme_prediction(self, theme: RecurringTheme) -> ExamPrediction:
        probability = 50
        if theme.importance == ThemeImportance.CRITICAL:
            probability += 30
        elif theme.importance == ThemeImportance.IMPORTANT:
            probability += 20
        probability += min(theme.occurrences * 5, 20)

        lowered = theme.theme.lower()
        if any(keyword in lowered for keyword in taxonomy.FACTUAL_THEME_KEYWORDS):
            exam_type = ExamType.PRELIMS
        elif any(keyword in lowered for keyword in taxonomy.ANALYTICAL_THEME_KEYWORDS):
            exam_type = ExamType.MAINS
        else:
            exam_type = ExamType.BOTH

        reasoning = (
            f"Theme appeared {theme.occurrences} times with {theme.importance.value} importance. "
        )
        if theme.importance == ThemeImportance.CRITICAL:
            reasoning += "High government/policy focus. "
        nature = "factual nature" if exam_type == ExamType.PRELIMS else "analytical depth"
        reasoning += f"Suitable for {exam_type.value} due to {nature}."

        return ExamPrediction(
            topic=theme.theme,
            exam_type=exam_type,
            probability=min(probability, 95),
            reasoning=reasoning,
        )

    def _emerging_prediction(self, topic: EmergingTopic, period_end: datetime) -> ExamPrediction:
        probability = 40 + topic.growth_rate * 20

        days_since = _days_between(topic.first_appeared, period_end)
        if days_since < 3:
            probability += 10

        return ExamPrediction(
            topic=topic.topic,
            exam_type=ExamType.PRELIMS,
            probability=min(probability, 85),
            reasoning=(
                f"Emerging topic with {topic.growth_rate} growth rate. "
                f"First appeared {round(days_since)} days before period end. "
                f"{topic.predicted_importance}"
            ),
        )

    def _subject_predictions(self, distribution: dict[SubjectArea, int]) -> list[ExamPrediction]:
        return [
            ExamPrediction(
                topic=f"{subject.value} - Current Developments",
                exam_type=ExamType.BOTH,
                probability=min(60 + share / 2, 95),
                reasoning=(
                    f"{subject.value} covered {share}% of current affairs, indicating high relevance"
                ),
            )
            for subject, share in distribution.items()
            if share > SUBJECT_SHARE_THRESHOLD
        ]

    # Text reports

    def generate_revision_notes(self, themes: list[RecurringTheme]) -> str:
        """Numbered revision notes per theme, followed by focus areas."""
        lines = ["📚 WEEKLY REVISION NOTES", "=" * 24, ""]

        for index, theme in enumerate(themes, 1):
            lines.append(f"{index}. {theme.theme.upper()}")
            lines.append(f"   Frequency: {theme.occurrences} times")
            lines.append(f"   Importance: {theme.importance.value}")
            lines.append("   Key Points:")
            for point in theme_key_points(theme.theme):
                lines.append(f"   • {point}")
            lines.append("")

        lines.extend(["", "🎯 FOCUS AREAS", "=" * 15, ""])
        for theme in themes:
            if theme.importance == ThemeImportance.CRITICAL:
                lines.append(f"⭐ {theme.theme}: Requires detailed understanding and current updates")

        return "\n".join(lines) + "\n"

    def generate_trend_report(self, trend: TrendAnalysis) -> str:
        lines = ["📊 CURRENT AFFAIRS TREND ANALYSIS", "=" * 34, ""]
        lines.append(
            f"Period: {trend.period_start.date().isoformat()} to {trend.period_end.date().isoformat()}"
        )
        lines.append("")

        lines.extend(["🔄 RECURRING THEMES", "-" * 19])
        for index, theme in enumerate(trend.recurring_themes[:5], 1):
            lines.append(f"{index}. {theme.theme}")
            lines.append(f"   • Occurrences: {theme.occurrences}")
            lines.append(f"   • Importance: {theme.importance.value}")
            lines.append(f"   • Coverage: {len(theme.news_items)} articles")
            lines.append("")

        lines.extend(["🚀 EMERGING TOPICS", "-" * 18])
        for index, topic in enumerate(trend.emerging_topics[:5], 1):
            lines.append(f"{index}. {topic.topic}")
            lines.append(f"   • Growth Rate: {topic.growth_rate} per day")
            lines.append(f"   • First Appeared: {topic.first_appeared.date().isoformat()}")
            lines.append(f"   • Predicted Importance: {topic.predicted_importance}")
            lines.append("")

        lines.extend(["📚 SUBJECT DISTRIBUTION", "-" * 22])
        ranked = sorted(trend.subject_distribution.items(), key=lambda pair: pair[1], reverse=True)
        for subject, share in ranked:
            lines.append(f"• {subject.value}: {share}%")
        lines.append("")

        lines.extend(["🎯 EXAM PREDICTIONS", "-" * 19])
        for index, prediction in enumerate(trend.exam_predictions[:10], 1):
            lines.append(f"{index}. {prediction.topic}")
            lines.append(f"   • Exam Type: {prediction.exam_type.value}")
            lines.append(f"   • Probability: {prediction.probability:g}%")
            lines.append(f"   • Reasoning: {prediction.reasoning}")
            lines.append("")

        return "\n".join(lines)


def theme_importance(occurrences: int, average_relevance: float) -> ThemeImportance:
    score = occurrences * 10 + average_relevance
    if score > 200:
        return ThemeImportance.CRITICAL
    if score > 150:
        return ThemeImportance.IMPORTANT
    return ThemeImportance.MODERATE


def emerging_importance(growth_rate: float, occurrences: int) -> str:
    score = growth_rate * 50 + occurrences * 10
    if score > 80:
        return "High - Likely to be exam relevant"
    if score > 50:
        return "Medium - Monitor for developments"
    return "Low - Emerging but not yet critical"


def theme_key_points(theme: str) -> list[str]:
    return taxonomy.THEME_KEY_POINTS.get(theme, [
        f"Recent developments in {theme}",
        "Policy implications and stakeholder impact",
        "Future outlook and challenges",
    ])


def _days_between(start: datetime, end: datetime) -> float:
    if start.tzinfo is None:
        start = start.replace(tzinfo=timezone.utc)
    if end.tzinfo is None:
        end = end.replace(tzinfo=timezone.utc)
    return (end - start).total_seconds() / SECONDS_PER_DAY
