"""Keyword-based exam relevance scoring."""

from datetime import datetime, timezone
from typing import Optional

from current_affairs.analyzers.keywords import (
    count_matches,
    count_matches_with_tags,
    normalize_text,
)
from current_affairs.core import taxonomy
from current_affairs.core.entities import (
    MainsPaper,
    MainsRelevance,
    NewsItem,
    NewsSource,
    ProcessedNewsItem,
    ProcessingMetadata,
    RelevanceLevel,
    ScoreBreakdown,
    SubjectArea,
)

PROCESSING_VERSION = "1.0.0"


class RelevanceFilter:
    """Score raw news items against the syllabus taxonomy and keep the relevant ones.

    The score is the sum of seven independently capped factors, capped again
    at 100. Lookup tables default to the ones in ``core.taxonomy`` and can be
    replaced per instance.
    """

    def __init__(
        self,
        threshold: int = 40,
        syllabus_keywords: Optional[dict[SubjectArea, list[str]]] = None,
        topic_map: Optional[dict[SubjectArea, dict[str, str]]] = None,
        default_subject: SubjectArea = taxonomy.DEFAULT_SUBJECT,
        now: Optional[datetime] = None,
    ) -> None:
        self.threshold = threshold
        self.syllabus_keywords = syllabus_keywords or taxonomy.SYLLABUS_KEYWORDS
        self.topic_map = topic_map or taxonomy.SYLLABUS_TOPIC_MAP
        self.default_subject = default_subject
        self.now = now

    def calculate_relevance_score(self, item: NewsItem) -> int:
        """Total relevance score in the range 0..100."""
        return self.get_score_breakdown(item).total

    def get_score_breakdown(self, item: NewsItem) -> ScoreBreakdown:
        """Per-factor scores, each clamped to its own cap."""
        text = normalize_text(item.title, item.content)

        return ScoreBreakdown(
            syllabus_match=self._syllabus_match(text, item.tags),
            government_policy=self._government_policy(text, item.source),
            constitutional_importance=self._constitutional(text),
            international_impact=self._international(text),
            economic_implications=self._economic(text),
            environmental_significance=self._environmental(text),
            historical_precedent=self._historical(text),
        )

    def filter_by_relevance(
        self, items: list[NewsItem], threshold: Optional[int] = None
    ) -> list[ProcessedNewsItem]:
        """Promote items scoring at least threshold, highest score first.

        Ties keep their input order.
        """
        if threshold is None:
            threshold = self.threshold

        processed: list[ProcessedNewsItem] = []
        for item in items:
            score = self.calculate_relevance_score(item)
            if score >= threshold:
                processed.append(self.process_item(item, score))

        processed.sort(key=lambda p: p.relevance_score, reverse=True)
        return processed

    def process_item(self, item: NewsItem, score: Optional[int] = None) -> ProcessedNewsItem:
        """Derive the exam-facing fields for a single item."""
        if score is None:
            score = self.calculate_relevance_score(item)

        text = normalize_text(item.title, item.content)
        subject_hits = self.subject_hits(text, item.tags)
        primary = self.primary_subject(subject_hits)

        return ProcessedNewsItem(
            item=item,
            relevance_score=score,
            primary_subject=primary,
            secondary_subjects=self._secondary_subjects(subject_hits, primary),
            syllabus_topics=self._syllabus_topics(text, primary),
            prelims_relevance=self._prelims_relevance(text, score),
            mains_relevance=self._mains_relevance(text, primary),
            question_probability=self._question_probability(score, item),
            metadata=ProcessingMetadata(
                processed_at=self._now(),
                version=PROCESSING_VERSION,
                confidence=confidence_for(score),
            ),
        )

    def subject_hits(self, text: str, tags: list[str]) -> dict[SubjectArea, int]:
        """Keyword hit count per syllabus domain, in table order."""
        return {
            subject: count_matches_with_tags(text, tags, keywords)
            for subject, keywords in self.syllabus_keywords.items()
        }

    def primary_subject(self, hits: dict[SubjectArea, int]) -> SubjectArea:
        best_subject = self.default_subject
        best_hits = 0
        for subject, count in hits.items():
            # strict comparison keeps the earliest domain on ties
            if count > best_hits:
                best_subject, best_hits = subject, count
        if best_hits == 0:
            return self.default_subject
        return best_subject

    # Scoring factors

    def _syllabus_match(self, text: str, tags: list[str]) -> int:
        score = 0
        matched_domains = 0

        for count in self.subject_hits(text, tags).values():
            if count > 0:
                matched_domains += 1
                score += min(count * 2, 8)

        # Multi-subject bonus
        if matched_domains > 1:
            score += matched_domains * 2

        return min(score, 25)

    def _government_policy(self, text: str, source: Optional[NewsSource]) -> int:
        score = 0
        if source is not None and source.value in taxonomy.OFFICIAL_BULLETIN_SOURCES:
            score += 5
        score += min(count_matches(text, taxonomy.POLICY_KEYWORDS) * 3, 15)
        return min(score, 20)

    def _constitutional(self, text: str) -> int:
        score = min(count_matches(text, taxonomy.CONSTITUTIONAL_KEYWORDS) * 2, 10)
        score += count_matches(text, taxonomy.HIGH_VALUE_CONSTITUTIONAL_PHRASES) * 3
        return min(score, 15)

    def _international(self, text: str) -> int:
        score = min(count_matches(text, taxonomy.INTERNATIONAL_KEYWORDS) * 2, 6)
        score += min(count_matches(text, taxonomy.REGIONAL_KEYWORDS), 4)
        return min(score, 10)

    def _economic(self, text: str) -> int:
        score = min(count_matches(text, taxonomy.ECONOMIC_INDICATORS) * 2, 5)
        score += min(count_matches(text, taxonomy.ECONOMIC_POLICIES) * 2, 5)
        return min(score, 10)

    def _environmental(self, text: str) -> int:
        score = min(count_matches(text, taxonomy.ENVIRONMENT_KEYWORDS), 5)
        score += count_matches(text, taxonomy.CRITICAL_CLIMATE_TOPICS) * 3
        return min(score, 10)

    def _historical(self, text: str) -> int:
        return min(count_matches(text, taxonomy.MILESTONE_KEYWORDS) * 2, 10)

    # Derived fields

    def _secondary_subjects(
        self, hits: dict[SubjectArea, int], primary: SubjectArea
    ) -> list[SubjectArea]:
        secondary = [subject for subject, count in hits.items() if count > 0 and subject != primary]
        return secondary[:3]

    def _syllabus_topics(self, text: str, primary: SubjectArea) -> list[str]:
        topics = [
            topic
            for keyword, topic in self.topic_map.get(primary, {}).items()
            if keyword in text
        ]
        return topics or [taxonomy.GENERIC_TOPIC]

    def _question_probability(self, score: int, item: NewsItem) -> float:
        probability = score * 0.5

        if item.source is not None:
            probability += taxonomy.SOURCE_QUESTION_BONUS.get(item.source.value, 0)

        if item.published_at is not None:
            age_days = self._days_since(item.published_at)
            if age_days < 30:
                probability += 10
            if age_days < 7:
                probability += 5

        tag_hits = sum(
            1
            for tag in item.tags
            if any(hot in tag.lower() for hot in taxonomy.HIGH_PROBABILITY_TAGS)
        )
        probability += tag_hits * 5

        return min(probability, 95)

    def _prelims_relevance(self, text: str, score: int) -> RelevanceLevel:
        factual = count_matches(text, taxonomy.FACTUAL_KEYWORDS)
        if score > 80 or factual > 3:
            return RelevanceLevel.HIGH
        if score > 60 or factual > 1:
            return RelevanceLevel.MEDIUM
        return RelevanceLevel.LOW

    def _mains_relevance(self, text: str, primary: SubjectArea) -> MainsRelevance:
        papers: list[MainsPaper] = list(taxonomy.MAINS_PAPER_MAP.get(primary, []))
        level = RelevanceLevel.LOW

        analytical = count_matches(text, taxonomy.ANALYTICAL_KEYWORDS)
        if analytical > 2:
            level = RelevanceLevel.HIGH
            papers.append(MainsPaper.ESSAY)
        elif analytical > 0:
            level = RelevanceLevel.MEDIUM

        return MainsRelevance(papers=list(dict.fromkeys(papers)), level=level)

    def _now(self) -> datetime:
        return self.now or datetime.now(timezone.utc)

    def _days_since(self, moment: datetime) -> float:
        now = self._now()
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return (now - moment).total_seconds() / 86400


def confidence_for(score: int) -> float:
    """Fixed confidence bands for a relevance score."""
    if score > 85:
        return 0.95
    if score > 70:
        return 0.85
    if score > 60:
        return 0.75
    return 0.65
