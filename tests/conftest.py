"""Shared factories for pipeline tests."""

from datetime import datetime, timezone
from typing import Optional

import pytest

from current_affairs.core.entities import (
    Difficulty,
    MainsPaper,
    MainsQuestion,
    MainsRelevance,
    NewsAnalysis,
    NewsItem,
    NewsSource,
    PrelimsQuestion,
    ProbableQuestions,
    ProcessedNewsItem,
    ProcessingMetadata,
    RelevanceLevel,
    StaticConnection,
    SubjectArea,
    Summary,
)

PRELIMS_DIFFICULTIES = [
    Difficulty.EASY,
    Difficulty.MEDIUM,
    Difficulty.MEDIUM,
    Difficulty.HARD,
    Difficulty.MEDIUM,
]


def build_analysis(
    item_id: str,
    title: Optional[str] = None,
    subject: SubjectArea = SubjectArea.POLITY,
    score: int = 60,
    topics: Optional[list[str]] = None,
    source: NewsSource = NewsSource.PIB,
    published_at: Optional[datetime] = None,
    content: str = "Body text of the article.",
    key_points: Optional[list[str]] = None,
    connections: Optional[list[StaticConnection]] = None,
) -> NewsAnalysis:
    item = NewsItem(
        id=item_id,
        source=source,
        title=title or f"Story {item_id}",
        content=content,
        published_at=published_at or datetime(2024, 9, 1, 10, tzinfo=timezone.utc),
        url=f"https://example.org/{item_id}",
        tags=["test"],
    )
    news = ProcessedNewsItem(
        item=item,
        relevance_score=score,
        primary_subject=subject,
        secondary_subjects=[],
        syllabus_topics=topics if topics is not None else ["Current Developments"],
        prelims_relevance=RelevanceLevel.MEDIUM,
        mains_relevance=MainsRelevance(papers=[MainsPaper.GS2], level=RelevanceLevel.LOW),
        question_probability=50,
        metadata=ProcessingMetadata(
            processed_at=datetime(2024, 9, 2, tzinfo=timezone.utc),
            version="1.0.0",
            confidence=0.65,
        ),
    )
    prelims = [
        PrelimsQuestion(
            id=f"prelims-{item_id}-{n}",
            question=f"Q{n} on {item_id}?",
            options=["a", "b", "c", "d"],
            correct_answer=0,
            explanation="Because.",
            difficulty=difficulty,
            topic=news.syllabus_topics[0],
        )
        for n, difficulty in enumerate(PRELIMS_DIFFICULTIES, 1)
    ]
    mains = [
        MainsQuestion(
            id=f"mains-{item_id}-{n}",
            question=f"Discuss {item_id} ({n})",
            word_limit=250 if n == 1 else 150,
            paper=MainsPaper.GS2,
            marks=15 if n == 1 else 10,
            model_answer_points=[],
            approach="",
        )
        for n in (1, 2)
    ]
    return NewsAnalysis(
        news_item=news,
        summary=Summary(two_minute_read=f"Summary of {item_id}", word_count=3),
        key_points=key_points if key_points is not None else [f"Key point of {item_id}"],
        facts=[],
        background_context="",
        upsc_angle="UPSC Perspective:\n\n",
        static_connections=connections or [],
        questions=ProbableQuestions(prelims=prelims, mains=mains),
        related_pyqs=[],
    )


@pytest.fixture
def make_analysis():
    """Factory building a NewsAnalysis with five prelims and two mains questions."""
    return build_analysis
