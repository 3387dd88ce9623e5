"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional, Union

from current_affairs.core.entities import (
    DailyCompilation,
    Lesson,
    NewsItem,
    NewsSource,
    PrelimsQuestion,
    SubjectArea,
    WeeklyCompilation,
)


class NewsFeed(ABC):
    """Interface for fetching raw articles from a news source."""

    @abstractmethod
    async def fetch_items(self, source: NewsSource, day: date) -> list[NewsItem]:
        """Fetch items published by source on the given day."""
        pass

    @abstractmethod
    async def fetch_all(self, source: NewsSource) -> list[NewsItem]:
        """Fetch every item the feed currently carries for source."""
        pass


class CompilationExporter(ABC):
    """Interface for rendering compilations to documents."""

    @abstractmethod
    def render_quiz(self, questions: list[PrelimsQuestion]) -> str:
        """Render a quiz document with lettered options and an answer key."""
        pass

    @abstractmethod
    def render_report(self, compilation: Union[DailyCompilation, WeeklyCompilation]) -> str:
        """Render a flat printable report."""
        pass


class LessonCatalog(ABC):
    """Interface for the static lesson catalog.

    Read side is keyed by subject and topic. Write side is fire-and-forget.
    """

    @abstractmethod
    def get_subject_lessons(self, subject: SubjectArea) -> list[Lesson]:
        """Return lessons filed under a subject."""
        pass

    @abstractmethod
    def get_topic_lessons(self, topic: str) -> list[Lesson]:
        """Return lessons filed under a syllabus topic."""
        pass

    @abstractmethod
    def get_lesson(self, lesson_id: str) -> Optional[Lesson]:
        """Return a single lesson by id, or None."""
        pass

    @abstractmethod
    def append_examples(self, lesson_id: str, examples: list[str]) -> None:
        """Attach current-affairs examples to a lesson."""
        pass

    @abstractmethod
    def tag_question(self, question_id: str, refs: list[str]) -> None:
        """Tag a question record with current-affairs references."""
        pass
