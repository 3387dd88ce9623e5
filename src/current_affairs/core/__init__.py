"""Core domain layer."""

from current_affairs.core.entities import (
    DailyCompilation,
    Difficulty,
    ExamType,
    MainsPaper,
    MainsQuestion,
    NewsAnalysis,
    NewsItem,
    NewsSource,
    PrelimsQuestion,
    ProcessedNewsItem,
    RelevanceLevel,
    SubjectArea,
    TrendAnalysis,
    WeeklyCompilation,
)
from current_affairs.core.interfaces import CompilationExporter, LessonCatalog, NewsFeed

__all__ = [
    "NewsItem",
    "NewsSource",
    "SubjectArea",
    "MainsPaper",
    "RelevanceLevel",
    "Difficulty",
    "ExamType",
    "ProcessedNewsItem",
    "NewsAnalysis",
    "PrelimsQuestion",
    "MainsQuestion",
    "DailyCompilation",
    "WeeklyCompilation",
    "TrendAnalysis",
    "NewsFeed",
    "LessonCatalog",
    "CompilationExporter",
]
