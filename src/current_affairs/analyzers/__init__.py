"""Scoring and analysis stages."""

from current_affairs.analyzers.content_analyzer import ContentAnalyzer
from current_affairs.analyzers.question_generator import QuestionGenerator, generate_distractor
from current_affairs.analyzers.relevance_filter import RelevanceFilter, confidence_for
from current_affairs.analyzers.trend_analyzer import TrendAnalyzer

__all__ = [
    "RelevanceFilter",
    "ContentAnalyzer",
    "QuestionGenerator",
    "TrendAnalyzer",
    "generate_distractor",
    "confidence_for",
]
