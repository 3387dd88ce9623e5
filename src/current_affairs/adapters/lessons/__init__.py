"""Lesson catalog adapters."""

from current_affairs.adapters.lessons.in_memory_catalog import InMemoryLessonCatalog

__all__ = ["InMemoryLessonCatalog"]
