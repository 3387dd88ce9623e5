"""News feed adapters."""

from current_affairs.adapters.sources.mock_feed import MockNewsFeed, load_mock_records

__all__ = ["MockNewsFeed", "load_mock_records"]
