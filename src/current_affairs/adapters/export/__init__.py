"""Document exporters."""

from current_affairs.adapters.export.text_exporter import TextExporter

__all__ = ["TextExporter"]
