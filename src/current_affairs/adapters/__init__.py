"""Concrete collaborators: feeds, lesson catalog, exporters."""
