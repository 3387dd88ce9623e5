"""Current-affairs content pipeline for UPSC exam preparation."""

__version__ = "1.0.0"
