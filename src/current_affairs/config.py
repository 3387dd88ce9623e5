"""Configuration management."""

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Optional

import yaml

from current_affairs.core.entities import NewsSource


@dataclass
class PipelineConfig:
    """Relevance filter and trend settings."""
    relevance_threshold: int = 40
    trend_prediction_limit: int = 15


@dataclass
class CompilationConfig:
    """Daily brief and weekly compilation settings."""
    top_stories: int = 10
    daily_quiz_size: int = 10
    weekly_quiz_size: int = 20
    weekly_mains_limit: int = 10
    weekly_predicted_topics: int = 10
    quiz_seed: Optional[int] = None


@dataclass
class SourcesConfig:
    """Feed settings."""
    enabled: list[str] = field(default_factory=lambda: [source.value for source in NewsSource])
    reference_date: Optional[date] = None


@dataclass
class PathsConfig:
    """Path settings."""
    output_dir: Path = Path("compilations")


@dataclass
class Settings:
    """Application settings."""

    pipeline: PipelineConfig = field(default_factory=PipelineConfig)
    compilation: CompilationConfig = field(default_factory=CompilationConfig)
    sources: SourcesConfig = field(default_factory=SourcesConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)

    @property
    def relevance_threshold(self) -> int:
        return self.pipeline.relevance_threshold

    @property
    def trend_prediction_limit(self) -> int:
        return self.pipeline.trend_prediction_limit

    @property
    def quiz_seed(self) -> Optional[int]:
        return self.compilation.quiz_seed

    @property
    def enabled_sources(self) -> list[NewsSource]:
        """Configured sources as enum members; raises ValueError on unknown names."""
        return [NewsSource(name) for name in self.sources.enabled]

    @property
    def reference_date(self) -> Optional[date]:
        return self.sources.reference_date

    @property
    def output_dir(self) -> Path:
        return self.paths.output_dir


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config, falling back to defaults."""
    config = load_config(config_path)
    settings = Settings()

    if "pipeline" in config:
        for key, value in config["pipeline"].items():
            setattr(settings.pipeline, key, value)

    if "compilation" in config:
        for key, value in config["compilation"].items():
            setattr(settings.compilation, key, value)

    if "sources" in config:
        for key, value in config["sources"].items():
            # YAML parses bare ISO dates into date objects already
            if key == "reference_date" and isinstance(value, str):
                value = date.fromisoformat(value)
            setattr(settings.sources, key, value)

    if "paths" in config:
        for key, value in config["paths"].items():
            setattr(settings.paths, key, Path(value))

    return settings
