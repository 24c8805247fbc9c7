"""Configuration module for MoodTracker.

This module provides configuration loading and profile management.
"""

from dataclasses import dataclass, field


@dataclass
class StorageConfig:
    """MongoDB storage configuration."""

    uri: str = "mongodb://localhost:27017"
    database_name: str = "moodtracker"
    tasks_collection: str = "tasks"
    max_pool_size: int = 50
    min_pool_size: int = 10
    connect_timeout_ms: int = 5000
    server_selection_timeout_ms: int = 5000


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"


@dataclass
class AnalysisConfig:
    """Task analysis configuration."""

    strict_time_parsing: bool = False


@dataclass
class ReportConfig:
    """Report output configuration."""

    indent: int | None = 2


@dataclass
class MoodTrackerConfig:
    """Main MoodTracker configuration."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    report: ReportConfig = field(default_factory=ReportConfig)


# Public API
__all__ = [
    "AnalysisConfig",
    "LoggingConfig",
    "MoodTrackerConfig",
    "ReportConfig",
    "StorageConfig",
]
