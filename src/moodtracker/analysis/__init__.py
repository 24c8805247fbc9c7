"""Analysis module for MoodTracker.

Provides the task analysis engine and its stages.
"""

from .aggregator import MoodAggregate, MoodAggregator
from .classifier import TaskClassifier
from .engine import TaskAnalysisEngine, TaskDataSource
from .errors import AnalysisError, MalformedTimeError
from .models import AnalysisReport, Task, TimeRange, parse_minutes
from .recommendations import ExerciseRecommender, motivational_message

__all__ = [
    "AnalysisError",
    "AnalysisReport",
    "ExerciseRecommender",
    "MalformedTimeError",
    "MoodAggregate",
    "MoodAggregator",
    "Task",
    "TaskAnalysisEngine",
    "TaskClassifier",
    "TaskDataSource",
    "TimeRange",
    "motivational_message",
    "parse_minutes",
]
