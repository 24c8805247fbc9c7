"""MoodTracker - task mood analytics.

MoodTracker turns a user's task log (tasks tagged with a mood and a
start/finish time) into a report with:
- Productive minutes per mood
- Time windows spent in a positive mood
- Morning tasks done in a negative mood, to avoid
- Coping exercises and a motivational message

Usage:
    python -m moodtracker analyze 42 --profile dev
"""

__version__ = "0.1.0"

from .analysis import AnalysisReport, Task, TaskAnalysisEngine
from .config import MoodTrackerConfig
from .config.loader import load_config

__all__ = [
    "AnalysisReport",
    "MoodTrackerConfig",
    "Task",
    "TaskAnalysisEngine",
    "__version__",
    "load_config",
]
