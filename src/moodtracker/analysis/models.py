"""Data models for task analysis.

Defines the Task entity, the TimeRange value type and the AnalysisReport
returned by the engine.
"""

import re
from dataclasses import dataclass, field
from typing import Any

from .errors import MalformedTimeError
from .vocabulary import UNTITLED_TASK

_TIME_PATTERN = re.compile(r"([0-9]{1,2}):([0-9]{2})")

RANGE_SEPARATOR = " - "


def parse_minutes(value: str | None) -> int:
    """Convert an HH:MM time to minutes since midnight.

    Args:
        value: Time string in 24-hour HH:MM format. None counts as midnight.

    Returns:
        Minutes since midnight (hour * 60 + minute).

    Raises:
        MalformedTimeError: If the string is not a valid HH:MM time.
    """
    if value is None:
        return 0

    match = _TIME_PATTERN.fullmatch(value)
    if not match:
        raise MalformedTimeError(value)

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise MalformedTimeError(value)

    return hours * 60 + minutes


@dataclass(frozen=True)
class Task:
    """A logged task tagged with a mood.

    Attributes:
        mood: Free-form mood label (e.g., "Focused")
        title: Task title
        start_time: Start time as HH:MM
        finish_time: Finish time as HH:MM
        user_id: Owning user
        id: MongoDB document ID
    """

    mood: str | None = None
    title: str | None = None
    start_time: str | None = None
    finish_time: str | None = None
    user_id: int | None = None
    id: str | None = None

    @property
    def display_title(self) -> str:
        """Title with the untitled default applied."""
        return self.title if self.title is not None else UNTITLED_TASK

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for MongoDB storage."""
        return {
            "user_id": self.user_id,
            "title": self.title,
            "mood": self.mood,
            "start_time": self.start_time,
            "finish_time": self.finish_time,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        """Create from MongoDB document."""
        return cls(
            id=str(data["_id"]) if data.get("_id") else None,
            user_id=data.get("user_id"),
            title=data.get("title"),
            mood=data.get("mood"),
            start_time=data.get("start_time"),
            finish_time=data.get("finish_time"),
        )


@dataclass(frozen=True)
class TimeRange:
    """A start/end pair of HH:MM strings."""

    start: str
    end: str

    def display(self) -> str:
        """Format as "start - end"."""
        return f"{self.start}{RANGE_SEPARATOR}{self.end}"

    @classmethod
    def from_display(cls, text: str) -> "TimeRange | None":
        """Split a "start - end" string back into a range.

        Returns None unless the text holds exactly one separator.
        """
        parts = text.split(RANGE_SEPARATOR)
        if len(parts) != 2:
            return None
        return cls(start=parts[0], end=parts[1])

    def to_dict(self) -> dict[str, str]:
        return {"start": self.start, "end": self.end}


@dataclass
class AnalysisReport:
    """Result of analyzing one user's tasks.

    Attributes:
        productive_minutes_per_mood: Total minutes per mood (positive totals only)
        pleasant_time_ranges: Time ranges per positive mood, in input order
        avoid_tasks: Titles of negative-mood morning tasks
        exercise_recommendations: Newline-joined coping exercises
        motivation: Static motivational message
        recommended_tasks: Always empty
        skipped_tasks: Titles of tasks left out because of malformed times
    """

    productive_minutes_per_mood: dict[str, int]
    pleasant_time_ranges: dict[str, list[TimeRange]]
    avoid_tasks: list[str]
    exercise_recommendations: str
    motivation: str
    recommended_tasks: list[str] = field(default_factory=list)
    skipped_tasks: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the external report structure."""
        return {
            "Productive Minutes per Mood": dict(self.productive_minutes_per_mood),
            "Pleasant Time Ranges for Tasks Completions": {
                mood: [time_range.to_dict() for time_range in ranges]
                for mood, ranges in self.pleasant_time_ranges.items()
            },
            "Recommended Tasks": list(self.recommended_tasks),
            "Avoid Tasks": {"Avoid Tasks": list(self.avoid_tasks)},
            "Exercise Recommendations": {"message": self.exercise_recommendations},
            "Motivation": {"message": self.motivation},
        }


__all__ = [
    "AnalysisReport",
    "RANGE_SEPARATOR",
    "Task",
    "TimeRange",
    "parse_minutes",
]
