"""Mood aggregation.

Sums productive minutes per mood and collects the time windows of tasks done
in a positive mood, in a single pass over the task list.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .models import Task, TimeRange, parse_minutes
from .vocabulary import MISSING_TIME_TEXT, POSITIVE_MOODS

logger = logging.getLogger(__name__)


@dataclass
class MoodAggregate:
    """Per-mood totals and positive-mood windows."""

    productive_minutes: dict[str, int]
    positive_windows: dict[str, list[str]]  # "start - end" display strings


class MoodAggregator:
    """Groups tasks by mood.

    Only moods with a strictly positive total are kept. Tasks without a mood
    are summed under their own bucket, which never reaches the output.
    """

    def __init__(self, positive_moods: Iterable[str] = POSITIVE_MOODS) -> None:
        """Initialize aggregator.

        Args:
            positive_moods: Mood labels whose windows are reported (case-sensitive)
        """
        self._positive_moods = frozenset(positive_moods)

    def aggregate(self, tasks: Sequence[Task]) -> MoodAggregate:
        """Aggregate minutes and positive windows.

        Args:
            tasks: Tasks in input order. Times must already be parseable.

        Returns:
            MoodAggregate with retained totals and windows

        Raises:
            MalformedTimeError: If a task time is not HH:MM.
        """
        totals: dict[str | None, int] = {}
        windows: dict[str, list[TimeRange]] = {}

        for task in tasks:
            minutes = parse_minutes(task.finish_time) - parse_minutes(task.start_time)
            totals[task.mood] = totals.get(task.mood, 0) + minutes

            if task.mood in self._positive_moods:
                windows.setdefault(task.mood, []).append(
                    TimeRange(
                        start=task.start_time or MISSING_TIME_TEXT,
                        end=task.finish_time or MISSING_TIME_TEXT,
                    )
                )

        productive_minutes = {
            mood: total for mood, total in totals.items() if mood is not None and total > 0
        }
        positive_windows = {
            mood: [time_range.display() for time_range in windows[mood]]
            for mood in productive_minutes
            if mood in windows
        }

        logger.debug(
            "Aggregated %d tasks into %d moods (%d positive)",
            len(tasks),
            len(productive_minutes),
            len(positive_windows),
        )

        return MoodAggregate(
            productive_minutes=productive_minutes,
            positive_windows=positive_windows,
        )


__all__ = ["MoodAggregate", "MoodAggregator"]
