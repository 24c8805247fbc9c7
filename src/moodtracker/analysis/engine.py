"""Task analysis engine.

Turns a user's task log into an AnalysisReport: productive minutes per mood,
pleasant time windows, tasks to avoid, coping exercises and motivation.
"""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

from .aggregator import MoodAggregator
from .classifier import TaskClassifier
from .errors import MalformedTimeError
from .models import AnalysisReport, Task, TimeRange, parse_minutes
from .recommendations import ExerciseRecommender, motivational_message

if TYPE_CHECKING:
    from moodtracker.config import AnalysisConfig

logger = logging.getLogger(__name__)


class TaskDataSource(Protocol):
    """Protocol for fetching a user's tasks."""

    def get_tasks_for_user(self, user_id: int) -> list[Task]:
        """Get all tasks for a user, in logged order."""
        ...


class TaskAnalysisEngine:
    """Analyzes a user's tasks.

    Stateless between calls: every analysis builds a fresh report and never
    mutates the tasks it reads.
    """

    def __init__(
        self,
        data_source: TaskDataSource | None = None,
        strict_time_parsing: bool = False,
        aggregator: MoodAggregator | None = None,
        classifier: TaskClassifier | None = None,
        recommender: ExerciseRecommender | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            data_source: Source for task data
            strict_time_parsing: Raise on malformed times instead of skipping the task
            aggregator: Mood aggregator (defaults to the standard vocabulary)
            classifier: Avoid-task classifier
            recommender: Exercise recommender
        """
        self._data_source = data_source
        self._strict = strict_time_parsing
        self._aggregator = aggregator or MoodAggregator()
        self._classifier = classifier or TaskClassifier()
        self._recommender = recommender or ExerciseRecommender()

    @classmethod
    def from_config(
        cls, config: "AnalysisConfig", data_source: TaskDataSource | None = None
    ) -> "TaskAnalysisEngine":
        """Create an engine from analysis configuration."""
        return cls(data_source=data_source, strict_time_parsing=config.strict_time_parsing)

    def analyze(self, user_id: int) -> AnalysisReport:
        """Analyze all tasks of a user.

        Args:
            user_id: User whose tasks are analyzed

        Returns:
            AnalysisReport for the user

        Raises:
            MalformedTimeError: In strict mode, if a task time is not HH:MM.
        """
        if not self._data_source:
            logger.debug("No task data source configured, analyzing empty log")
            return self.analyze_tasks([])

        # Retrieval failures propagate to the caller
        tasks = self._data_source.get_tasks_for_user(user_id)
        logger.debug("Analyzing %d tasks for user %s", len(tasks), user_id)
        return self.analyze_tasks(tasks)

    def analyze_tasks(self, tasks: Sequence[Task]) -> AnalysisReport:
        """Analyze an in-memory task list.

        Args:
            tasks: Tasks in logged order

        Returns:
            AnalysisReport built from the tasks
        """
        timed, started, skipped = self._screen_times(tasks)

        # The classifier only reads start times
        aggregate = self._aggregator.aggregate(timed)
        avoid_tasks = self._classifier.avoid_tasks(started)
        exercises = self._recommender.message(tasks)

        return AnalysisReport(
            productive_minutes_per_mood=aggregate.productive_minutes,
            pleasant_time_ranges=self._split_ranges(aggregate.positive_windows),
            avoid_tasks=avoid_tasks,
            exercise_recommendations=exercises,
            motivation=motivational_message(),
            recommended_tasks=[],
            skipped_tasks=skipped,
        )

    def _screen_times(self, tasks: Sequence[Task]) -> tuple[list[Task], list[Task], list[str]]:
        """Split tasks by which of their times parse.

        Returns:
            Tasks with both times valid, tasks with a valid start, and titles
            of tasks that had any malformed time.
        """
        timed: list[Task] = []
        started: list[Task] = []
        skipped: list[str] = []

        for task in tasks:
            start_ok = self._time_parses(task, task.start_time)
            finish_ok = self._time_parses(task, task.finish_time)
            if start_ok:
                started.append(task)
            if start_ok and finish_ok:
                timed.append(task)
            else:
                skipped.append(task.display_title)

        return timed, started, skipped

    def _time_parses(self, task: Task, value: str | None) -> bool:
        try:
            parse_minutes(value)
        except MalformedTimeError as e:
            if self._strict:
                raise
            logger.warning("Skipping task %r: %s", task.display_title, e)
            return False
        return True

    def _split_ranges(self, windows: dict[str, list[str]]) -> dict[str, list[TimeRange]]:
        """Turn "start - end" strings back into TimeRanges, dropping malformed ones."""
        ranges: dict[str, list[TimeRange]] = {}
        for mood, displays in windows.items():
            parsed: list[TimeRange] = []
            for display in displays:
                time_range = TimeRange.from_display(display)
                if time_range is None:
                    logger.warning("Dropping malformed range %r for mood %s", display, mood)
                    continue
                parsed.append(time_range)
            ranges[mood] = parsed
        return ranges


__all__ = ["TaskAnalysisEngine", "TaskDataSource"]
