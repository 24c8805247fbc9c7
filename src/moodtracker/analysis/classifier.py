"""Task classification.

Flags tasks to avoid: negative mood and a start at or before noon.
"""

from collections.abc import Iterable, Sequence

from .models import Task, parse_minutes
from .vocabulary import AVOID_MOODS, MORNING_CUTOFF_MINUTES


class TaskClassifier:
    """Classifies raw tasks into avoid candidates."""

    def __init__(
        self,
        avoid_moods: Iterable[str] = AVOID_MOODS,
        cutoff_minutes: int = MORNING_CUTOFF_MINUTES,
    ) -> None:
        self._avoid_moods = frozenset(avoid_moods)
        self._cutoff_minutes = cutoff_minutes

    def is_avoid_candidate(self, task: Task) -> bool:
        """Check whether a task should be avoided.

        A missing start time counts as midnight, so it always qualifies.
        The finish time is ignored.
        """
        if task.mood not in self._avoid_moods:
            return False
        return 0 <= parse_minutes(task.start_time) <= self._cutoff_minutes

    def avoid_tasks(self, tasks: Sequence[Task]) -> list[str]:
        """Titles of avoid candidates, in input order."""
        return [task.display_title for task in tasks if self.is_avoid_candidate(task)]


__all__ = ["TaskClassifier"]
