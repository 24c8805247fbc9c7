"""Coping exercise recommendations.

Maps negative-mood tasks to exercises from the static catalog. Mood and
title are both matched case-insensitively here, unlike the classifier.
"""

from collections.abc import Iterable, Mapping, Sequence

from .models import Task
from .vocabulary import EXERCISE_CATALOG, EXERCISE_MOODS, MOTIVATION_MESSAGE


class ExerciseRecommender:
    """Looks up coping exercises for negative-mood tasks."""

    def __init__(
        self,
        catalog: Mapping[str, str] = EXERCISE_CATALOG,
        moods: Iterable[str] = EXERCISE_MOODS,
    ) -> None:
        """Initialize recommender.

        Args:
            catalog: Lower-cased task title to exercise description
            moods: Lower-cased negative mood labels
        """
        self._catalog = catalog
        self._moods = frozenset(moods)

    def exercise_for(self, task: Task) -> str | None:
        """Return the exercise for a task, or None if it has none."""
        if task.mood is None or task.mood.lower() not in self._moods:
            return None
        if task.title is None:
            return None
        return self._catalog.get(task.title.lower())

    def recommend(self, tasks: Sequence[Task]) -> set[str]:
        """Collect distinct exercises for all tasks."""
        exercises: set[str] = set()
        for task in tasks:
            exercise = self.exercise_for(task)
            if exercise:
                exercises.add(exercise)
        return exercises

    def message(self, tasks: Sequence[Task]) -> str:
        """Join distinct exercises into one message.

        Line order is unspecified.
        """
        return "\n".join(self.recommend(tasks))


def motivational_message() -> str:
    """Static motivation, identical for every user."""
    return MOTIVATION_MESSAGE


__all__ = ["ExerciseRecommender", "motivational_message"]
