"""Unit tests for avoid-task classification."""

import pytest

from moodtracker.analysis.classifier import TaskClassifier
from moodtracker.analysis.errors import MalformedTimeError
from moodtracker.analysis.models import Task


class TestTaskClassifier:
    """Tests for TaskClassifier."""

    @pytest.fixture
    def classifier(self) -> TaskClassifier:
        """Create classifier with the standard vocabulary."""
        return TaskClassifier()

    @pytest.mark.parametrize("mood", ["Stressed", "Tired", "Overwhelmed", "Unmotivated", "Angry"])
    def test_negative_morning_task_is_avoided(self, classifier: TaskClassifier, mood: str) -> None:
        """Every negative mood qualifies in the morning."""
        task = Task(mood=mood, title="Budgeting", start_time="08:00")

        assert classifier.is_avoid_candidate(task)

    def test_noon_is_inclusive(self, classifier: TaskClassifier) -> None:
        """A task starting exactly at noon qualifies, one minute later does not."""
        assert classifier.is_avoid_candidate(Task(mood="Tired", start_time="12:00"))
        assert not classifier.is_avoid_candidate(Task(mood="Tired", start_time="12:01"))

    def test_midnight_start_qualifies(self, classifier: TaskClassifier) -> None:
        """The window starts at 00:00."""
        assert classifier.is_avoid_candidate(Task(mood="Angry", start_time="00:00"))

    def test_missing_start_counts_as_midnight(self, classifier: TaskClassifier) -> None:
        """A task without a start time always qualifies."""
        assert classifier.is_avoid_candidate(Task(mood="Angry", finish_time="23:00"))

    def test_finish_time_ignored(self, classifier: TaskClassifier) -> None:
        """Only the start time is checked."""
        task = Task(mood="Stressed", start_time="11:30", finish_time="15:00")

        assert classifier.is_avoid_candidate(task)

    def test_positive_and_unknown_moods_not_avoided(self, classifier: TaskClassifier) -> None:
        """Moods outside the negative set never qualify."""
        assert not classifier.is_avoid_candidate(Task(mood="Focused", start_time="08:00"))
        assert not classifier.is_avoid_candidate(Task(mood=None, start_time="08:00"))

    def test_mood_match_is_case_sensitive(self, classifier: TaskClassifier) -> None:
        """Lower-cased negative moods don't qualify here."""
        assert not classifier.is_avoid_candidate(Task(mood="stressed", start_time="08:00"))

    def test_avoid_tasks_titles_in_order(self, classifier: TaskClassifier) -> None:
        """Titles are listed in input order with duplicates kept."""
        tasks = [
            Task(mood="Tired", title="Home Cleaning", start_time="07:00"),
            Task(mood="Focused", title="Budgeting", start_time="08:00"),
            Task(mood="Stressed", title="Work Presentation", start_time="09:00"),
            Task(mood="Stressed", title="Late Meeting", start_time="16:00"),
            Task(mood="Tired", title="Home Cleaning", start_time="10:00"),
        ]

        assert classifier.avoid_tasks(tasks) == [
            "Home Cleaning",
            "Work Presentation",
            "Home Cleaning",
        ]

    def test_untitled_task_default(self, classifier: TaskClassifier) -> None:
        """Missing titles are reported as Untitled Task."""
        tasks = [Task(mood="Overwhelmed", start_time="06:00")]

        assert classifier.avoid_tasks(tasks) == ["Untitled Task"]

    def test_custom_cutoff(self) -> None:
        """The cut-off can be moved."""
        classifier = TaskClassifier(cutoff_minutes=540)

        assert classifier.is_avoid_candidate(Task(mood="Tired", start_time="09:00"))
        assert not classifier.is_avoid_candidate(Task(mood="Tired", start_time="10:00"))

    def test_malformed_start_raises(self, classifier: TaskClassifier) -> None:
        """Unscreened malformed start times raise."""
        with pytest.raises(MalformedTimeError):
            classifier.is_avoid_candidate(Task(mood="Tired", start_time="morning"))
