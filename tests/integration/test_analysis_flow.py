"""Integration tests for the task analysis flow.

Tests stored tasks -> engine -> JSON report, and the command line entry point.
"""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from mongomock import MongoClient
from pymongo.errors import ServerSelectionTimeoutError

from moodtracker.__main__ import main
from moodtracker.analysis import Task, TaskAnalysisEngine
from moodtracker.analysis.vocabulary import EXERCISE_CATALOG, MOTIVATION_MESSAGE
from moodtracker.storage import MongoTaskDataSource, TaskRepository


@pytest.fixture
def repository() -> TaskRepository:
    """Create a task repository seeded with one user's day."""
    repository = TaskRepository(MongoClient()["moodtracker_test"]["tasks"])
    for task in [
        Task(mood="Focused", title="Academic Study Session", start_time="09:00", finish_time="11:00"),
        Task(mood="Stressed", title="Work Presentation", start_time="08:00", finish_time="09:00"),
        Task(mood="Satisfied", title="Home Repairs", start_time="18:00", finish_time="19:30"),
        Task(mood="Stressed", title="work presentation", start_time="13:00", finish_time="13:30"),
        Task(mood="Tired", title=None, start_time=None, finish_time="00:20"),
    ]:
        repository.save(Task(**{**task.to_dict(), "user_id": 1}))
    repository.save(Task(mood="Angry", title="Budgeting", start_time="07:00", finish_time="08:00", user_id=2))
    return repository


class TestAnalysisFlow:
    """Tests for analysis over stored tasks."""

    def test_report_from_stored_tasks(self, repository: TaskRepository) -> None:
        """Report reflects only the requested user's tasks."""
        engine = TaskAnalysisEngine(data_source=MongoTaskDataSource(repository))

        report = json.loads(json.dumps(engine.analyze(1).to_dict()))

        assert report["Productive Minutes per Mood"] == {
            "Focused": 120,
            "Stressed": 90,
            "Satisfied": 90,
            "Tired": 20,
        }
        assert report["Pleasant Time Ranges for Tasks Completions"] == {
            "Focused": [{"start": "09:00", "end": "11:00"}],
            "Satisfied": [{"start": "18:00", "end": "19:30"}],
        }
        assert report["Recommended Tasks"] == []
        assert report["Avoid Tasks"] == {"Avoid Tasks": ["Work Presentation", "Untitled Task"]}
        assert report["Exercise Recommendations"] == {
            "message": EXERCISE_CATALOG["work presentation"]
        }
        assert report["Motivation"] == {"message": MOTIVATION_MESSAGE}

    def test_unknown_user_gets_empty_report(self, repository: TaskRepository) -> None:
        """A user without tasks gets empty fields and the fixed motivation."""
        engine = TaskAnalysisEngine(data_source=MongoTaskDataSource(repository))

        report = engine.analyze(404).to_dict()

        assert report["Productive Minutes per Mood"] == {}
        assert report["Pleasant Time Ranges for Tasks Completions"] == {}
        assert report["Avoid Tasks"] == {"Avoid Tasks": []}
        assert report["Exercise Recommendations"] == {"message": ""}
        assert report["Motivation"] == {"message": MOTIVATION_MESSAGE}


class TestCommandLine:
    """Tests for python -m moodtracker."""

    @pytest.fixture
    def storage_class(self, repository: TaskRepository):
        """Patch the storage client to serve the seeded repository."""
        storage = MagicMock()
        storage.__enter__.return_value.tasks = repository
        with patch("moodtracker.__main__.MongoStorageClient") as storage_class:
            storage_class.from_config.return_value = storage
            yield storage_class

    def test_analyze_prints_json(
        self, storage_class: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Analyze command prints the report as JSON."""
        exit_code = main(["analyze", "2", "--profile", "test"])

        assert exit_code == 0
        report = json.loads(capsys.readouterr().out)
        assert report["Productive Minutes per Mood"] == {"Angry": 60}
        assert report["Avoid Tasks"] == {"Avoid Tasks": ["Budgeting"]}
        assert report["Exercise Recommendations"]["message"] == EXERCISE_CATALOG["budgeting"]

    def test_dry_run(self, storage_class: MagicMock) -> None:
        """Dry run loads config without touching storage."""
        assert main(["analyze", "1", "--profile", "test", "--dry-run"]) == 0
        storage_class.from_config.assert_not_called()

    def test_missing_config_file(self, tmp_path: Path) -> None:
        """Missing config file exits with an error code."""
        assert main(["analyze", "1", "--config", str(tmp_path / "nope.yaml")]) == 1

    def test_storage_failure(self, storage_class: MagicMock) -> None:
        """Storage failures exit with an error code."""
        storage_class.from_config.return_value.__enter__.side_effect = ServerSelectionTimeoutError(
            "no server"
        )

        assert main(["analyze", "1", "--profile", "test"]) == 1

    def test_strict_profile_rejects_malformed_time(
        self, storage_class: MagicMock, repository: TaskRepository
    ) -> None:
        """Test profile fails the call on a malformed time."""
        repository.save(Task(mood="Focused", title="Bad", start_time="9am", finish_time="10:00", user_id=3))

        assert main(["analyze", "3", "--profile", "test"]) == 1
