"""Task repository for MongoDB storage.

Stores logged tasks and serves them to the analysis engine.
"""

import logging
from datetime import UTC, datetime
from typing import Any

from pymongo import ASCENDING
from pymongo.collection import Collection

from moodtracker.analysis.models import Task

from .client import retry_on_connection_failure

logger = logging.getLogger(__name__)


class TaskRepository:
    """Repository for task storage operations."""

    def __init__(self, collection: Collection[dict[str, Any]]) -> None:
        """Initialize repository with MongoDB collection.

        Args:
            collection: MongoDB collection for tasks.
        """
        self._collection = collection
        self._ensure_indexes()

    def _ensure_indexes(self) -> None:
        """Create indexes for efficient queries."""
        self._collection.create_index([("user_id", ASCENDING), ("_id", ASCENDING)])

    @retry_on_connection_failure()
    def save(self, task: Task) -> str:
        """Save a task and return its ID.

        Args:
            task: The task to save.

        Returns:
            The generated document ID.
        """
        doc = task.to_dict()
        doc["created_at"] = datetime.now(UTC)
        result = self._collection.insert_one(doc)
        return str(result.inserted_id)

    @retry_on_connection_failure()
    def find_by_user_id(self, user_id: int) -> list[Task]:
        """Get all tasks for a user in insertion order.

        Args:
            user_id: User ID to filter by.

        Returns:
            List of tasks, oldest first.
        """
        cursor = self._collection.find({"user_id": user_id}).sort("_id", ASCENDING)
        return [Task.from_dict(doc) for doc in cursor]

    @retry_on_connection_failure()
    def delete_for_user(self, user_id: int) -> int:
        """Delete all tasks of a user.

        Returns:
            Number of deleted tasks.
        """
        result = self._collection.delete_many({"user_id": user_id})
        logger.info("Deleted %d tasks for user %s", result.deleted_count, user_id)
        return result.deleted_count


class MongoTaskDataSource:
    """Adapter for the analysis engine to use MongoDB data.

    Implements the TaskDataSource protocol expected by TaskAnalysisEngine.
    """

    def __init__(self, repository: TaskRepository) -> None:
        """Initialize with task repository.

        Args:
            repository: The TaskRepository to use.
        """
        self._repository = repository

    def get_tasks_for_user(self, user_id: int) -> list[Task]:
        """Get a user's tasks in logged order."""
        return self._repository.find_by_user_id(user_id)


__all__ = ["MongoTaskDataSource", "TaskRepository"]
