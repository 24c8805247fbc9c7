"""MongoDB storage module for MoodTracker.

Provides persistent storage for logged tasks.
"""

from .client import MongoStorageClient, retry_on_connection_failure
from .tasks import MongoTaskDataSource, TaskRepository

__all__ = [
    "MongoStorageClient",
    "MongoTaskDataSource",
    "TaskRepository",
    "retry_on_connection_failure",
]
