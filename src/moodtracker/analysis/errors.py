"""Error types for task analysis.

Custom exceptions raised while analyzing a user's tasks.
"""


class AnalysisError(Exception):
    """Base exception for analysis errors."""

    pass


class MalformedTimeError(AnalysisError, ValueError):
    """Raised when a task time is not in HH:MM format."""

    def __init__(self, value: str) -> None:
        """Initialize malformed time error.

        Args:
            value: The offending time string.
        """
        super().__init__(f"Malformed time {value!r}, expected HH:MM")
        self.value = value


__all__ = [
    "AnalysisError",
    "MalformedTimeError",
]
