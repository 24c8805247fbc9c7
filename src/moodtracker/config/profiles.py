"""Configuration profile management.

Selects the configuration profile from the environment.
"""

import os
from enum import Enum


class Profile(Enum):
    """Available configuration profiles."""

    DEV = "dev"
    PROD = "prod"
    TEST = "test"


def detect_profile() -> Profile:
    """Detect appropriate configuration profile.

    Uses the MOODTRACKER_PROFILE environment variable, falling back to dev.

    Returns:
        Profile enum value
    """
    env_profile = os.environ.get("MOODTRACKER_PROFILE", "").lower()
    try:
        return Profile(env_profile)
    except ValueError:
        return Profile.DEV


__all__ = ["Profile", "detect_profile"]
