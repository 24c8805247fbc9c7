"""Static classification tables for task analysis.

Mood vocabularies and the exercise catalog are immutable and loaded once at
import time. The mood sets are matched case-sensitively except for
EXERCISE_MOODS, which holds lower-cased labels for the recommendation mapper.
"""

from types import MappingProxyType

UNTITLED_TASK = "Untitled Task"

# Tasks starting at or before noon (minutes since midnight)
MORNING_CUTOFF_MINUTES = 720

MISSING_TIME_TEXT = "00:00"

POSITIVE_MOODS = frozenset(
    {"Energetic", "Focused", "Determined", "Creative", "Relaxed", "Satisfied"}
)

AVOID_MOODS = frozenset({"Stressed", "Tired", "Overwhelmed", "Unmotivated", "Angry"})

EXERCISE_MOODS = frozenset({"stressed", "tired", "overwhelmed", "unmotivated", "angry"})

EXERCISE_CATALOG = MappingProxyType(
    {
        "work presentation": (
            "Work Presentation - Visualization Exercise: Picture yourself confidently "
            "delivering the presentation, focusing on success rather than stress."
        ),
        "grocery shopping": (
            "Grocery Shopping - Positive Playlist: Create an uplifting playlist to "
            "boost your mood and motivation during shopping."
        ),
        "home cleaning": (
            "Home Cleaning - 20-Minute Timer: Set a timer for short cleaning bursts "
            "to prevent feeling overwhelmed and maintain motivation."
        ),
        "job interview preparation": (
            "Job Interview Preparation - Mock Interviews: Practice answering common "
            "questions with a friend or in front of a mirror to build confidence."
        ),
        "fitness routine": (
            "Fitness Routine - Variety Challenge: Keep motivation high by introducing "
            "new exercises or activities into your routine regularly."
        ),
        "meal planning and cooking": (
            "Meal Planning and Cooking - Weekly Menu: Plan your meals for the week "
            "ahead to reduce stress and make grocery shopping more efficient."
        ),
        "budgeting": (
            "Budgeting - Financial Goals: Set specific and achievable financial goals "
            "to stay motivated and focused on budgeting."
        ),
        "academic study session": (
            "Academic Study Session - Pomodoro Technique: Break study sessions into "
            "short, focused intervals with breaks to maintain concentration."
        ),
        "home repairs": (
            "Home Repairs - Prioritize and Delegate: Identify and focus on the most "
            "crucial repairs, and delegate tasks when possible."
        ),
        "event planning": (
            "Event Planning - Task Checklist: Create a detailed checklist for each "
            "aspect of the event to stay organized and avoid feeling overwhelmed."
        ),
    }
)

MOTIVATION_MESSAGE = "\n".join(
    [
        "You're doing great! Keep pushing forward!",
        "Success is a journey, not a destination.",
        "Every small step counts.",
    ]
)


__all__ = [
    "AVOID_MOODS",
    "EXERCISE_CATALOG",
    "EXERCISE_MOODS",
    "MISSING_TIME_TEXT",
    "MORNING_CUTOFF_MINUTES",
    "MOTIVATION_MESSAGE",
    "POSITIVE_MOODS",
    "UNTITLED_TASK",
]
