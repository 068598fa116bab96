"""
Domain models for the Hunter System API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services):

- Hunter: The user profile carrying RPG progression (xp, derived level/rank, stats)
- Workout: An immutable workout log entry with exercises and sets
- Quest: A daily/weekly/special objective with a one-time XP reward
- SystemMessage: A line of the hunter's chat transcript with The System
- Meal: A nutrition log entry

Usage:
    >>> from domain.models import Hunter, QuestType

    >>> hunter = Hunter(id="user-1", xp=900)
    >>> hunter.level
    4
"""

from domain.models.hunter import Hunter, LeaderboardEntry, fat_level_for
from domain.models.meal import Meal, MealCreate
from domain.models.quest import Quest, QuestProposal, QuestType
from domain.models.system_message import MessageRole, SystemMessage
from domain.models.workout import (
    ExerciseEntry,
    ExerciseSet,
    Workout,
    WorkoutCreate,
    calculate_total_volume,
)

__all__ = [
    # Profile
    "Hunter",
    "LeaderboardEntry",
    "fat_level_for",
    # Workouts
    "Workout",
    "WorkoutCreate",
    "ExerciseEntry",
    "ExerciseSet",
    "calculate_total_volume",
    # Quests
    "Quest",
    "QuestProposal",
    "QuestType",
    # Chat
    "SystemMessage",
    "MessageRole",
    # Nutrition
    "Meal",
    "MealCreate",
]
