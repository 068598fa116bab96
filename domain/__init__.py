"""
Domain layer for the Hunter System API.

This package contains pure domain models and rules that are independent of
infrastructure concerns (database, API, external services):

- models/: Hunter, Workout, Quest, SystemMessage, Meal
- progression: XP -> level/rank curve and workout rewards
- volume: progressive overload and weekly intensity analysis
"""

from domain.models import (
    Hunter,
    Meal,
    Quest,
    QuestProposal,
    QuestType,
    SystemMessage,
    Workout,
    WorkoutCreate,
)

__all__ = [
    "Hunter",
    "Meal",
    "Quest",
    "QuestProposal",
    "QuestType",
    "SystemMessage",
    "Workout",
    "WorkoutCreate",
]
