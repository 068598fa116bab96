"""
Application Use Cases for the Hunter System API.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models, not API responses

Usage:
    from application.use_cases import LogWorkoutUseCase, QuestLifecycleManager

    # Log a workout
    log_workout = LogWorkoutUseCase(workout_repo=workout_repo)
    result = log_workout.execute("user-123", payload)

    # Refresh and complete quests
    manager = QuestLifecycleManager(quest_repo, hunter_repo, quest_generator)
    quests = await manager.regenerate("user-123", QuestType.DAILY, 3)
    completion = manager.complete("user-123", quests[0].id)
"""

from application.use_cases.hunter_stats import HunterStats, HunterStatsUseCase
from application.use_cases.log_meal import LogMealUseCase
from application.use_cases.log_workout import LogWorkoutUseCase, WorkoutLogResult
from application.use_cases.quest_lifecycle import (
    QuestCompletionResult,
    QuestLifecycleManager,
)
from application.use_cases.system_chat import (
    UNAVAILABLE_REPLY,
    ChatTurnResult,
    SystemChatUseCase,
)
from application.use_cases.update_profile import (
    GetOrCreateHunterUseCase,
    ProfileUpdate,
    UpdateProfileUseCase,
)

__all__ = [
    # Workouts
    "LogWorkoutUseCase",
    "WorkoutLogResult",
    # Quests
    "QuestLifecycleManager",
    "QuestCompletionResult",
    # Profile
    "GetOrCreateHunterUseCase",
    "UpdateProfileUseCase",
    "ProfileUpdate",
    # Stats
    "HunterStatsUseCase",
    "HunterStats",
    # Chat
    "SystemChatUseCase",
    "ChatTurnResult",
    "UNAVAILABLE_REPLY",
    # Meals
    "LogMealUseCase",
]
