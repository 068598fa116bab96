"""
LogWorkout Use Case.

Turns a workout submission into a persisted workout plus its XP and stat
rewards, and reports whether the hunter is progressively overloading.

Workflow:
1. Resolve total volume (recomputed from sets when any are present)
2. Load the trailing 14 days of history and run the volume analysis
3. Derive XP and stat increments from the workout
4. Persist workout + rewards in one store transaction

Either everything in step 4 is persisted or nothing is.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from application.ports import WorkoutRepository
from domain.models import Hunter, Workout, WorkoutCreate
from domain.progression import StatDelta, stat_delta_from_workout, xp_from_workout
from domain.volume import VolumeAnalysis, analyze_volume, history_start

logger = logging.getLogger(__name__)


@dataclass
class WorkoutLogResult:
    """Result of the LogWorkout use case execution."""

    workout: Workout
    hunter: Hunter
    analysis: VolumeAnalysis
    xp_gained: int
    stat_delta: StatDelta


class LogWorkoutUseCase:
    """
    Use case for logging a workout and applying its rewards.

    Usage:
        >>> use_case = LogWorkoutUseCase(workout_repo=workout_repo)
        >>> result = use_case.execute("user-123", WorkoutCreate(total_volume=2500, duration=65))
        >>> result.xp_gained
        75
    """

    def __init__(self, workout_repo: WorkoutRepository) -> None:
        """
        Args:
            workout_repo: Repository for reading history and persisting workouts
        """
        self._workout_repo = workout_repo

    def execute(
        self,
        user_id: str,
        payload: WorkoutCreate,
        now: Optional[datetime] = None,
    ) -> WorkoutLogResult:
        """
        Log a workout.

        Args:
            user_id: Owner of the workout
            payload: Validated workout submission
            now: Reference time for the volume windows (defaults to UTC now)

        Returns:
            WorkoutLogResult with the stored workout and updated hunter

        Raises:
            HunterNotFoundError: If the hunter has no profile
            PersistenceError: If the store fails; nothing is applied
        """
        now = now or datetime.now(timezone.utc)
        total_volume = payload.resolved_volume()

        history = self._workout_repo.list_since(user_id, history_start(now))
        analysis = analyze_volume(
            ((w.performed_at, w.total_volume) for w in history),
            new_volume=total_volume,
            now=now,
        )

        xp_gained = xp_from_workout(total_volume)
        stat_delta = stat_delta_from_workout(total_volume, payload.duration)

        workout, hunter = self._workout_repo.create_with_progression(
            user_id,
            payload,
            total_volume=total_volume,
            xp_gained=xp_gained,
            stat_delta=stat_delta,
        )

        logger.info(
            "Workout %s logged for user %s: volume=%.0f xp=+%d overload=%s",
            workout.id, user_id, total_volume, xp_gained, analysis.progressive_overload,
        )
        return WorkoutLogResult(
            workout=workout,
            hunter=hunter,
            analysis=analysis,
            xp_gained=xp_gained,
            stat_delta=stat_delta,
        )
