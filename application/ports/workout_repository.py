"""
Workout Repository Interface (Port).

This module defines the abstract interface for workout persistence.
Workouts are immutable: there is no update or delete operation.
"""
from datetime import datetime
from typing import Protocol, List, Tuple

from domain.models import Hunter, Workout, WorkoutCreate
from domain.progression import StatDelta


class WorkoutRepository(Protocol):
    """
    Abstract interface for workout log persistence.
    """

    def list_recent(self, user_id: str, limit: int = 20) -> List[Workout]:
        """
        Get a hunter's most recent workouts, newest first.

        Args:
            user_id: User ID
            limit: Maximum workouts to return
        """
        ...

    def list_since(self, user_id: str, since: datetime) -> List[Workout]:
        """
        Get every workout performed at or after ``since``, newest first.
        """
        ...

    def create_with_progression(
        self,
        user_id: str,
        workout: WorkoutCreate,
        *,
        total_volume: float,
        xp_gained: int,
        stat_delta: StatDelta,
    ) -> Tuple[Workout, Hunter]:
        """
        Insert a workout and apply its XP and stat rewards in one transaction.

        Either the workout row, the XP increment and the stat increments are
        all persisted, or none of them are.

        Args:
            user_id: Owner of the workout
            workout: Validated workout payload
            total_volume: Volume recorded on the workout
            xp_gained: XP to store on the workout and add to the hunter
            stat_delta: Stat increments to apply

        Returns:
            (created workout, hunter after the rewards)

        Raises:
            HunterNotFoundError: If no profile exists
            PersistenceError: If the transaction fails
        """
        ...
