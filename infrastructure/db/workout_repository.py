"""
Supabase implementation of WorkoutRepository.

Workout creation goes through the ``log_workout_with_progression``
PostgreSQL function, which inserts the workout and applies the XP and stat
increments in a single transaction.
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Tuple

from supabase import Client

from application.exceptions import HunterNotFoundError, PersistenceError
from domain.models import Hunter, Workout, WorkoutCreate
from domain.progression import StatDelta
from infrastructure.db.errors import persistence_errors

logger = logging.getLogger(__name__)

WORKOUTS_TABLE = "workouts"


class SupabaseWorkoutRepository:
    """
    Supabase implementation of WorkoutRepository protocol.

    All Supabase query logic for workouts is encapsulated here.
    """

    def __init__(self, client: Client):
        """
        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def list_recent(self, user_id: str, limit: int = 20) -> List[Workout]:
        with persistence_errors("list workouts"):
            result = (
                self._client.table(WORKOUTS_TABLE)
                .select("*")
                .eq("user_id", user_id)
                .order("date", desc=True)
                .limit(limit)
                .execute()
            )
        return [Workout.model_validate(row) for row in result.data or []]

    def list_since(self, user_id: str, since: datetime) -> List[Workout]:
        with persistence_errors("list workout history"):
            result = (
                self._client.table(WORKOUTS_TABLE)
                .select("*")
                .eq("user_id", user_id)
                .gte("date", since.isoformat())
                .order("date", desc=True)
                .execute()
            )
        return [Workout.model_validate(row) for row in result.data or []]

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
        Insert a workout and apply its rewards atomically.

        The RPC returns ``{"workout": {...}, "hunter": {...}}``; ``hunter`` is
        null when no profile exists, in which case nothing was inserted.
        """
        record: Dict[str, Any] = workout.model_dump(mode="json", exclude={"total_volume"})
        record["total_volume"] = total_volume
        if record.get("date") is None:
            record.pop("date", None)

        with persistence_errors("log workout"):
            result = self._client.rpc(
                "log_workout_with_progression",
                {
                    "p_user_id": user_id,
                    "p_workout": record,
                    "p_xp_gained": xp_gained,
                    "p_strength": stat_delta.strength,
                    "p_endurance": stat_delta.endurance,
                },
            ).execute()

        data = result.data
        if isinstance(data, list):
            data = data[0] if data else None
        if not data:
            raise PersistenceError("log_workout_with_progression returned no data")
        if not data.get("hunter"):
            raise HunterNotFoundError(user_id)

        return Workout.model_validate(data["workout"]), Hunter.model_validate(data["hunter"])
