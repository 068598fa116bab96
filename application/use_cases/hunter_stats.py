"""
HunterStats Use Case.

Read-side aggregation for the dashboard: progression, progress counters,
streak and the weekly training intensity series.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from application.exceptions import HunterNotFoundError
from application.ports import HunterRepository, QuestRepository, WorkoutRepository
from domain.models import Hunter
from domain.volume import INTENSITY_WEEKS, WeeklyVolume, current_streak, weekly_volume

RECENT_WORKOUT_LIMIT = 30


@dataclass
class HunterStats:
    """Dashboard snapshot of a hunter."""

    hunter: Hunter
    total_workouts: int
    quests_completed: int
    current_streak: int

    @property
    def xp_to_next_level(self) -> int:
        return self.hunter.next_level_xp - self.hunter.xp


class HunterStatsUseCase:
    """Use case for dashboard statistics."""

    def __init__(
        self,
        hunter_repo: HunterRepository,
        workout_repo: WorkoutRepository,
        quest_repo: QuestRepository,
    ) -> None:
        self._hunter_repo = hunter_repo
        self._workout_repo = workout_repo
        self._quest_repo = quest_repo

    def execute(self, user_id: str, now: Optional[datetime] = None) -> HunterStats:
        """
        Raises:
            HunterNotFoundError: If the hunter has no profile
        """
        now = now or datetime.now(timezone.utc)
        hunter = self._hunter_repo.get(user_id)
        if hunter is None:
            raise HunterNotFoundError(user_id)

        workouts = self._workout_repo.list_recent(user_id, RECENT_WORKOUT_LIMIT)
        quests = self._quest_repo.list(user_id)

        return HunterStats(
            hunter=hunter,
            total_workouts=len(workouts),
            quests_completed=sum(1 for q in quests if q.completed),
            current_streak=current_streak((w.performed_at for w in workouts), now),
        )

    def intensity(
        self,
        user_id: str,
        now: Optional[datetime] = None,
        weeks: int = INTENSITY_WEEKS,
    ) -> List[WeeklyVolume]:
        """Weekly volume over the trailing ``weeks`` ISO weeks, oldest first."""
        now = now or datetime.now(timezone.utc)
        since = now - timedelta(days=7 * weeks)
        workouts = self._workout_repo.list_since(user_id, since)
        return weekly_volume(((w.performed_at, w.total_volume) for w in workouts), now, weeks)
