"""
Meal Repository Interface (Port).
"""
from datetime import date
from typing import Protocol, Optional, List

from domain.models import Meal, MealCreate


class MealRepository(Protocol):
    """
    Abstract interface for meal log persistence.
    """

    def list(self, user_id: str, day: Optional[date] = None) -> List[Meal]:
        """
        Get a hunter's meals, newest first.

        Args:
            user_id: User ID
            day: Restrict to one calendar day (UTC) when given
        """
        ...

    def create(self, user_id: str, meal: MealCreate) -> Meal:
        """Persist a meal."""
        ...
