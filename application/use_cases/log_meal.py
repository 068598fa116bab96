"""
LogMeal Use Case.

Persists a meal and rewards the hunter with +1 discipline.
"""

import logging
from datetime import date
from typing import List, Optional

from application.ports import HunterRepository, MealRepository
from domain.models import Meal, MealCreate
from domain.progression import StatDelta

logger = logging.getLogger(__name__)

DISCIPLINE_PER_MEAL = 1


class LogMealUseCase:
    """Use case for logging and listing meals."""

    def __init__(self, meal_repo: MealRepository, hunter_repo: HunterRepository) -> None:
        self._meal_repo = meal_repo
        self._hunter_repo = hunter_repo

    def list(self, user_id: str, day: Optional[date] = None) -> List[Meal]:
        return self._meal_repo.list(user_id, day)

    def execute(self, user_id: str, meal: MealCreate) -> Meal:
        """
        Raises:
            HunterNotFoundError: If the hunter has no profile
            PersistenceError: If the store fails
        """
        created = self._meal_repo.create(user_id, meal)
        self._hunter_repo.add_stats(user_id, StatDelta(discipline=DISCIPLINE_PER_MEAL))
        logger.info("Meal %s logged for user %s", created.id, user_id)
        return created
