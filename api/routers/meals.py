"""
Meals router.

Endpoints:
- GET /api/meals?date=YYYY-MM-DD: meals, optionally for one day
- POST /api/meals: log a meal (+1 discipline)
"""

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_current_user, get_log_meal_use_case
from application.use_cases import LogMealUseCase
from backend.auth import AuthenticatedUser
from domain.models import MealCreate

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/meals",
    tags=["Meals"],
)


@router.get("")
def list_meals(
    day: Optional[date] = Query(default=None, alias="date"),
    user: AuthenticatedUser = Depends(get_current_user),
    use_case: LogMealUseCase = Depends(get_log_meal_use_case),
):
    meals = use_case.list(user.id, day)
    return {"success": True, "data": [m.model_dump(mode="json") for m in meals]}


@router.post("", status_code=201)
def log_meal(
    body: MealCreate,
    user: AuthenticatedUser = Depends(get_current_user),
    use_case: LogMealUseCase = Depends(get_log_meal_use_case),
):
    meal = use_case.execute(user.id, body)
    return {"success": True, "data": meal.model_dump(mode="json")}
