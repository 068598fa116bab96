"""
Workouts router.

Endpoints:
- GET /api/workouts: recent workouts, newest first
- POST /api/workouts: log a workout and apply its XP and stat rewards
"""

import logging

from fastapi import APIRouter, Depends, Query

from api.deps import get_current_user, get_log_workout_use_case, get_workout_repo
from application.ports import WorkoutRepository
from application.use_cases import LogWorkoutUseCase
from backend.auth import AuthenticatedUser
from domain.models import WorkoutCreate

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/workouts",
    tags=["Workouts"],
)


@router.get("")
def list_workouts(
    limit: int = Query(default=20, ge=1, le=100),
    user: AuthenticatedUser = Depends(get_current_user),
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
):
    """List the caller's most recent workouts."""
    workouts = workout_repo.list_recent(user.id, limit)
    return {"success": True, "data": [w.model_dump(mode="json") for w in workouts]}


@router.post("", status_code=201)
def log_workout(
    body: WorkoutCreate,
    user: AuthenticatedUser = Depends(get_current_user),
    use_case: LogWorkoutUseCase = Depends(get_log_workout_use_case),
):
    """
    Log a workout.

    Returns the stored workout, the updated hunter and the progressive
    overload analysis. Workout, XP and stats are persisted together or not
    at all.
    """
    result = use_case.execute(user.id, body)
    analysis = result.analysis
    return {
        "success": True,
        "data": {
            "workout": result.workout.model_dump(mode="json"),
            "hunter": result.hunter.model_dump(mode="json"),
            "analysis": {
                "progressive_overload": analysis.progressive_overload,
                "xp_gained": result.xp_gained,
                "message": analysis.message,
                "this_week_volume": analysis.this_week_volume,
                "last_week_volume": analysis.last_week_volume,
                "stat_delta": result.stat_delta.as_dict(),
            },
        },
    }
