"""
Stats router.

Endpoints:
- GET /api/stats: level, rank, stats and progress counters
- GET /api/stats/intensity: weekly training volume (ISO-8601 weeks)
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends

from api.deps import get_current_user, get_hunter_stats_use_case
from application.use_cases import HunterStatsUseCase
from backend.auth import AuthenticatedUser

router = APIRouter(
    prefix="/api/stats",
    tags=["Stats"],
)


@router.get("")
def get_stats(
    user: AuthenticatedUser = Depends(get_current_user),
    use_case: HunterStatsUseCase = Depends(get_hunter_stats_use_case),
):
    result = use_case.execute(user.id)
    hunter = result.hunter
    return {
        "success": True,
        "data": {
            "level": hunter.level,
            "xp": hunter.xp,
            "rank": hunter.rank,
            "next_level_xp": hunter.next_level_xp,
            "xp_to_next_level": result.xp_to_next_level,
            "stats": {
                "strength": hunter.strength,
                "endurance": hunter.endurance,
                "wisdom": hunter.wisdom,
                "discipline": hunter.discipline,
            },
            "progress": {
                "total_workouts": result.total_workouts,
                "total_xp": hunter.xp,
                "quests_completed": result.quests_completed,
                "current_streak": result.current_streak,
            },
        },
    }


@router.get("/intensity")
def get_intensity(
    user: AuthenticatedUser = Depends(get_current_user),
    use_case: HunterStatsUseCase = Depends(get_hunter_stats_use_case),
):
    weeks = use_case.intensity(user.id)
    return {"success": True, "data": [asdict(w) for w in weeks]}
