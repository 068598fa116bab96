"""
Leaderboard router.
"""

from fastapi import APIRouter, Depends, Query

from api.deps import get_current_user, get_hunter_repo
from application.ports import HunterRepository
from backend.auth import AuthenticatedUser

router = APIRouter(
    prefix="/api/leaderboard",
    tags=["Leaderboard"],
)


@router.get("")
def leaderboard(
    limit: int = Query(default=50, ge=1, le=100),
    user: AuthenticatedUser = Depends(get_current_user),
    hunter_repo: HunterRepository = Depends(get_hunter_repo),
):
    """Top hunters by XP. Public profile fields only."""
    entries = hunter_repo.leaderboard(limit)
    return {"success": True, "data": [e.model_dump(mode="json") for e in entries]}
