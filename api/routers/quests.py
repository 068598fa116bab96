"""
Quests router.

Endpoints:
- GET /api/quests: the caller's quests, optionally by type
- POST /api/quests/daily, /api/quests/weekly: replace that cadence with new quests
- PATCH /api/quests/{quest_id}/complete: one-time completion with XP award
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query

from api.deps import get_current_user, get_quest_manager, get_settings
from application.use_cases import QuestLifecycleManager
from backend.auth import AuthenticatedUser
from backend.settings import Settings
from domain.models import QuestType

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/quests",
    tags=["Quests"],
)


def _quest_list(quests):
    return {"success": True, "data": [q.model_dump(mode="json") for q in quests]}


@router.get("")
def list_quests(
    quest_type: Optional[QuestType] = Query(default=None, alias="type"),
    user: AuthenticatedUser = Depends(get_current_user),
    manager: QuestLifecycleManager = Depends(get_quest_manager),
):
    """List the caller's quests."""
    return _quest_list(manager.list(user.id, quest_type))


@router.post("/daily")
async def generate_daily_quests(
    user: AuthenticatedUser = Depends(get_current_user),
    manager: QuestLifecycleManager = Depends(get_quest_manager),
    settings: Settings = Depends(get_settings),
):
    """Replace the caller's daily quests. Always returns at least one quest."""
    quests = await manager.regenerate(user.id, QuestType.DAILY, settings.daily_quest_count)
    return _quest_list(quests)


@router.post("/weekly")
async def generate_weekly_quests(
    user: AuthenticatedUser = Depends(get_current_user),
    manager: QuestLifecycleManager = Depends(get_quest_manager),
    settings: Settings = Depends(get_settings),
):
    """Replace the caller's weekly quests. Always returns at least one quest."""
    quests = await manager.regenerate(user.id, QuestType.WEEKLY, settings.weekly_quest_count)
    return _quest_list(quests)


@router.patch("/{quest_id}/complete")
def complete_quest(
    quest_id: int = Path(..., ge=1),
    user: AuthenticatedUser = Depends(get_current_user),
    manager: QuestLifecycleManager = Depends(get_quest_manager),
):
    """
    Complete one of the caller's quests.

    409 when the quest does not exist, belongs to someone else or is
    already completed; XP is awarded only on the first completion.
    """
    result = manager.complete(user.id, quest_id)
    return {
        "success": True,
        "data": {
            "quest": result.quest.model_dump(mode="json"),
            "hunter": result.hunter.model_dump(mode="json"),
            "xp_awarded": result.xp_awarded,
            "leveled_up": result.leveled_up,
        },
    }
