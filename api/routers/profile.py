"""
Profile router.

Endpoints:
- GET /api/auth/user: the caller's hunter, created on first access
- PATCH /api/profile: avatar, character class or full profile update
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import (
    get_current_user,
    get_get_or_create_hunter_use_case,
    get_update_profile_use_case,
)
from api.schemas import ProfileUpdateRequest
from application.use_cases import GetOrCreateHunterUseCase, UpdateProfileUseCase
from backend.auth import AuthenticatedUser

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Profile"],
)


@router.get("/auth/user")
def get_auth_user(
    user: AuthenticatedUser = Depends(get_current_user),
    use_case: GetOrCreateHunterUseCase = Depends(get_get_or_create_hunter_use_case),
):
    """Return the authenticated hunter, creating the profile if needed."""
    hunter = use_case.execute(user.id, email=user.email)
    return {"success": True, "data": hunter.model_dump(mode="json")}


@router.patch("/profile")
async def update_profile(
    body: ProfileUpdateRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    use_case: UpdateProfileUseCase = Depends(get_update_profile_use_case),
):
    """
    Update the caller's profile.

    Completing onboarding also generates the first daily and weekly quests.
    """
    hunter = await use_case.execute(user.id, body.to_update())
    return {"success": True, "data": hunter.model_dump(mode="json")}
