"""
Profile Use Cases.

- GetOrCreateHunter: loads the hunter for an authenticated identity,
  creating a fresh profile on first sign-in.
- UpdateProfile: applies avatar, character-class or full profile updates
  and starts the quest cycle when onboarding completes.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from application.exceptions import HunterNotFoundError, ProfileValidationError
from application.ports import HunterRepository
from application.use_cases.quest_lifecycle import QuestLifecycleManager
from domain.models import Hunter, QuestType, fat_level_for
from domain.progression import CLASS_UNLOCK_LEVEL

logger = logging.getLogger(__name__)


class ProfileUpdate(BaseModel):
    """
    A partial profile update. Only explicitly set fields are applied.

    xp and stats are deliberately absent: they change only through
    workouts, meals, chat and quest completion.
    """

    first_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    profile_image_url: Optional[str] = None
    age: Optional[int] = Field(default=None, ge=13, le=120)
    gender: Optional[str] = Field(default=None, max_length=50)
    height: Optional[int] = Field(default=None, ge=50, le=300)
    weight: Optional[float] = Field(default=None, ge=20, le=500)
    body_fat_percentage: Optional[float] = Field(default=None, ge=1, le=70)
    fitness_level: Optional[str] = Field(default=None, max_length=50)
    fitness_goal: Optional[str] = Field(default=None, max_length=200)
    character_class: Optional[str] = Field(default=None, min_length=1, max_length=50)
    onboarding_completed: Optional[bool] = None


class GetOrCreateHunterUseCase:
    """Use case for resolving the hunter behind an authenticated identity."""

    def __init__(self, hunter_repo: HunterRepository) -> None:
        self._hunter_repo = hunter_repo

    def execute(self, user_id: str, email: Optional[str] = None) -> Hunter:
        hunter = self._hunter_repo.get(user_id)
        if hunter is not None:
            return hunter
        logger.info("Creating hunter profile for user %s", user_id)
        return self._hunter_repo.upsert(user_id, email=email)


class UpdateProfileUseCase:
    """
    Use case for profile updates.

    Rules:
    - A character class can be chosen once, from level 10 onwards.
    - ``fat_level`` is derived whenever ``body_fat_percentage`` is given.
    - ``onboarding_completed`` only moves false -> true; that transition
      generates the first daily and weekly quests. Generation problems are
      logged and never fail the update.
    """

    def __init__(
        self,
        hunter_repo: HunterRepository,
        quest_manager: QuestLifecycleManager,
        daily_quest_count: int = 3,
        weekly_quest_count: int = 2,
    ) -> None:
        """
        Args:
            hunter_repo: Repository for hunter profiles
            quest_manager: Used to start the quest cycle after onboarding
            daily_quest_count: Quests generated for the daily cadence
            weekly_quest_count: Quests generated for the weekly cadence
        """
        self._hunter_repo = hunter_repo
        self._quest_manager = quest_manager
        self._daily_quest_count = daily_quest_count
        self._weekly_quest_count = weekly_quest_count

    async def execute(self, user_id: str, update: ProfileUpdate) -> Hunter:
        """
        Apply a profile update.

        Args:
            user_id: Hunter ID
            update: Fields to change; unset fields are left untouched

        Returns:
            The updated hunter

        Raises:
            HunterNotFoundError: If the hunter has no profile
            ProfileValidationError: If a character class cannot be chosen
            PersistenceError: If the store fails
        """
        hunter = self._hunter_repo.get(user_id)
        if hunter is None:
            raise HunterNotFoundError(user_id)

        fields: Dict[str, Any] = update.model_dump(exclude_unset=True)

        if fields.get("character_class") is not None:
            self._check_class_choice(hunter)
        else:
            fields.pop("character_class", None)

        if fields.get("body_fat_percentage") is not None:
            fields["fat_level"] = fat_level_for(fields["body_fat_percentage"])

        completes_onboarding = False
        if "onboarding_completed" in fields:
            requested = fields.pop("onboarding_completed")
            if requested and not hunter.onboarding_completed:
                fields["onboarding_completed"] = True
                completes_onboarding = True

        if not fields:
            return hunter

        updated = self._hunter_repo.update_profile(user_id, fields)
        logger.info("Profile updated for user %s: %s", user_id, sorted(fields))

        if completes_onboarding:
            await self._start_quest_cycle(user_id)

        return updated

    def _check_class_choice(self, hunter: Hunter) -> None:
        if hunter.character_class:
            raise ProfileValidationError("Character class has already been chosen")
        if not hunter.can_choose_class:
            raise ProfileValidationError(
                f"Character class unlocks at level {CLASS_UNLOCK_LEVEL} "
                f"(current level {hunter.level})"
            )

    async def _start_quest_cycle(self, user_id: str) -> None:
        for quest_type, count in (
            (QuestType.DAILY, self._daily_quest_count),
            (QuestType.WEEKLY, self._weekly_quest_count),
        ):
            try:
                await self._quest_manager.regenerate(user_id, quest_type, count)
            except Exception:
                logger.exception(
                    "Initial %s quest generation failed for user %s",
                    quest_type.value, user_id,
                )
