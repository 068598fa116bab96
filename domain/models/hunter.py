"""
Hunter aggregate - the user profile with RPG progression.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from domain.progression import (
    can_choose_class,
    level_from_xp,
    next_level_xp,
    rank_from_level,
)


class Hunter(BaseModel):
    """
    A user profile with demographic data and RPG progression.

    ``level`` and ``rank`` are computed from ``xp`` on every access. Any
    ``level``/``rank`` columns present in a stored row are ignored.

    Examples:
        >>> hunter = Hunter(id="user-1", xp=1600)
        >>> hunter.level
        5
        >>> hunter.rank
        'D-Rank Trainee'
    """

    model_config = ConfigDict(extra="ignore")

    # Identity
    id: str = Field(..., min_length=1, description="Auth provider user ID")
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None

    # Fitness profile
    age: Optional[int] = Field(default=None, ge=0, le=150)
    gender: Optional[str] = None
    height: Optional[int] = Field(default=None, description="Height in cm")
    weight: Optional[float] = Field(default=None, description="Weight in kg")
    body_fat_percentage: Optional[float] = None
    fitness_level: Optional[str] = None
    fitness_goal: Optional[str] = None
    fat_level: Optional[str] = None

    # Progression
    xp: int = Field(default=0, ge=0)
    character_class: Optional[str] = None

    # Stats
    strength: int = Field(default=10, ge=0)
    endurance: int = Field(default=10, ge=0)
    wisdom: int = Field(default=10, ge=0)
    discipline: int = Field(default=10, ge=0)

    onboarding_completed: bool = False

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @computed_field
    @property
    def level(self) -> int:
        return level_from_xp(self.xp)

    @computed_field
    @property
    def rank(self) -> str:
        return rank_from_level(self.level)

    @property
    def next_level_xp(self) -> int:
        """XP total at which the next level is reached."""
        return next_level_xp(self.xp)

    @property
    def can_choose_class(self) -> bool:
        return can_choose_class(self.level, self.character_class)


class LeaderboardEntry(BaseModel):
    """Public subset of a hunter shown on the leaderboard."""

    model_config = ConfigDict(extra="ignore")

    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    xp: int = 0

    @computed_field
    @property
    def level(self) -> int:
        return level_from_xp(self.xp)

    @computed_field
    @property
    def rank(self) -> str:
        return rank_from_level(self.level)


# Upper bounds (exclusive) of body fat percentage per label
FAT_LEVELS = (
    (10, "Very Low"),
    (15, "Low"),
    (25, "Average"),
    (35, "Slightly Obese"),
)


def fat_level_for(body_fat_percentage: float) -> str:
    """
    Map a body fat percentage onto its label.

    Examples:
        >>> fat_level_for(18)
        'Average'
    """
    for bound, label in FAT_LEVELS:
        if body_fat_percentage < bound:
            return label
    return "Obese"
