"""
Quests and quest proposals.

A quest moves from pending to completed exactly once; its XP reward is
applied at that transition and never again.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class QuestType(str, Enum):
    """Quest cadence."""

    DAILY = "daily"
    WEEKLY = "weekly"
    SPECIAL = "special"

    @property
    def is_generated(self) -> bool:
        """Daily and weekly quests are replaced on every regeneration."""
        return self in (QuestType.DAILY, QuestType.WEEKLY)


class QuestProposal(BaseModel):
    """
    A quest ready to be persisted: produced by the generator or the fallback.
    """

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=2000)
    xp_reward: int = Field(..., ge=0)
    type: QuestType

    @field_validator("title", "description")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class Quest(BaseModel):
    """A persisted quest owned by a hunter."""

    model_config = ConfigDict(extra="ignore")

    id: int
    user_id: str
    type: QuestType
    title: str
    description: Optional[str] = None
    xp_reward: int = 0
    completed: bool = False
    completed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None

    @field_validator("xp_reward", mode="before")
    @classmethod
    def default_reward(cls, v):
        return 0 if v is None else v

    @property
    def is_pending(self) -> bool:
        return not self.completed
