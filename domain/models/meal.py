"""
Meal log entries.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MealCreate(BaseModel):
    """Payload for logging a meal."""

    date: Optional[datetime] = None
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=2000)
    calories: Optional[int] = Field(default=None, ge=0, le=20000)
    protein: Optional[float] = Field(default=None, ge=0)
    carbs: Optional[float] = Field(default=None, ge=0)
    fats: Optional[float] = Field(default=None, ge=0)


class Meal(BaseModel):
    """A persisted meal."""

    model_config = ConfigDict(extra="ignore")

    id: int
    user_id: str
    date: Optional[datetime] = None
    title: str
    description: Optional[str] = None
    calories: Optional[int] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fats: Optional[float] = None
    created_at: Optional[datetime] = None
