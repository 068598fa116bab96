"""
Workout log entries.

A workout belongs to one hunter and is immutable once created: the XP it
awarded is fixed at creation time.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExerciseSet(BaseModel):
    """A single set: weight (kg) x reps."""

    weight: float = Field(default=0, ge=0, le=2000, description="Weight in kg")
    reps: int = Field(default=0, ge=0, le=1000)

    @property
    def volume(self) -> float:
        return self.weight * self.reps


class ExerciseEntry(BaseModel):
    """An exercise performed in a workout, with its ordered sets."""

    name: str = Field(..., min_length=1, max_length=200)
    sets: List[ExerciseSet] = Field(default_factory=list)

    @property
    def volume(self) -> float:
        return sum(s.volume for s in self.sets)


def calculate_total_volume(exercises: List[ExerciseEntry]) -> float:
    """Sum of weight x reps across every set of every exercise."""
    return round(sum(e.volume for e in exercises), 2)


class WorkoutCreate(BaseModel):
    """
    Payload for logging a workout.

    ``total_volume`` is recomputed from the sets whenever any set is present;
    the client value is only used for exercise-less entries.
    """

    date: Optional[datetime] = None
    exercises: List[ExerciseEntry] = Field(default_factory=list, max_length=100)
    total_volume: Optional[float] = Field(default=None, ge=0)
    duration: Optional[int] = Field(default=None, ge=0, le=24 * 60, description="Minutes")
    notes: Optional[str] = Field(default=None, max_length=2000)
    photo_url: Optional[str] = Field(default=None, max_length=2000)

    @field_validator("notes")
    @classmethod
    def strip_notes(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None

    def resolved_volume(self) -> float:
        if any(e.sets for e in self.exercises):
            return calculate_total_volume(self.exercises)
        return float(self.total_volume or 0)


class Workout(BaseModel):
    """A persisted workout."""

    model_config = ConfigDict(extra="ignore")

    id: int
    user_id: str
    date: Optional[datetime] = None
    exercises: List[ExerciseEntry] = Field(default_factory=list)
    total_volume: float = 0
    duration: Optional[int] = None
    notes: Optional[str] = None
    photo_url: Optional[str] = None
    xp_gained: int = 0
    created_at: Optional[datetime] = None

    @field_validator("exercises", mode="before")
    @classmethod
    def default_exercises(cls, v):
        return v or []

    @field_validator("total_volume", mode="before")
    @classmethod
    def default_volume(cls, v):
        # numeric columns may come back as strings or null
        return 0 if v is None else v

    @property
    def performed_at(self) -> Optional[datetime]:
        return self.date or self.created_at
