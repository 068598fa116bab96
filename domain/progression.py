"""
Hunter progression rules.

Pure functions converting experience into level and rank, and workout
metrics into experience and stat increases. No I/O.

Level and rank are never stored independently of XP: every caller derives
them from the current XP through these functions.

Curve:
    level = floor(sqrt(xp / 100)) + 1

    Level L starts at 100 * (L - 1)^2 XP and the next threshold is 100 * L^2.
"""
from dataclasses import dataclass
from math import isqrt

# =============================================================================
# Constants
# =============================================================================

XP_CURVE_FACTOR = 100
BASE_WORKOUT_XP = 50
XP_PER_VOLUME = 100  # 1 XP per 100 kg moved
VOLUME_PER_STRENGTH = 2000
MINUTES_PER_ENDURANCE = 30

BASE_RANK = "E-Rank Human"

# Inclusive lower bounds, highest first so only one band matches
RANK_THRESHOLDS = (
    (20, "S-Rank Hunter"),
    (15, "A-Rank Hunter"),
    (12, "B-Rank Hunter"),
    (10, "C-Rank Warrior"),
    (5, "D-Rank Trainee"),
)

CLASS_UNLOCK_LEVEL = 10


class InvalidXPGainError(ValueError):
    """Raised when an XP gain would decrease a hunter's XP."""


@dataclass(frozen=True)
class ProgressionState:
    """XP with its derived level and rank."""
    xp: int
    level: int
    rank: str


@dataclass(frozen=True)
class StatDelta:
    """Additive stat increments. Never negative."""
    strength: int = 0
    endurance: int = 0
    wisdom: int = 0
    discipline: int = 0

    @property
    def is_empty(self) -> bool:
        return not (self.strength or self.endurance or self.wisdom or self.discipline)

    def as_dict(self) -> dict:
        return {
            "strength": self.strength,
            "endurance": self.endurance,
            "wisdom": self.wisdom,
            "discipline": self.discipline,
        }


# =============================================================================
# Level & Rank
# =============================================================================


def level_from_xp(xp: int) -> int:
    """
    Calculate level from accumulated XP.

    Uses integer square root so large XP values never suffer float rounding
    at exact level thresholds (e.g. 1600 XP is exactly level 5).

    Args:
        xp: Accumulated experience (negative values are treated as 0)

    Returns:
        Level, always >= 1
    """
    if xp <= 0:
        return 1
    return isqrt(int(xp) // XP_CURVE_FACTOR) + 1


def xp_for_level(level: int) -> int:
    """XP required to reach ``level``."""
    if level <= 1:
        return 0
    return XP_CURVE_FACTOR * (level - 1) ** 2


def next_level_xp(xp: int) -> int:
    """XP threshold of the level after the one ``xp`` belongs to."""
    return xp_for_level(level_from_xp(xp) + 1)


def rank_from_level(level: int) -> str:
    """
    Map a level onto its rank label.

    Args:
        level: Hunter level

    Returns:
        Rank label for the highest band whose lower bound is <= level
    """
    for threshold, rank in RANK_THRESHOLDS:
        if level >= threshold:
            return rank
    return BASE_RANK


def progression_for_xp(xp: int) -> ProgressionState:
    """Derive the full progression state for an XP total."""
    level = level_from_xp(xp)
    return ProgressionState(xp=xp, level=level, rank=rank_from_level(level))


def apply_xp_gain(current_xp: int, gain: int) -> ProgressionState:
    """
    Add XP and recompute level and rank.

    Args:
        current_xp: XP before the gain
        gain: XP to add, must be >= 0

    Returns:
        ProgressionState for the new XP total

    Raises:
        InvalidXPGainError: If gain is negative
    """
    if gain < 0:
        raise InvalidXPGainError(f"XP gain must be non-negative, got {gain}")
    return progression_for_xp(max(current_xp, 0) + gain)


def can_choose_class(level: int, current_class: str | None) -> bool:
    """A class is chosen once, from level 10 onwards."""
    return level >= CLASS_UNLOCK_LEVEL and not current_class


# =============================================================================
# Workout Rewards
# =============================================================================


def xp_from_workout(total_volume: float) -> int:
    """
    XP awarded for a workout.

    Formula: 50 + floor(total_volume / 100)

    Args:
        total_volume: Sum of weight x reps across all sets

    Returns:
        XP gained, always >= 50
    """
    volume = max(total_volume or 0, 0)
    return BASE_WORKOUT_XP + int(volume // XP_PER_VOLUME)


def stat_delta_from_workout(total_volume: float, duration_minutes: int | None) -> StatDelta:
    """
    Stat increases earned by a workout.

    strength  += floor(total_volume / 2000)
    endurance += floor(duration_minutes / 30)

    Zero or negative inputs yield zero, never a decrease.
    """
    volume = max(total_volume or 0, 0)
    duration = max(duration_minutes or 0, 0)
    return StatDelta(
        strength=int(volume // VOLUME_PER_STRENGTH),
        endurance=int(duration // MINUTES_PER_ENDURANCE),
    )
