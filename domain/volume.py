"""
Training volume analysis.

- Progressive overload: compares the trailing 7 days (including the workout
  being logged) against the 7 days before that.
- Weekly intensity: buckets workout volume into ISO-8601 weeks.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional, Tuple

OVERLOAD_WINDOW_DAYS = 7
HISTORY_WINDOW_DAYS = 2 * OVERLOAD_WINDOW_DAYS
INTENSITY_WEEKS = 12

# (performed_at, total_volume); performed_at None means "now"
VolumeSample = Tuple[Optional[datetime], float]


@dataclass(frozen=True)
class VolumeAnalysis:
    """Result of comparing this week's volume against last week's."""
    progressive_overload: bool
    this_week_volume: float
    last_week_volume: float
    message: str


@dataclass(frozen=True)
class WeeklyVolume:
    """Total volume for one ISO week, e.g. week="2024-W07"."""
    week: str
    total_volume: float


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def history_start(now: datetime) -> datetime:
    """Earliest timestamp the overload comparison looks at."""
    return _as_utc(now) - timedelta(days=HISTORY_WINDOW_DAYS)


def overload_message(progressive_overload: bool, this_week: float, last_week: float) -> str:
    """Human-readable feedback reporting both weekly sums."""
    if progressive_overload:
        return (
            "Progressive Overload DETECTED! Your strength grows, Hunter. "
            f"Last week: {last_week:.0f}kg. This week: {this_week:.0f}kg."
        )
    return (
        "Training recorded. Consistent effort is key. "
        f"Last week: {last_week:.0f}kg. This week: {this_week:.0f}kg. Push harder next time."
    )


def analyze_volume(
    history: Iterable[VolumeSample],
    new_volume: float,
    now: datetime,
) -> VolumeAnalysis:
    """
    Decide whether the hunter is progressively overloading.

    Samples newer than now - 7 days count toward this week; samples between
    now - 14 days and now - 7 days (inclusive) count toward last week; older
    samples are ignored. ``new_volume`` is always added to this week.

    Args:
        history: (performed_at, volume) pairs for the hunter's prior workouts
        new_volume: Volume of the workout being logged
        now: Reference time

    Returns:
        VolumeAnalysis; progressive_overload is a strict this_week > last_week
    """
    now = _as_utc(now)
    week_start = now - timedelta(days=OVERLOAD_WINDOW_DAYS)
    window_start = now - timedelta(days=HISTORY_WINDOW_DAYS)

    this_week = 0.0
    last_week = 0.0
    for performed_at, volume in history:
        performed_at = _as_utc(performed_at) if performed_at else now
        volume = float(volume or 0)
        if performed_at > week_start:
            this_week += volume
        elif performed_at >= window_start:
            last_week += volume

    this_week += max(float(new_volume or 0), 0.0)
    overload = this_week > last_week
    return VolumeAnalysis(
        progressive_overload=overload,
        this_week_volume=round(this_week, 2),
        last_week_volume=round(last_week, 2),
        message=overload_message(overload, this_week, last_week),
    )


def iso_week_key(value: datetime) -> str:
    """ISO-8601 week label, e.g. 2021-01-03 -> '2020-W53'."""
    iso = _as_utc(value).isocalendar()
    return f"{iso[0]}-W{iso[1]:02d}"


def weekly_volume(
    samples: Iterable[VolumeSample],
    now: datetime,
    weeks: int = INTENSITY_WEEKS,
) -> List[WeeklyVolume]:
    """
    Bucket volume into ISO weeks over the trailing ``weeks`` weeks.

    Returns:
        WeeklyVolume entries sorted by week ascending; weeks without
        workouts are omitted
    """
    now = _as_utc(now)
    since = now - timedelta(days=7 * weeks)
    buckets: Dict[str, float] = {}
    for performed_at, volume in samples:
        if performed_at is None:
            continue
        performed_at = _as_utc(performed_at)
        if performed_at < since:
            continue
        key = iso_week_key(performed_at)
        buckets[key] = buckets.get(key, 0.0) + float(volume or 0)

    return [
        WeeklyVolume(week=week, total_volume=round(total, 2))
        for week, total in sorted(buckets.items())
    ]


def current_streak(workout_times: Iterable[Optional[datetime]], now: datetime) -> int:
    """
    Consecutive calendar days (UTC) with at least one workout.

    The streak must include today or yesterday, otherwise it is broken.
    """
    days = {_as_utc(t).date() for t in workout_times if t is not None}
    if not days:
        return 0

    cursor = _as_utc(now).date()
    if cursor not in days:
        cursor -= timedelta(days=1)
        if cursor not in days:
            return 0

    streak = 0
    while cursor in days:
        streak += 1
        cursor -= timedelta(days=1)
    return streak
