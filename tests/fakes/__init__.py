"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository and AI
interfaces for fast, isolated testing. No database, network or LLM required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import create_hunter_repo, FakeQuestRepository

    hunters = create_hunter_repo(user_id="user1", xp=900)
    quests = FakeQuestRepository(hunters)
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from tests.fakes.hunter_repository import FakeHunterRepository, UnavailableHunterRepository
from tests.fakes.workout_repository import FakeWorkoutRepository
from tests.fakes.quest_repository import FakeQuestRepository
from tests.fakes.system_message_repository import FakeSystemMessageRepository
from tests.fakes.meal_repository import FakeMealRepository
from tests.fakes.text_generator import (
    FailingQuestProposer,
    FakeChatResponder,
    FakeTextGenerator,
    StaticQuestProposer,
    make_quest,
    quests_json,
)


# =============================================================================
# Factory Functions
# =============================================================================


def create_hunter_repo(
    *,
    user_id: str = "test_user",
    xp: int = 0,
    **fields: Any,
) -> FakeHunterRepository:
    """
    Create a FakeHunterRepository holding one hunter.

    Args:
        user_id: ID of the seeded hunter
        xp: Starting XP
        **fields: Any other profile columns

    Returns:
        Pre-populated FakeHunterRepository
    """
    repo = FakeHunterRepository()
    repo.seed([{"id": user_id, "xp": xp, **fields}])
    return repo


def create_workout_repo(
    hunter_repo: Optional[FakeHunterRepository] = None,
    *,
    user_id: str = "test_user",
    volumes_by_days_ago: Optional[Dict[int, float]] = None,
    now: Optional[datetime] = None,
) -> FakeWorkoutRepository:
    """
    Create a FakeWorkoutRepository with workouts placed N days before ``now``.

    Args:
        hunter_repo: Hunter store that receives rewards
        user_id: Owner of the generated workouts
        volumes_by_days_ago: {days_ago: total_volume}
        now: Reference time (defaults to UTC now)

    Returns:
        Pre-populated FakeWorkoutRepository
    """
    now = now or datetime.now(timezone.utc)
    repo = FakeWorkoutRepository(hunter_repo)
    repo.seed([
        {"user_id": user_id, "date": now - timedelta(days=days), "total_volume": volume}
        for days, volume in (volumes_by_days_ago or {}).items()
    ])
    return repo


def create_quest_repo(
    hunter_repo: Optional[FakeHunterRepository] = None,
    *,
    user_id: str = "test_user",
    quests: Optional[List[Dict[str, Any]]] = None,
) -> FakeQuestRepository:
    """Create a FakeQuestRepository with quests owned by ``user_id``."""
    repo = FakeQuestRepository(hunter_repo)
    repo.seed([{"user_id": user_id, **q} for q in (quests or [])])
    return repo


__all__ = [
    # Repositories
    "FakeHunterRepository",
    "UnavailableHunterRepository",
    "FakeWorkoutRepository",
    "FakeQuestRepository",
    "FakeSystemMessageRepository",
    "FakeMealRepository",
    # AI
    "FakeTextGenerator",
    "StaticQuestProposer",
    "FailingQuestProposer",
    "FakeChatResponder",
    "quests_json",
    "make_quest",
    # Factories
    "create_hunter_repo",
    "create_workout_repo",
    "create_quest_repo",
]
