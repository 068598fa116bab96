"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations are injected into use cases
and routers for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseHunterRepository,
        SupabaseWorkoutRepository,
        SupabaseQuestRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    hunter_repo = SupabaseHunterRepository(client)
    workout_repo = SupabaseWorkoutRepository(client)
    quest_repo = SupabaseQuestRepository(client)
"""

from infrastructure.db.hunter_repository import SupabaseHunterRepository
from infrastructure.db.workout_repository import SupabaseWorkoutRepository
from infrastructure.db.quest_repository import SupabaseQuestRepository
from infrastructure.db.system_message_repository import SupabaseSystemMessageRepository
from infrastructure.db.meal_repository import SupabaseMealRepository

__all__ = [
    # Profile store
    "SupabaseHunterRepository",

    # Workout log (atomic progression RPC)
    "SupabaseWorkoutRepository",

    # Quests (conditional completion)
    "SupabaseQuestRepository",

    # Chat transcript
    "SupabaseSystemMessageRepository",

    # Nutrition
    "SupabaseMealRepository",
]
