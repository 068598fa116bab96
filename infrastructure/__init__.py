"""
Infrastructure Layer for the Hunter System API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseHunterRepository,
    SupabaseWorkoutRepository,
    SupabaseQuestRepository,
    SupabaseSystemMessageRepository,
    SupabaseMealRepository,
)

__all__ = [
    "SupabaseHunterRepository",
    "SupabaseWorkoutRepository",
    "SupabaseQuestRepository",
    "SupabaseSystemMessageRepository",
    "SupabaseMealRepository",
]
