"""
API package for the Hunter System API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
- schemas/: Request bodies with shape validation
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_hunter_repo,
    get_workout_repo,
    get_quest_repo,
    get_system_message_repo,
    get_meal_repo,
    get_current_user,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_hunter_repo",
    "get_workout_repo",
    "get_quest_repo",
    "get_system_message_repo",
    "get_meal_repo",
    # Authentication
    "get_current_user",
]
