"""
FastAPI Dependency Providers for the Hunter System API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository providers create new instances per-request
- Use case providers compose repositories and AI services
- Auth provider wraps backend.auth

Usage in routers:
    from api.deps import get_quest_manager, get_current_user

    @router.get("/api/quests")
    def list_quests(
        user: AuthenticatedUser = Depends(get_current_user),
        manager: QuestLifecycleManager = Depends(get_quest_manager),
    ):
        return manager.list(user.id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_quest_repo] = lambda: FakeQuestRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    ChatResponder,
    HunterRepository,
    MealRepository,
    QuestProposer,
    QuestRepository,
    SystemMessageRepository,
    TextGenerator,
    WorkoutRepository,
)

# Use cases
from application.use_cases import (
    GetOrCreateHunterUseCase,
    HunterStatsUseCase,
    LogMealUseCase,
    LogWorkoutUseCase,
    QuestLifecycleManager,
    SystemChatUseCase,
    UpdateProfileUseCase,
)

# Concrete implementations
from infrastructure import (
    SupabaseHunterRepository,
    SupabaseMealRepository,
    SupabaseQuestRepository,
    SupabaseSystemMessageRepository,
    SupabaseWorkoutRepository,
)
from backend.ai.text_generator import LLMTextGenerator
from backend.auth import AuthenticatedUser, authenticate
from backend.services.quest_generator import QuestGenerator
from backend.services.system_chat import SystemChatService
from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached for the lifetime of the process).

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_hunter_repo(
    client: Client = Depends(get_supabase_client_required),
) -> HunterRepository:
    """
    Get HunterRepository implementation.

    The return type is the Protocol to enable easy faking.
    """
    return SupabaseHunterRepository(client)


def get_workout_repo(
    client: Client = Depends(get_supabase_client_required),
) -> WorkoutRepository:
    """Get WorkoutRepository implementation."""
    return SupabaseWorkoutRepository(client)


def get_quest_repo(
    client: Client = Depends(get_supabase_client_required),
) -> QuestRepository:
    """Get QuestRepository implementation."""
    return SupabaseQuestRepository(client)


def get_system_message_repo(
    client: Client = Depends(get_supabase_client_required),
) -> SystemMessageRepository:
    """Get SystemMessageRepository implementation."""
    return SupabaseSystemMessageRepository(client)


def get_meal_repo(
    client: Client = Depends(get_supabase_client_required),
) -> MealRepository:
    """Get MealRepository implementation."""
    return SupabaseMealRepository(client)


# =============================================================================
# AI Service Providers
# =============================================================================


def get_text_generator(
    settings: Settings = Depends(get_settings),
) -> TextGenerator:
    """Get the text-generation provider (OpenAI-compatible, Groq by default)."""
    return LLMTextGenerator(settings)


def get_quest_generator(
    text_generator: TextGenerator = Depends(get_text_generator),
    settings: Settings = Depends(get_settings),
) -> QuestProposer:
    """Get the quest generator with fallback semantics."""
    return QuestGenerator(
        text_generator,
        model=settings.quest_model,
        environment=settings.environment,
    )


def get_chat_responder(
    text_generator: TextGenerator = Depends(get_text_generator),
    settings: Settings = Depends(get_settings),
) -> ChatResponder:
    """Get The System's reply generator."""
    return SystemChatService(
        text_generator,
        model=settings.chat_model,
        environment=settings.environment,
    )


# =============================================================================
# Use Case Providers
# =============================================================================


def get_log_workout_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> LogWorkoutUseCase:
    return LogWorkoutUseCase(workout_repo=workout_repo)


def get_quest_manager(
    quest_repo: QuestRepository = Depends(get_quest_repo),
    hunter_repo: HunterRepository = Depends(get_hunter_repo),
    quest_generator: QuestProposer = Depends(get_quest_generator),
) -> QuestLifecycleManager:
    return QuestLifecycleManager(quest_repo, hunter_repo, quest_generator)


def get_get_or_create_hunter_use_case(
    hunter_repo: HunterRepository = Depends(get_hunter_repo),
) -> GetOrCreateHunterUseCase:
    return GetOrCreateHunterUseCase(hunter_repo)


def get_update_profile_use_case(
    hunter_repo: HunterRepository = Depends(get_hunter_repo),
    quest_manager: QuestLifecycleManager = Depends(get_quest_manager),
    settings: Settings = Depends(get_settings),
) -> UpdateProfileUseCase:
    return UpdateProfileUseCase(
        hunter_repo,
        quest_manager,
        daily_quest_count=settings.daily_quest_count,
        weekly_quest_count=settings.weekly_quest_count,
    )


def get_hunter_stats_use_case(
    hunter_repo: HunterRepository = Depends(get_hunter_repo),
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    quest_repo: QuestRepository = Depends(get_quest_repo),
) -> HunterStatsUseCase:
    return HunterStatsUseCase(hunter_repo, workout_repo, quest_repo)


def get_system_chat_use_case(
    hunter_repo: HunterRepository = Depends(get_hunter_repo),
    message_repo: SystemMessageRepository = Depends(get_system_message_repo),
    responder: ChatResponder = Depends(get_chat_responder),
) -> SystemChatUseCase:
    return SystemChatUseCase(hunter_repo, message_repo, responder)


def get_log_meal_use_case(
    meal_repo: MealRepository = Depends(get_meal_repo),
    hunter_repo: HunterRepository = Depends(get_hunter_repo),
) -> LogMealUseCase:
    return LogMealUseCase(meal_repo, hunter_repo)


# =============================================================================
# Authentication Providers
# =============================================================================


def get_current_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
    x_test_auth: Optional[str] = Header(None, alias="X-Test-Auth"),
    x_test_user_id: Optional[str] = Header(None, alias="X-Test-User-Id"),
    settings: Settings = Depends(get_settings),
) -> AuthenticatedUser:
    """
    Get the current authenticated user.

    Supports multiple auth methods:
    - Supabase Auth access token (Bearer)
    - API key authentication
    - E2E test bypass (outside production only)

    Raises:
        HTTPException: 401 if authentication fails
    """
    return authenticate(
        settings,
        get_supabase_client() if authorization else None,
        authorization=authorization,
        x_api_key=x_api_key,
        x_test_auth=x_test_auth,
        x_test_user_id=x_test_user_id,
    )


# =============================================================================
# Exports
# =============================================================================

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
    # AI services
    "get_text_generator",
    "get_quest_generator",
    "get_chat_responder",
    # Use cases
    "get_log_workout_use_case",
    "get_quest_manager",
    "get_get_or_create_hunter_use_case",
    "get_update_profile_use_case",
    "get_hunter_stats_use_case",
    "get_system_chat_use_case",
    "get_log_meal_use_case",
    # Authentication
    "get_current_user",
]
