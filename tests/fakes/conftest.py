"""
Test Fixtures and Helpers for Fake Repositories.

This module provides pytest fixtures and helper functions for overriding
FastAPI dependencies with fake implementations.

Usage:
    from tests.fakes.conftest import override_dependency, reset_overrides

    def test_something():
        app = create_app()
        override_dependency(app, get_quest_repo, FakeQuestRepository())
        ...
        reset_overrides(app)

Or build a fully faked app in one call:

    harness = build_fake_app(xp=900)
    response = harness.client.get("/api/stats", headers=AUTH)
"""

import inspect
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api import deps
from backend.auth import AuthenticatedUser
from backend.main import create_app
from backend.settings import Settings
from tests.fakes.hunter_repository import FakeHunterRepository
from tests.fakes.meal_repository import FakeMealRepository
from tests.fakes.quest_repository import FakeQuestRepository
from tests.fakes.system_message_repository import FakeSystemMessageRepository
from tests.fakes.text_generator import FakeChatResponder, StaticQuestProposer
from tests.fakes.workout_repository import FakeWorkoutRepository

# Type for dependency getters
RepoGetter = Callable[..., Any]

TEST_USER_ID = "test-user-123"


# =============================================================================
# Reset and Override Functions
# =============================================================================


def reset_overrides(app: FastAPI) -> None:
    """Reset all FastAPI dependency overrides on ``app``."""
    app.dependency_overrides.clear()


def override_dependency(app: FastAPI, getter: RepoGetter, implementation: Any) -> None:
    """
    Override a FastAPI dependency with a fake implementation.

    Args:
        app: Application under test
        getter: The dependency getter function (e.g., get_quest_repo)
        implementation: The fake instance, or a factory function
    """
    if inspect.isfunction(implementation):
        app.dependency_overrides[getter] = implementation
    else:
        app.dependency_overrides[getter] = lambda: implementation


# =============================================================================
# Fully Faked Application
# =============================================================================


@dataclass
class FakeAppHarness:
    """An app wired to fakes, its test client, and the fakes themselves."""

    app: FastAPI
    client: TestClient
    hunters: FakeHunterRepository
    workouts: FakeWorkoutRepository
    quests: FakeQuestRepository
    messages: FakeSystemMessageRepository
    meals: FakeMealRepository
    proposer: Any
    responder: Any
    user: AuthenticatedUser = field(default_factory=lambda: AuthenticatedUser(id=TEST_USER_ID))


def build_fake_app(
    *,
    seed_hunter: bool = True,
    xp: int = 0,
    proposer: Any = None,
    responder: Any = None,
    authenticated: bool = True,
    settings: Optional[Settings] = None,
    **hunter_fields: Any,
) -> FakeAppHarness:
    """
    Create an app whose repositories, AI services and auth are all faked.

    Args:
        seed_hunter: Seed a hunter for TEST_USER_ID
        xp: XP of the seeded hunter
        proposer: QuestProposer (defaults to StaticQuestProposer)
        responder: ChatResponder (defaults to FakeChatResponder)
        authenticated: When False, real auth runs against the request headers
        settings: Settings passed to create_app
        **hunter_fields: Extra columns for the seeded hunter
    """
    settings = settings or Settings(environment="test", _env_file=None)
    app = create_app(settings=settings)

    hunters = FakeHunterRepository()
    if seed_hunter:
        hunters.seed([{"id": TEST_USER_ID, "xp": xp, **hunter_fields}])
    workouts = FakeWorkoutRepository(hunters)
    quests = FakeQuestRepository(hunters)
    messages = FakeSystemMessageRepository()
    meals = FakeMealRepository()
    proposer = proposer or StaticQuestProposer()
    responder = responder or FakeChatResponder()

    harness = FakeAppHarness(
        app=app,
        client=TestClient(app),
        hunters=hunters,
        workouts=workouts,
        quests=quests,
        messages=messages,
        meals=meals,
        proposer=proposer,
        responder=responder,
    )

    app.dependency_overrides[deps.get_settings] = lambda: settings
    app.dependency_overrides[deps.get_hunter_repo] = lambda: hunters
    app.dependency_overrides[deps.get_workout_repo] = lambda: workouts
    app.dependency_overrides[deps.get_quest_repo] = lambda: quests
    app.dependency_overrides[deps.get_system_message_repo] = lambda: messages
    app.dependency_overrides[deps.get_meal_repo] = lambda: meals
    app.dependency_overrides[deps.get_quest_generator] = lambda: proposer
    app.dependency_overrides[deps.get_chat_responder] = lambda: responder
    if authenticated:
        app.dependency_overrides[deps.get_current_user] = lambda: harness.user

    return harness


# =============================================================================
# pytest Fixtures
# =============================================================================


@pytest.fixture
def fake_app() -> FakeAppHarness:
    """Fully faked app with one level-1 hunter; overrides cleared afterwards."""
    harness = build_fake_app()
    yield harness
    reset_overrides(harness.app)


__all__ = [
    "TEST_USER_ID",
    "RepoGetter",
    "reset_overrides",
    "override_dependency",
    "FakeAppHarness",
    "build_fake_app",
    "fake_app",
]
