"""
Repository and Provider Interfaces (Ports) for the Hunter System API.

This package defines abstract interfaces that decouple domain logic from
infrastructure (database, external services). Implementations are provided
in the infrastructure and backend layers; in-memory fakes live in tests/fakes.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the core needs)
- Adapters: Concrete implementations (how it's provided)

Usage:
    from application.ports import HunterRepository, QuestRepository

    class QuestLifecycleManager:
        def __init__(self, quest_repo: QuestRepository, hunter_repo: HunterRepository, ...):
            ...
"""

# Profile store
from application.ports.hunter_repository import HunterRepository

# Workout persistence
from application.ports.workout_repository import WorkoutRepository

# Quest persistence
from application.ports.quest_repository import QuestAward, QuestRepository

# Chat transcript
from application.ports.system_message_repository import SystemMessageRepository

# Nutrition
from application.ports.meal_repository import MealRepository

# External text-generation provider and the services built on it
from application.ports.text_generator import TextGenerator
from application.ports.quest_proposer import QuestProposer
from application.ports.chat_responder import ChatResponder

__all__ = [
    "HunterRepository",
    "WorkoutRepository",
    "QuestRepository",
    "QuestAward",
    "SystemMessageRepository",
    "MealRepository",
    "TextGenerator",
    "QuestProposer",
    "ChatResponder",
]
