"""Backend services for the Hunter System API."""

from backend.services.quest_generator import QuestGenerator, fallback_quest
from backend.services.system_chat import SystemChatService

__all__ = [
    "QuestGenerator",
    "fallback_quest",
    "SystemChatService",
]
