"""
Chat Responder Interface (Port).
"""
from typing import Protocol, List

from domain.models import Hunter, SystemMessage


class ChatResponder(Protocol):
    """
    Abstract interface for The System's reply generation.
    """

    async def reply(
        self,
        hunter: Hunter,
        history: List[SystemMessage],
        message: str,
    ) -> str:
        """
        Generate a reply to ``message``.

        Args:
            hunter: Hunter chatting with The System
            history: Recent transcript, newest first
            message: The new user message

        Raises:
            Exception: Any provider error
        """
        ...
