"""
SystemChat Use Case.

One turn of conversation with The System: load context, ask for a reply,
store both sides of the exchange and reward the hunter with wisdom.
"""

import logging
from dataclasses import dataclass
from typing import List

from application.exceptions import HunterNotFoundError
from application.ports import ChatResponder, HunterRepository, SystemMessageRepository
from domain.models import MessageRole, SystemMessage
from domain.progression import StatDelta

logger = logging.getLogger(__name__)

UNAVAILABLE_REPLY = (
    "The System is temporarily unavailable. A connection error occurred. Please try again."
)
HISTORY_LIMIT = 10
WISDOM_PER_MESSAGE = 1


@dataclass
class ChatTurnResult:
    """Result of one chat turn."""

    reply: str
    stored: bool


class SystemChatUseCase:
    """
    Use case for chatting with The System.

    When the provider fails the hunter receives UNAVAILABLE_REPLY and
    nothing is stored or awarded.
    """

    def __init__(
        self,
        hunter_repo: HunterRepository,
        message_repo: SystemMessageRepository,
        responder: ChatResponder,
    ) -> None:
        self._hunter_repo = hunter_repo
        self._message_repo = message_repo
        self._responder = responder

    def history(self, user_id: str, limit: int = 50) -> List[SystemMessage]:
        """Most recent messages, newest first."""
        return self._message_repo.list_recent(user_id, limit)

    async def execute(self, user_id: str, message: str) -> ChatTurnResult:
        """
        Run one chat turn.

        Args:
            user_id: Hunter ID
            message: Validated user message

        Returns:
            ChatTurnResult; ``stored`` is False when the fallback reply was used

        Raises:
            HunterNotFoundError: If the hunter has no profile
            PersistenceError: If storing the exchange fails
        """
        hunter = self._hunter_repo.get(user_id)
        if hunter is None:
            raise HunterNotFoundError(user_id)

        history = self._message_repo.list_recent(user_id, HISTORY_LIMIT)

        try:
            reply = await self._responder.reply(hunter, history, message)
        except Exception as e:
            logger.warning("System reply failed for user %s: %s", user_id, e)
            return ChatTurnResult(reply=UNAVAILABLE_REPLY, stored=False)

        self._message_repo.create(user_id, MessageRole.USER, message)
        self._message_repo.create(user_id, MessageRole.ASSISTANT, reply)
        self._hunter_repo.add_stats(user_id, StatDelta(wisdom=WISDOM_PER_MESSAGE))

        return ChatTurnResult(reply=reply, stored=True)
