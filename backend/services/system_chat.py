"""
Reply generation for "The System", the in-app chat persona.
"""

import logging
from typing import Dict, List

from application.ports import TextGenerator
from backend.services.prompts import build_system_prompt
from domain.models import Hunter, MessageRole, SystemMessage
from shared.ai_context import AIRequestContext

logger = logging.getLogger(__name__)

DEFAULT_CHAT_MODEL = "llama3-8b-8192"
CHAT_TEMPERATURE = 0.7
CHAT_MAX_TOKENS = 500

EMPTY_REPLY = "The System is processing your request..."


class SystemChatService:
    """Builds the persona conversation and asks the provider for a reply."""

    def __init__(
        self,
        text_generator: TextGenerator,
        model: str = DEFAULT_CHAT_MODEL,
        environment: str = "production",
    ):
        self._text_generator = text_generator
        self._model = model
        self._environment = environment

    @staticmethod
    def build_messages(
        hunter: Hunter,
        history: List[SystemMessage],
        message: str,
    ) -> List[Dict[str, str]]:
        """
        Assemble the provider conversation.

        Args:
            hunter: Hunter chatting with The System
            history: Recent transcript, newest first
            message: The new user message

        Returns:
            Persona prompt, then history oldest first, then the new message
        """
        messages = [{"role": "system", "content": build_system_prompt(hunter)}]
        for entry in reversed(history):
            if entry.role in (MessageRole.USER, MessageRole.ASSISTANT):
                messages.append({"role": entry.role.value, "content": entry.content})
        messages.append({"role": "user", "content": message})
        return messages

    async def reply(
        self,
        hunter: Hunter,
        history: List[SystemMessage],
        message: str,
    ) -> str:
        """
        Generate The System's reply.

        Returns:
            Reply text; EMPTY_REPLY when the provider returns nothing

        Raises:
            Exception: Any provider error, left to the caller
        """
        context = AIRequestContext(
            user_id=hunter.id,
            feature_name="system_chat",
            environment=self._environment,
        )
        content = await self._text_generator.complete(
            self.build_messages(hunter, history, message),
            model=self._model,
            temperature=CHAT_TEMPERATURE,
            max_tokens=CHAT_MAX_TOKENS,
            context=context,
        )
        content = (content or "").strip()
        if not content:
            logger.info("Empty System reply for user %s", hunter.id)
            return EMPTY_REPLY
        return content
