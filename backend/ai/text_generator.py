"""
OpenAI-compatible implementation of the TextGenerator port.

Wraps AsyncOpenAI chat completions with retry of transient errors. Returns
the raw message content; callers parse and validate it.
"""

import logging
from typing import Dict, List, Optional

from backend.ai.client_factory import AIClientFactory
from backend.ai.retry import retry_async_call
from backend.settings import Settings, get_settings
from shared.ai_context import AIRequestContext

logger = logging.getLogger(__name__)


class LLMTextGenerator:
    """
    TextGenerator backed by an OpenAI-compatible chat completion API.

    A client is created per call so that observability headers can carry the
    request context.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Args:
            settings: Settings override; defaults to get_settings()
        """
        self._settings = settings or get_settings()

    async def complete(
        self,
        messages: List[Dict[str, str]],
        *,
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 1024,
        json_output: bool = False,
        context: Optional[AIRequestContext] = None,
    ) -> str:
        client = AIClientFactory.create_llm_client(context=context, settings=self._settings)

        request_kwargs = {
            "model": model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        if json_output:
            request_kwargs["response_format"] = {"type": "json_object"}

        response = await retry_async_call(
            client.chat.completions.create,
            max_attempts=self._settings.llm_max_attempts,
            **request_kwargs,
        )

        if not response.choices:
            return ""
        content = response.choices[0].message.content or ""
        logger.debug("LLM %s returned %d chars", model, len(content))
        return content
