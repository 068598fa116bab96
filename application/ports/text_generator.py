"""
Text Generation Provider Interface (Port).

The provider returns free-form text with no schema guarantee. Callers own
parsing and validation of whatever comes back.
"""
from typing import Protocol, List, Dict, Optional

from shared.ai_context import AIRequestContext


class TextGenerator(Protocol):
    """
    Abstract interface for an external chat-completion provider.
    """

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
        """
        Run a chat completion.

        Args:
            messages: OpenAI-style [{"role": ..., "content": ...}] list
            model: Provider model name
            temperature: Sampling temperature
            max_tokens: Output token cap
            json_output: Ask the provider for a JSON object response
            context: Request metadata for observability headers

        Returns:
            Raw response text (may be empty or malformed)

        Raises:
            Exception: Any provider or transport error
        """
        ...
