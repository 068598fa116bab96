"""AI client factory with Helicone integration support."""
from __future__ import annotations

import logging
from typing import Any, Dict

import httpx
import openai

from backend.settings import Settings, get_settings
from shared.ai_context import AIRequestContext


logger = logging.getLogger(__name__)

# Helicone gateway for Groq's OpenAI-compatible API (private - implementation detail)
_HELICONE_GROQ_BASE_URL = "https://groq.helicone.ai/openai/v1"


def _create_httpx_client(timeout: float) -> httpx.AsyncClient:
    """
    Create the async httpx client used for proxied provider calls.

    Debug logging is not enabled on this client so credential headers are
    never written to logs.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        limits=httpx.Limits(max_keepalive_connections=20, max_connections=100),
    )


class AIClientFactory:
    """Factory for creating text-generation clients with optional Helicone integration."""

    @staticmethod
    def create_llm_client(
        context: AIRequestContext | None = None,
        settings: Settings | None = None,
    ) -> openai.AsyncOpenAI:
        """
        Create an async OpenAI SDK client pointed at the configured provider.

        The provider (Groq by default) exposes an OpenAI-compatible API, so the
        OpenAI SDK is used with a custom base URL.

        Args:
            context: Request context for tracking and observability
            settings: Settings override; defaults to get_settings()

        Returns:
            AsyncOpenAI client instance

        Raises:
            ValueError: If the provider API key is not configured
        """
        settings = settings or get_settings()

        api_key = settings.groq_api_key
        if not api_key:
            raise ValueError("Text-generation API key not configured. Set GROQ_API_KEY environment variable.")

        client_kwargs: Dict[str, Any] = {
            "api_key": api_key,
            "base_url": settings.llm_base_url,
            "timeout": settings.llm_timeout_seconds,
            # retries are handled by backend.ai.retry
            "max_retries": 0,
        }

        if settings.helicone_enabled:
            if not settings.helicone_api_key:
                logger.warning(
                    "helicone_enabled=true but helicone_api_key not set. "
                    "Falling back to direct provider calls."
                )
            else:
                client_kwargs["base_url"] = _HELICONE_GROQ_BASE_URL

                default_headers = {
                    "Helicone-Auth": f"Bearer {settings.helicone_api_key}",
                }
                if context:
                    default_headers.update(context.to_tracking_headers())

                client_kwargs["default_headers"] = default_headers
                client_kwargs["http_client"] = _create_httpx_client(settings.llm_timeout_seconds)

                logger.debug("Creating LLM client with Helicone proxy")
                return openai.AsyncOpenAI(**client_kwargs)

        logger.debug("Creating LLM client (direct)")
        return openai.AsyncOpenAI(**client_kwargs)
