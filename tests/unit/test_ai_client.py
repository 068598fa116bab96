"""Tests for AIClientFactory, AIRequestContext, retry and LLMTextGenerator."""
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import httpx
import openai
import pytest

from backend.ai.client_factory import AIClientFactory
from backend.ai.retry import is_retryable_error, retry_async_call
from backend.ai.text_generator import LLMTextGenerator
from backend.settings import Settings
from shared.ai_context import AIRequestContext


def make_settings(**overrides) -> Settings:
    values = {"environment": "test", "groq_api_key": "gsk_test", "_env_file": None}
    values.update(overrides)
    return Settings(**values)


def status_error(cls, status: int):
    request = httpx.Request("POST", "https://api.groq.com/openai/v1/chat/completions")
    response = httpx.Response(status, request=request)
    return cls("error", response=response, body=None)


@pytest.mark.unit
class TestAIRequestContext:
    """Tests for AIRequestContext dataclass."""

    def test_environment_header_always_present(self):
        headers = AIRequestContext(environment="test").to_tracking_headers()
        assert headers == {"Helicone-Property-Environment": "test"}

    def test_full_context(self):
        headers = AIRequestContext(
            user_id="user123",
            session_id="s1",
            feature_name="quest_generation",
            environment="test",
            extra={"quest_type": "daily"},
        ).to_tracking_headers()

        assert headers["Helicone-User-Id"] == "user123"
        assert headers["Helicone-Session-Id"] == "s1"
        assert headers["Helicone-Property-Feature"] == "quest_generation"
        assert headers["Helicone-Property-Quest-Type"] == "daily"

    def test_header_values_sanitized(self):
        headers = AIRequestContext(user_id="evil\r\nX-Injected: 1", environment="test").to_tracking_headers()
        assert "\n" not in headers["Helicone-User-Id"]
        assert "\r" not in headers["Helicone-User-Id"]

    def test_invalid_header_names_skipped(self):
        headers = AIRequestContext(environment="test", extra={"invalid@key!": "v"}).to_tracking_headers()
        assert len(headers) == 1

    def test_invalid_environment(self):
        with pytest.raises(ValueError):
            AIRequestContext(environment="moon")

    def test_empty_user_id_rejected(self):
        with pytest.raises(ValueError):
            AIRequestContext(user_id="")


@pytest.mark.unit
class TestAIClientFactory:
    """Tests for client creation."""

    def test_missing_key_raises(self):
        with pytest.raises(ValueError, match="GROQ_API_KEY"):
            AIClientFactory.create_llm_client(settings=make_settings(groq_api_key=None))

    def test_direct_client(self):
        client = AIClientFactory.create_llm_client(settings=make_settings())
        assert str(client.base_url).startswith("https://api.groq.com/openai/v1")
        assert client.max_retries == 0

    def test_helicone_client(self):
        settings = make_settings(helicone_enabled=True, helicone_api_key="hk_test")
        context = AIRequestContext(user_id="user123", environment="test")

        client = AIClientFactory.create_llm_client(context=context, settings=settings)

        assert "helicone" in str(client.base_url)
        assert client.default_headers["Helicone-Auth"] == "Bearer hk_test"
        assert client.default_headers["Helicone-User-Id"] == "user123"

    def test_helicone_without_key_falls_back_to_direct(self):
        settings = make_settings(helicone_enabled=True)
        client = AIClientFactory.create_llm_client(settings=settings)
        assert "helicone" not in str(client.base_url)


@pytest.mark.unit
class TestRetry:
    """Tests for transient error retry."""

    def test_retryable_classification(self):
        assert is_retryable_error(status_error(openai.RateLimitError, 429))
        assert is_retryable_error(status_error(openai.InternalServerError, 500))
        assert is_retryable_error(openai.APIConnectionError(request=None))
        assert not is_retryable_error(status_error(openai.AuthenticationError, 401))
        assert not is_retryable_error(status_error(openai.BadRequestError, 400))
        assert not is_retryable_error(ValueError("bad json"))

    @pytest.mark.asyncio
    async def test_retries_transient_then_succeeds(self):
        func = AsyncMock(side_effect=[status_error(openai.RateLimitError, 429), "ok"])
        result = await retry_async_call(func, max_attempts=2, min_wait_seconds=0.01, max_wait_seconds=0.01)
        assert result == "ok"
        assert func.await_count == 2

    @pytest.mark.asyncio
    async def test_non_retryable_raised_immediately(self):
        func = AsyncMock(side_effect=status_error(openai.AuthenticationError, 401))
        with pytest.raises(openai.AuthenticationError):
            await retry_async_call(func, max_attempts=3, min_wait_seconds=0.01, max_wait_seconds=0.01)
        assert func.await_count == 1

    @pytest.mark.asyncio
    async def test_last_error_reraised_when_exhausted(self):
        func = AsyncMock(side_effect=openai.APIConnectionError(request=None))
        with pytest.raises(openai.APIConnectionError):
            await retry_async_call(func, max_attempts=2, min_wait_seconds=0.01, max_wait_seconds=0.01)
        assert func.await_count == 2

    @pytest.mark.asyncio
    async def test_invalid_params(self):
        with pytest.raises(ValueError):
            await retry_async_call(AsyncMock(), max_attempts=0)


@pytest.mark.unit
class TestLLMTextGenerator:
    """Tests for the OpenAI-compatible TextGenerator."""

    @pytest.mark.asyncio
    async def test_returns_message_content(self):
        response = SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content="hello"))])
        create = AsyncMock(return_value=response)
        client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))

        with patch("backend.ai.text_generator.AIClientFactory.create_llm_client", return_value=client):
            text = await LLMTextGenerator(make_settings()).complete(
                [{"role": "user", "content": "hi"}], model="m", json_output=True,
            )

        assert text == "hello"
        kwargs = create.await_args.kwargs
        assert kwargs["model"] == "m"
        assert kwargs["response_format"] == {"type": "json_object"}

    @pytest.mark.asyncio
    async def test_no_choices_is_empty_text(self):
        create = AsyncMock(return_value=SimpleNamespace(choices=[]))
        client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))

        with patch("backend.ai.text_generator.AIClientFactory.create_llm_client", return_value=client):
            text = await LLMTextGenerator(make_settings()).complete([], model="m")

        assert text == ""
        assert "response_format" not in create.await_args.kwargs
