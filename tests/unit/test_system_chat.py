"""
Unit tests for the System chat: application/use_cases/system_chat.py and
backend/services/system_chat.py
"""

import openai
import pytest

from application.exceptions import HunterNotFoundError
from application.use_cases import SystemChatUseCase, UNAVAILABLE_REPLY
from backend.services.system_chat import EMPTY_REPLY, SystemChatService
from domain.models import Hunter, MessageRole
from tests.fakes import (
    FakeChatResponder,
    FakeHunterRepository,
    FakeSystemMessageRepository,
    FakeTextGenerator,
    create_hunter_repo,
)

USER = "user-1"


@pytest.mark.unit
class TestSystemChatUseCase:
    """Test one chat turn."""

    @pytest.mark.asyncio
    async def test_stores_both_sides_and_awards_wisdom(self):
        hunters = create_hunter_repo(user_id=USER)
        messages = FakeSystemMessageRepository()
        use_case = SystemChatUseCase(hunters, messages, FakeChatResponder("Train harder."))

        result = await use_case.execute(USER, "How do I get stronger?")

        assert result.reply == "Train harder."
        assert result.stored is True
        stored = messages.get_all()
        assert [(m.role, m.content) for m in stored] == [
            (MessageRole.USER, "How do I get stronger?"),
            (MessageRole.ASSISTANT, "Train harder."),
        ]
        assert hunters.get(USER).wisdom == 11

    @pytest.mark.asyncio
    async def test_provider_failure_returns_unavailable_and_stores_nothing(self):
        hunters = create_hunter_repo(user_id=USER)
        messages = FakeSystemMessageRepository()
        responder = FakeChatResponder(error=openai.APIConnectionError(request=None))

        result = await SystemChatUseCase(hunters, messages, responder).execute(USER, "Hello")

        assert result.reply == UNAVAILABLE_REPLY
        assert result.stored is False
        assert messages.get_all() == []
        assert hunters.get(USER).wisdom == 10

    @pytest.mark.asyncio
    async def test_history_passed_newest_first(self):
        hunters = create_hunter_repo(user_id=USER)
        messages = FakeSystemMessageRepository()
        messages.create(USER, MessageRole.USER, "first")
        messages.create(USER, MessageRole.ASSISTANT, "second")
        responder = FakeChatResponder()

        await SystemChatUseCase(hunters, messages, responder).execute(USER, "third")

        history = responder.calls[0]["history"]
        assert [m.content for m in history] == ["second", "first"]

    @pytest.mark.asyncio
    async def test_unknown_hunter(self):
        use_case = SystemChatUseCase(FakeHunterRepository(), FakeSystemMessageRepository(), FakeChatResponder())
        with pytest.raises(HunterNotFoundError):
            await use_case.execute("nobody", "Hello")


@pytest.mark.unit
class TestSystemChatService:
    """Test the persona conversation sent to the provider."""

    def test_messages_ordered_oldest_first(self):
        hunter = Hunter(id=USER, xp=900, first_name="Jin")
        messages = FakeSystemMessageRepository()
        messages.create(USER, MessageRole.USER, "a")
        messages.create(USER, MessageRole.ASSISTANT, "b")

        built = SystemChatService.build_messages(hunter, messages.list_recent(USER), "c")

        assert built[0]["role"] == "system"
        assert "Jin" in built[0]["content"]
        assert "Level: 4" in built[0]["content"]
        assert [(m["role"], m["content"]) for m in built[1:]] == [
            ("user", "a"), ("assistant", "b"), ("user", "c"),
        ]

    @pytest.mark.asyncio
    async def test_empty_provider_reply(self):
        service = SystemChatService(FakeTextGenerator(["   "]), environment="test")
        assert await service.reply(Hunter(id=USER), [], "hi") == EMPTY_REPLY

    @pytest.mark.asyncio
    async def test_provider_error_propagates(self):
        service = SystemChatService(FakeTextGenerator([RuntimeError("down")]), environment="test")
        with pytest.raises(RuntimeError):
            await service.reply(Hunter(id=USER), [], "hi")

    @pytest.mark.asyncio
    async def test_request_context(self):
        fake = FakeTextGenerator(["Yes."])
        await SystemChatService(fake, model="chat-model", environment="test").reply(Hunter(id=USER), [], "hi")
        assert fake.calls[0]["model"] == "chat-model"
        assert fake.calls[0]["context"].feature_name == "system_chat"
        assert fake.calls[0]["json_output"] is False
