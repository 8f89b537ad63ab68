"""Unit tests for the provider registry and RelayClient."""

import pytest

from llm_relay.main import RelayClient
from llm_relay.models.conversation_types import ConversationMessage, TurnRole
from llm_relay.providers.base import ConfigurationError, InvalidRequest
from llm_relay.providers.deepseek.adapter import DeepSeekProvider
from llm_relay.providers.openai.adapter import OpenAIResponsesProvider
from llm_relay.providers.registry import get_adapter, get_provider_status, resolve_provider
from tests.helpers.upstream_mocks import chat_completion, json_response, responses_body


class TestRegistry:
    """Test provider lookup."""

    def test_get_adapter(self, relay_settings):
        deepseek = get_adapter("deepseek", relay_settings)
        openai = get_adapter("OpenAI", relay_settings)

        assert isinstance(deepseek, DeepSeekProvider)
        assert deepseek.settings is relay_settings.deepseek
        assert isinstance(openai, OpenAIResponsesProvider)
        assert openai.settings is relay_settings.openai

    def test_unknown_provider(self, relay_settings):
        with pytest.raises(InvalidRequest) as exc_info:
            get_adapter("anthropic", relay_settings)

        assert exc_info.value.status_code == 404
        assert "anthropic" in exc_info.value.message

    def test_resolve_provider(self):
        assert resolve_provider("deepseek").value == "deepseek"

    def test_provider_status(self, relay_settings, unconfigured_settings):
        assert get_provider_status(relay_settings) == {
            "deepseek": {"available": True, "model": "deepseek-chat"},
            "openai": {"available": True, "model": "gpt-4o-mini"},
        }
        status = get_provider_status(unconfigured_settings)
        assert status["deepseek"]["available"] is False
        assert status["openai"]["available"] is False


class TestRelayClient:
    """Test the high-level client."""

    @pytest.mark.asyncio
    async def test_generate_with_string_prompt(self, relay_settings):
        transport = json_response(chat_completion("{\"ok\": true}"))
        client = RelayClient(relay_settings, transport=transport)

        response = await client.generate("Say ok as JSON", meta={"type": "eval"})

        assert response.content == "{\"ok\": true}"
        assert response.meta == {"type": "eval"}
        assert transport.last_json()["messages"] == [{"role": "user", "content": "Say ok as JSON"}]

    @pytest.mark.asyncio
    async def test_generate_with_messages(self, relay_settings):
        transport = json_response(responses_body("hi"))
        client = RelayClient(relay_settings, transport=transport)
        messages = [
            ConversationMessage(role=TurnRole.SYSTEM, content="Be brief."),
            {"role": "user", "content": "Hello"},
        ]

        response = await client.generate(messages, provider="openai")

        assert response.provider == "openai"
        assert response.content == "hi"
        assert transport.last_json()["input"] == [
            {"role": "system", "content": "Be brief."},
            {"role": "user", "content": "Hello"},
        ]

    @pytest.mark.asyncio
    async def test_empty_messages_rejected_without_call(self, relay_settings):
        transport = json_response(chat_completion())
        client = RelayClient(relay_settings, transport=transport)

        with pytest.raises(InvalidRequest):
            await client.generate([])

        assert transport.call_count == 0

    @pytest.mark.asyncio
    async def test_missing_key_reported_before_validation(self, unconfigured_settings):
        client = RelayClient(unconfigured_settings, transport=json_response(chat_completion()))

        with pytest.raises(ConfigurationError):
            await client.generate([])

    def test_get_provider_status(self, relay_settings):
        client = RelayClient(relay_settings)
        assert set(client.get_provider_status()) == {"deepseek", "openai"}
