"""Shared pytest fixtures for LLM Relay tests."""

import pytest

from llm_relay.config.settings import (
    DeepSeekSettings,
    OpenAIResponsesSettings,
    RelaySettings
)
from llm_relay.models.conversation_types import ConversationMessage, TurnRole as ConversationRole
from llm_relay.models.generation import RelayRequest


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Mock environment variables for testing."""
    env_vars = {
        "DEEPSEEK_API_KEY": "test-deepseek-key",
        "OPENAI_API_KEY": "test-openai-key",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def deepseek_settings():
    """DeepSeek settings with a key and a short timeout."""
    return DeepSeekSettings(api_key="test-deepseek-key", timeout_ms=2000)


@pytest.fixture
def openai_settings():
    """OpenAI Responses settings with a key and a short timeout."""
    return OpenAIResponsesSettings(api_key="test-openai-key", timeout_ms=2000)


@pytest.fixture
def relay_settings(deepseek_settings, openai_settings):
    """Relay settings with both providers configured."""
    return RelaySettings(deepseek=deepseek_settings, openai=openai_settings)


@pytest.fixture
def unconfigured_settings():
    """Relay settings with no API keys at all."""
    return RelaySettings(deepseek=DeepSeekSettings(), openai=OpenAIResponsesSettings())


@pytest.fixture
def sample_conversation_messages():
    """Sample conversation messages."""
    return [
        ConversationMessage(
            role=ConversationRole.SYSTEM,
            content="Reply with a JSON object."
        ),
        ConversationMessage(
            role=ConversationRole.USER,
            content="What is 2+2?"
        ),
        ConversationMessage(
            role=ConversationRole.ASSISTANT,
            content="{\"answer\": 4}"
        ),
        ConversationMessage(
            role=ConversationRole.USER,
            content="And 3+3?"
        )
    ]


@pytest.fixture
def sample_request(sample_conversation_messages):
    """Sample relay request carrying correlation meta."""
    return RelayRequest(messages=sample_conversation_messages, meta={"type": "eval"})
