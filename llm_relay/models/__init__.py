"""Data models for LLM Relay."""

from .generation import (
    ProviderType,
    RelayRequest,
    NormalizedResponse
)
from .conversation_types import ConversationMessage, TurnRole as ConversationRole

__all__ = [
    # Request/response models
    "ProviderType",
    "RelayRequest",
    "NormalizedResponse",

    # Conversation models
    "ConversationMessage",
    "ConversationRole"
]
