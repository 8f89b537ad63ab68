from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List
from enum import Enum

from .conversation_types import ConversationMessage


class ProviderType(str, Enum):
    """Supported upstream providers."""
    DEEPSEEK = "deepseek"
    OPENAI = "openai"


class RelayRequest(BaseModel):
    """
    Normalized chat request accepted by every provider adapter.

    ``meta`` is caller-defined correlation data. It is never interpreted and
    is echoed back unchanged in the response.
    """
    model_config = ConfigDict(frozen=True)

    messages: List[ConversationMessage] = Field(..., min_length=1, description="Conversation in order")
    meta: Any = Field(None, description="Opaque pass-through value")

    def provider_messages(self) -> List[dict]:
        """Messages in wire form, original order preserved."""
        return [message.to_provider_dict() for message in self.messages]


class NormalizedResponse(BaseModel):
    """Response shape returned regardless of which provider served the request."""
    content: str
    meta: Any = None
    provider: str
    model: str
