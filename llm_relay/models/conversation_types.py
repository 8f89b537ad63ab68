from pydantic import BaseModel, ConfigDict
from enum import Enum


class TurnRole(str, Enum):
    """Conversation turn roles."""
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class ConversationMessage(BaseModel):
    """Message format forwarded to LLM providers.

    Messages are immutable once built. Extra keys supplied by the caller are
    kept so the provider receives the message exactly as it was sent.
    """
    model_config = ConfigDict(frozen=True, extra="allow")

    role: TurnRole
    content: str

    def to_provider_dict(self) -> dict:
        """Return the wire form of this message (role as a plain string)."""
        return self.model_dump(mode="json")
