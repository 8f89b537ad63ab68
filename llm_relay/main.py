"""Main entry point for LLM Relay."""

from typing import Any, Dict, List, Optional, Union

import httpx

from .config.settings import RelaySettings
from .core.validation import validate_request
from .models.conversation_types import ConversationMessage
from .models.generation import NormalizedResponse, ProviderType
from .providers.base import ProviderAdapter
from .providers.registry import get_adapter, get_provider_status


class RelayClient:
    """High-level client for LLM Relay.

    Settings are read once, when the client is built, and shared by every
    call made through it.
    """

    def __init__(self, settings: Optional[RelaySettings] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings if settings is not None else RelaySettings.from_env()
        self._transport = transport

    def get_adapter(self, provider: str) -> ProviderAdapter:
        """Adapter for ``provider`` ("deepseek" or "openai")."""
        return get_adapter(provider, self.settings, transport=self._transport)

    async def generate(
        self,
        messages: Union[str, List[Union[ConversationMessage, Dict[str, Any]]]],
        meta: Any = None,
        provider: str = ProviderType.DEEPSEEK.value
    ) -> NormalizedResponse:
        """Send a conversation to ``provider`` and return the normalized reply.

        Args:
            messages: Conversation messages, or a bare string sent as one user turn
            meta: Opaque value echoed back in the response
            provider: Provider name
        """
        if isinstance(messages, str):
            messages = [{"role": "user", "content": messages}]
        adapter = self.get_adapter(provider)
        adapter.require_api_key()
        request = validate_request({"messages": list(messages), "meta": meta})
        return await adapter.generate(request)

    def get_provider_status(self) -> Dict[str, Dict[str, object]]:
        """Which providers are configured, and with which model."""
        return get_provider_status(self.settings)


# Convenience function for quick usage
async def generate(
    prompt: str,
    provider: str = ProviderType.DEEPSEEK.value,
    meta: Any = None
) -> NormalizedResponse:
    """Quick generation function."""
    client = RelayClient()
    return await client.generate(prompt, meta=meta, provider=provider)
