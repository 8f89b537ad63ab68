from typing import Dict, Optional, Type

import httpx

from ..config.settings import RelaySettings
from ..models.generation import ProviderType
from .base import InvalidRequest, ProviderAdapter
from .deepseek.adapter import DeepSeekProvider
from .openai.adapter import OpenAIResponsesProvider


PROVIDER_ADAPTERS: Dict[ProviderType, Type[ProviderAdapter]] = {
    ProviderType.DEEPSEEK: DeepSeekProvider,
    ProviderType.OPENAI: OpenAIResponsesProvider,
}


def resolve_provider(provider: str) -> ProviderType:
    """Map a provider name to its ProviderType; unknown names are a 404."""
    try:
        return ProviderType(str(provider).lower())
    except ValueError:
        raise InvalidRequest(f"Unknown provider: {provider}", status_code=404) from None


def get_adapter(
    provider: str,
    settings: RelaySettings,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> ProviderAdapter:
    """Build the adapter for ``provider`` with its slice of the relay settings."""
    provider_type = resolve_provider(provider)
    adapter_cls = PROVIDER_ADAPTERS[provider_type]
    # RelaySettings has one attribute per provider, named after its ProviderType value
    return adapter_cls(getattr(settings, provider_type.value), transport=transport)


def get_provider_status(settings: RelaySettings) -> Dict[str, Dict[str, object]]:
    """Report which providers are configured. Keys themselves are never included."""
    status = {}
    for provider_type in PROVIDER_ADAPTERS:
        adapter = get_adapter(provider_type.value, settings)
        status[provider_type.value] = {
            "available": adapter.is_available(),
            "model": adapter.settings.model,
        }
    return status
