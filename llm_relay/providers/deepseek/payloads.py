from typing import Any, Dict

from ...config.settings import DeepSeekSettings
from ...models.generation import RelayRequest


def build_chat_payload(request: RelayRequest, settings: DeepSeekSettings) -> Dict[str, Any]:
    """Build the chat-completions body for DeepSeek.

    Messages pass through verbatim. ``response_format`` asks the provider for a
    single JSON object; the relay does not validate the JSON itself.
    """
    return {
        "model": settings.model,
        "messages": request.provider_messages(),
        "stream": False,
        "temperature": settings.temperature,
        "max_tokens": settings.max_tokens,
        "response_format": {"type": "json_object"},
    }
