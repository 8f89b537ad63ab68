from typing import Any, Dict

from ...config.settings import OpenAIResponsesSettings
from ...models.generation import RelayRequest


def build_responses_payload(request: RelayRequest, settings: OpenAIResponsesSettings) -> Dict[str, Any]:
    """Build the Responses API body.

    The conversation goes under ``input`` unchanged, and ``store`` is disabled
    so the provider keeps no copy of the interaction.
    """
    return {
        "model": settings.model,
        "input": request.provider_messages(),
        "store": False,
        "temperature": settings.temperature,
        "max_output_tokens": settings.max_output_tokens,
    }
