"""
LLM Relay - single-shot chat relay to interchangeable LLM providers.

This package forwards a normalized chat request to one of:
- DeepSeek chat completions (JSON-object output mode)
- OpenAI Responses API

and returns one normalized payload: ``{content, meta, provider, model}``.

Features:
- Same request and response shape for every provider
- Per-call timeout for every upstream request
- Upstream HTTP errors surfaced with the upstream status code
- Optional FastAPI service (``llm_relay.http``)
"""

__version__ = "0.1.0"

from .main import RelayClient, generate
from .config.settings import (
    DeepSeekSettings,
    OpenAIResponsesSettings,
    RelaySettings,
)
from .models.conversation_types import ConversationMessage
from .models.conversation_types import TurnRole as ConversationRole
from .models.generation import (
    NormalizedResponse,
    ProviderType,
    RelayRequest,
)
from .providers import (
    ConfigurationError,
    DeepSeekProvider,
    EmptyUpstreamContent,
    InvalidRequest,
    MethodNotAllowed,
    OpenAIResponsesProvider,
    ProviderAdapter,
    ProviderError,
    ProviderTimeoutError,
    UpstreamError,
)

__all__ = [
    # Main client
    "RelayClient",
    "generate",

    # Settings
    "DeepSeekSettings",
    "OpenAIResponsesSettings",
    "RelaySettings",

    # Providers
    "ProviderAdapter",
    "DeepSeekProvider",
    "OpenAIResponsesProvider",

    # Errors
    "ProviderError",
    "InvalidRequest",
    "MethodNotAllowed",
    "ConfigurationError",
    "ProviderTimeoutError",
    "UpstreamError",
    "EmptyUpstreamContent",

    # Models
    "ProviderType",
    "RelayRequest",
    "NormalizedResponse",
    "ConversationMessage",
    "ConversationRole"
]
