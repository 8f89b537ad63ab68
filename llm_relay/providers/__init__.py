"""
Provider Adapters Layer

This layer contains the provider-specific implementations.
Each provider adapter translates between the relay's normalized request
and the provider's own API, and flattens the reply back into one text payload.
"""

from .base import (
    ProviderAdapter,
    ProviderError,
    InvalidRequest,
    MethodNotAllowed,
    ConfigurationError,
    ProviderTimeoutError,
    UpstreamError,
    EmptyUpstreamContent,
)
from .deepseek.adapter import DeepSeekProvider
from .openai.adapter import OpenAIResponsesProvider
from .registry import get_adapter, get_provider_status

__all__ = [
    "ProviderAdapter",
    "ProviderError",
    "InvalidRequest",
    "MethodNotAllowed",
    "ConfigurationError",
    "ProviderTimeoutError",
    "UpstreamError",
    "EmptyUpstreamContent",
    "DeepSeekProvider",
    "OpenAIResponsesProvider",
    "get_adapter",
    "get_provider_status",
]
