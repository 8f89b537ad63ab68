"""Configuration module for LLM Relay."""

from .settings import (
    ProviderSettings,
    DeepSeekSettings,
    OpenAIResponsesSettings,
    RelaySettings
)

# Import all constants
from .constants import *

__all__ = [
    "ProviderSettings",
    "DeepSeekSettings",
    "OpenAIResponsesSettings",
    "RelaySettings"
]
