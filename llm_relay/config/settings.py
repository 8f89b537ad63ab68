"""
Provider settings for the relay.

Settings are plain pydantic models built once (usually at process start via
``RelaySettings.from_env()``) and handed to the adapters. Adapters never read
the environment themselves, so tests can inject whatever configuration they
need.
"""

import os
from typing import ClassVar, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .constants import (
    DEEPSEEK_API_KEY_ENV,
    DEEPSEEK_BASE_URL_ENV,
    DEEPSEEK_DEFAULT_BASE_URL,
    DEEPSEEK_DEFAULT_MAX_TOKENS,
    DEEPSEEK_DEFAULT_MODEL,
    DEEPSEEK_DEFAULT_TIMEOUT_MS,
    DEEPSEEK_MAX_TOKENS_ENV,
    DEEPSEEK_MODEL_ENV,
    DEEPSEEK_TIMEOUT_MS_ENV,
    DEFAULT_RELAY_HOST,
    DEFAULT_RELAY_PORT,
    DEFAULT_TEMPERATURE,
    OPENAI_API_KEY_ENV,
    OPENAI_BASE_URL_ENV,
    OPENAI_DEFAULT_BASE_URL,
    OPENAI_DEFAULT_MAX_OUTPUT_TOKENS,
    OPENAI_DEFAULT_MODEL,
    OPENAI_DEFAULT_TIMEOUT_MS,
    OPENAI_MAX_OUTPUT_TOKENS_ENV,
    OPENAI_MODEL_ENV,
    OPENAI_TIMEOUT_MS_ENV,
    RELAY_HOST_ENV,
    RELAY_PORT_ENV,
)


def _env_str(environ: Mapping[str, str], key: str, default: Optional[str] = None) -> Optional[str]:
    value = environ.get(key)
    return value if value else default


def _env_int(environ: Mapping[str, str], key: str, default: int) -> int:
    """Read a positive number from the environment, falling back to ``default``."""
    raw = environ.get(key)
    if not raw:
        return default
    try:
        value = int(float(raw))
    except (ValueError, OverflowError):
        # "nan" raises ValueError, "inf" and "1e999" raise OverflowError
        return default
    return value if value > 0 else default


class ProviderSettings(BaseModel):
    """Settings shared by every upstream provider."""
    model_config = ConfigDict(frozen=True)

    # Name of the environment variable holding the key, used in error messages
    api_key_env: ClassVar[str] = ""
    timeout_env: ClassVar[str] = ""

    api_key: Optional[str] = None
    base_url: str
    model: str
    timeout_ms: int
    temperature: float = DEFAULT_TEMPERATURE

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("api_key")
    @classmethod
    def blank_key_is_missing(cls, v: Optional[str]) -> Optional[str]:
        return v or None

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0

    def __repr__(self) -> str:
        # Never echo the key itself.
        key_state = "set" if self.api_key else "missing"
        return f"{type(self).__name__}(model={self.model!r}, base_url={self.base_url!r}, api_key={key_state})"

    __str__ = __repr__


class DeepSeekSettings(ProviderSettings):
    """DeepSeek chat-completions settings."""
    api_key_env: ClassVar[str] = DEEPSEEK_API_KEY_ENV
    timeout_env: ClassVar[str] = DEEPSEEK_TIMEOUT_MS_ENV

    base_url: str = DEEPSEEK_DEFAULT_BASE_URL
    model: str = DEEPSEEK_DEFAULT_MODEL
    max_tokens: int = DEEPSEEK_DEFAULT_MAX_TOKENS
    timeout_ms: int = DEEPSEEK_DEFAULT_TIMEOUT_MS

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/chat/completions"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DeepSeekSettings":
        env = os.environ if environ is None else environ
        return cls(
            api_key=_env_str(env, DEEPSEEK_API_KEY_ENV),
            base_url=_env_str(env, DEEPSEEK_BASE_URL_ENV, DEEPSEEK_DEFAULT_BASE_URL),
            model=_env_str(env, DEEPSEEK_MODEL_ENV, DEEPSEEK_DEFAULT_MODEL),
            max_tokens=_env_int(env, DEEPSEEK_MAX_TOKENS_ENV, DEEPSEEK_DEFAULT_MAX_TOKENS),
            timeout_ms=_env_int(env, DEEPSEEK_TIMEOUT_MS_ENV, DEEPSEEK_DEFAULT_TIMEOUT_MS),
        )


class OpenAIResponsesSettings(ProviderSettings):
    """OpenAI Responses API settings."""
    api_key_env: ClassVar[str] = OPENAI_API_KEY_ENV
    timeout_env: ClassVar[str] = OPENAI_TIMEOUT_MS_ENV

    base_url: str = OPENAI_DEFAULT_BASE_URL
    model: str = OPENAI_DEFAULT_MODEL
    max_output_tokens: int = OPENAI_DEFAULT_MAX_OUTPUT_TOKENS
    timeout_ms: int = OPENAI_DEFAULT_TIMEOUT_MS

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/responses"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "OpenAIResponsesSettings":
        env = os.environ if environ is None else environ
        return cls(
            api_key=_env_str(env, OPENAI_API_KEY_ENV),
            base_url=_env_str(env, OPENAI_BASE_URL_ENV, OPENAI_DEFAULT_BASE_URL),
            model=_env_str(env, OPENAI_MODEL_ENV, OPENAI_DEFAULT_MODEL),
            max_output_tokens=_env_int(env, OPENAI_MAX_OUTPUT_TOKENS_ENV, OPENAI_DEFAULT_MAX_OUTPUT_TOKENS),
            timeout_ms=_env_int(env, OPENAI_TIMEOUT_MS_ENV, OPENAI_DEFAULT_TIMEOUT_MS),
        )


class RelaySettings(BaseModel):
    """Process-wide settings: one block per provider plus the HTTP bind address."""
    model_config = ConfigDict(frozen=True)

    deepseek: DeepSeekSettings = DeepSeekSettings()
    openai: OpenAIResponsesSettings = OpenAIResponsesSettings()
    host: str = DEFAULT_RELAY_HOST
    port: int = DEFAULT_RELAY_PORT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RelaySettings":
        env = os.environ if environ is None else environ
        return cls(
            deepseek=DeepSeekSettings.from_env(env),
            openai=OpenAIResponsesSettings.from_env(env),
            host=_env_str(env, RELAY_HOST_ENV, DEFAULT_RELAY_HOST),
            port=_env_int(env, RELAY_PORT_ENV, DEFAULT_RELAY_PORT),
        )
