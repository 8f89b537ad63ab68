"""
Relay defaults and environment variable names.

Every value here can be overridden through the environment; see
llm_relay/config/settings.py for how the overrides are read.
"""

# Sampling temperature sent to every provider (deterministic-leaning output)
DEFAULT_TEMPERATURE = 0.2

# DeepSeek chat-completions (JSON mode)
DEEPSEEK_API_KEY_ENV = "DEEPSEEK_API_KEY"
DEEPSEEK_BASE_URL_ENV = "DEEPSEEK_BASE_URL"
DEEPSEEK_MODEL_ENV = "DEEPSEEK_MODEL"
DEEPSEEK_MAX_TOKENS_ENV = "DEEPSEEK_MAX_TOKENS"
DEEPSEEK_TIMEOUT_MS_ENV = "DEEPSEEK_TIMEOUT_MS"

DEEPSEEK_DEFAULT_BASE_URL = "https://api.deepseek.com"
DEEPSEEK_DEFAULT_MODEL = "deepseek-chat"
DEEPSEEK_DEFAULT_MAX_TOKENS = 2200
DEEPSEEK_DEFAULT_TIMEOUT_MS = 45000

# OpenAI Responses API
OPENAI_API_KEY_ENV = "OPENAI_API_KEY"
OPENAI_BASE_URL_ENV = "OPENAI_BASE_URL"
OPENAI_MODEL_ENV = "OPENAI_MODEL"
OPENAI_MAX_OUTPUT_TOKENS_ENV = "OPENAI_MAX_OUTPUT_TOKENS"
OPENAI_TIMEOUT_MS_ENV = "OPENAI_TIMEOUT_MS"

OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"
OPENAI_DEFAULT_MODEL = "gpt-4o-mini"
OPENAI_DEFAULT_MAX_OUTPUT_TOKENS = 1200
OPENAI_DEFAULT_TIMEOUT_MS = 45000

# HTTP service
RELAY_HOST_ENV = "LLM_RELAY_HOST"
RELAY_PORT_ENV = "LLM_RELAY_PORT"
DEFAULT_RELAY_HOST = "127.0.0.1"
DEFAULT_RELAY_PORT = 8000
