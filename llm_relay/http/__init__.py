"""HTTP API layer for LLM Relay.

FastAPI routes that expose the provider adapters:

    POST /api/ai                  DeepSeek (JSON mode)
    POST /api/responses           OpenAI Responses API
    POST /api/{provider}/generate provider chosen by name
    GET  /api/status              which providers are configured
"""

from .app import create_app

__all__ = ["create_app"]
