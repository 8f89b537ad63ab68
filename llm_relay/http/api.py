"""FastAPI HTTP endpoints for LLM Relay.

Every relay route accepts any method so that a non-POST call gets the relay's
own ``{"error": ...}`` body with a 405, rather than the framework default.
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ..core.validation import validate_method, validate_request
from ..models.generation import ProviderType
from ..providers.base import ProviderError
from ..providers.errors import ErrorMapper

logger = logging.getLogger(__name__)

# Create router instance
router = APIRouter()

RELAY_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


async def read_json_body(request: Request) -> Any:
    """Decode the request body; an empty or malformed body decodes as None."""
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return None


async def relay(request: Request, provider: str) -> JSONResponse:
    """Validate, forward to ``provider`` and render the normalized reply."""
    try:
        validate_method(request.method)

        client = request.app.state.relay_client
        adapter = client.get_adapter(provider)
        # A missing key is reported even when the body is invalid
        adapter.require_api_key()

        relay_request = validate_request(await read_json_body(request))
        response = await adapter.generate(relay_request)
        return JSONResponse(response.model_dump(mode="json"))
    except ProviderError as e:
        logger.info(
            "Relay request failed: provider=%s status=%s category=%s",
            provider, e.status_code, ErrorMapper.categorize_error(e)
        )
        return error_response(e.status_code, e.message)
    except Exception as e:
        logger.exception("Unexpected relay failure: provider=%s", provider)
        return error_response(500, str(e) or type(e).__name__)


@router.api_route("/ai", methods=RELAY_METHODS)
async def deepseek_generate(request: Request):
    """DeepSeek JSON-mode chat completion."""
    return await relay(request, ProviderType.DEEPSEEK.value)


@router.api_route("/responses", methods=RELAY_METHODS)
async def openai_generate(request: Request):
    """OpenAI Responses API completion."""
    return await relay(request, ProviderType.OPENAI.value)


@router.api_route("/{provider}/generate", methods=RELAY_METHODS)
async def provider_generate(provider: str, request: Request):
    """Completion through the provider named in the path."""
    return await relay(request, provider)


@router.get("/status")
async def relay_status(request: Request):
    """Get status of all providers."""
    return {"providers": request.app.state.relay_client.get_provider_status()}
