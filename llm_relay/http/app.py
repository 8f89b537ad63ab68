"""FastAPI application factory for LLM Relay."""

from typing import Optional

import httpx
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from .. import __version__
from ..config.settings import RelaySettings
from ..main import RelayClient
from ..providers.base import ProviderError
from .api import error_response, router


def create_app(
    settings: Optional[RelaySettings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> FastAPI:
    """Build the relay app.

    When no settings are given they are read from the environment (and a
    ``.env`` file, if present) once, here.
    """
    if settings is None:
        load_dotenv()
        settings = RelaySettings.from_env()

    app = FastAPI(title="LLM Relay", version=__version__)
    app.state.relay_client = RelayClient(settings, transport=transport)
    app.include_router(router, prefix="/api")

    # Routing failures (unknown path, method the route does not list) use the
    # same {"error": ...} body as relay failures.
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        response = error_response(exc.status_code, str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(ProviderError)
    async def provider_error_handler(request: Request, exc: ProviderError):
        return error_response(exc.status_code, exc.message)

    return app
