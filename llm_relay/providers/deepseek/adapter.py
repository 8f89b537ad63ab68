from typing import Optional

import httpx

from ..base import EmptyUpstreamContent, ProviderAdapter, UpstreamError
from ..errors import ErrorMapper
from ..transport import post_json
from ...config.settings import DeepSeekSettings
from ...models.generation import NormalizedResponse, ProviderType, RelayRequest
from ...observability.logging import ProviderLogger
from .parsers import decode_chat_completion, extract_chat_content
from .payloads import build_chat_payload

logger = ProviderLogger("deepseek", categorize=ErrorMapper.categorize_error)


class DeepSeekProvider(ProviderAdapter):
    """DeepSeek chat-completions provider with JSON-object output mode."""

    def __init__(self, settings: Optional[DeepSeekSettings] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings if settings is not None else DeepSeekSettings.from_env()
        self._transport = transport

    def get_provider_name(self) -> str:
        return ProviderType.DEEPSEEK.value

    async def generate(self, request: RelayRequest) -> NormalizedResponse:
        """Generate a JSON-mode completion for the request's conversation."""
        api_key = self.require_api_key()
        settings = self.settings
        payload = build_chat_payload(request, settings)

        with logger.track_call(settings.model):
            reply = await post_json(
                settings.endpoint,
                api_key,
                payload,
                timeout_seconds=settings.timeout_seconds,
                provider=self.get_provider_name(),
                timeout_env=settings.timeout_env,
                transport=self._transport,
            )

            if not reply.ok:
                message = ErrorMapper.extract_error_message(reply.body, reply.status_code, reply.text)
                raise UpstreamError(message, provider=self.get_provider_name(), status_code=reply.status_code)

            body = decode_chat_completion(reply.body)
            content = extract_chat_content(body)
            if content is None:
                raise EmptyUpstreamContent("DeepSeek returned empty content", provider=self.get_provider_name())

            return NormalizedResponse(
                content=content,
                meta=request.meta,
                provider=self.get_provider_name(),
                model=body.model or settings.model
            )
