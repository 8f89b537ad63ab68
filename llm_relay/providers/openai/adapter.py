from typing import Optional

import httpx

from ..base import EmptyUpstreamContent, ProviderAdapter, UpstreamError
from ..errors import ErrorMapper
from ..transport import post_json
from ...config.settings import OpenAIResponsesSettings
from ...models.generation import NormalizedResponse, ProviderType, RelayRequest
from ...observability.logging import ProviderLogger
from .parsers import decode_responses_body, flatten_output_text
from .payloads import build_responses_payload

logger = ProviderLogger("openai", categorize=ErrorMapper.categorize_error)


class OpenAIResponsesProvider(ProviderAdapter):
    """OpenAI Responses API provider.

    The response carries a list of heterogeneous output items; only
    ``output_text`` segments contribute to the normalized content. A reply with
    no text is rejected, the same as the DeepSeek adapter does.
    """

    def __init__(self, settings: Optional[OpenAIResponsesSettings] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings if settings is not None else OpenAIResponsesSettings.from_env()
        self._transport = transport

    def get_provider_name(self) -> str:
        return ProviderType.OPENAI.value

    async def generate(self, request: RelayRequest) -> NormalizedResponse:
        """Generate text through the Responses API."""
        api_key = self.require_api_key()
        settings = self.settings
        payload = build_responses_payload(request, settings)

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
                # The Responses API has no bare top-level "message" field
                message = ErrorMapper.extract_error_message(
                    reply.body, reply.status_code, reply.text, use_top_level_message=False
                )
                raise UpstreamError(message, provider=self.get_provider_name(), status_code=reply.status_code)

            body = decode_responses_body(reply.body)
            content = flatten_output_text(body.output)
            if not content:
                raise EmptyUpstreamContent("OpenAI returned empty content", provider=self.get_provider_name())

            return NormalizedResponse(
                content=content,
                meta=request.meta,
                provider=self.get_provider_name(),
                model=body.model or settings.model
            )
