"""Unit tests for the OpenAI Responses API provider."""

import asyncio

import pytest

from llm_relay.config.settings import OpenAIResponsesSettings
from llm_relay.providers.base import (
    ConfigurationError,
    EmptyUpstreamContent,
    ProviderTimeoutError,
    UpstreamError,
)
from llm_relay.providers.openai.adapter import OpenAIResponsesProvider
from tests.helpers.upstream_mocks import json_response, responses_body, slow_response, text_response


class TestOpenAIResponsesProvider:
    """Test OpenAI Responses provider."""

    @pytest.mark.asyncio
    async def test_generate_success(self, openai_settings, sample_request):
        transport = json_response(responses_body("Hello", "World"))
        provider = OpenAIResponsesProvider(openai_settings, transport=transport)

        response = await provider.generate(sample_request)

        assert response.content == "Hello\nWorld"
        assert response.meta == {"type": "eval"}
        assert response.provider == "openai"
        assert response.model == "gpt-4o-mini-2024-07-18"

    @pytest.mark.asyncio
    async def test_request_shape(self, openai_settings, sample_request):
        transport = json_response(responses_body("ok"))
        provider = OpenAIResponsesProvider(openai_settings, transport=transport)

        await provider.generate(sample_request)

        assert transport.call_count == 1
        request = transport.requests[0]
        assert str(request.url) == "https://api.openai.com/v1/responses"
        assert request.headers["Authorization"] == "Bearer test-openai-key"

        payload = transport.last_json()
        assert payload["model"] == "gpt-4o-mini"
        assert payload["input"] == [m.to_provider_dict() for m in sample_request.messages]
        assert payload["store"] is False
        assert payload["temperature"] == 0.2
        assert payload["max_output_tokens"] == 1200
        assert "messages" not in payload

    @pytest.mark.asyncio
    async def test_extraction_skips_non_text_segments(self, openai_settings, sample_request):
        """Test the documented A / other / B example joins to "A\\nB"."""
        body = {
            "model": "gpt-4o-mini",
            "output": [
                {"content": [{"type": "output_text", "text": "A"}]},
                {"content": [{"type": "other"}]},
                {"content": [{"type": "output_text", "text": "B"}]},
            ],
        }
        provider = OpenAIResponsesProvider(openai_settings, transport=json_response(body))

        response = await provider.generate(sample_request)

        assert response.content == "A\nB"

    @pytest.mark.asyncio
    async def test_model_falls_back_to_configured(self, openai_settings, sample_request):
        body = responses_body("ok")
        del body["model"]
        provider = OpenAIResponsesProvider(openai_settings, transport=json_response(body))

        response = await provider.generate(sample_request)

        assert response.model == "gpt-4o-mini"

    @pytest.mark.asyncio
    async def test_missing_api_key(self, sample_request):
        transport = json_response(responses_body("ok"))
        provider = OpenAIResponsesProvider(OpenAIResponsesSettings(), transport=transport)

        with pytest.raises(ConfigurationError) as exc_info:
            await provider.generate(sample_request)

        assert exc_info.value.status_code == 500
        assert "OPENAI_API_KEY" in exc_info.value.message
        assert transport.call_count == 0

    @pytest.mark.asyncio
    async def test_upstream_error_nested_message(self, openai_settings, sample_request):
        provider = OpenAIResponsesProvider(
            openai_settings,
            transport=json_response({"error": {"message": "rate limited", "type": "requests"}}, status_code=429)
        )

        with pytest.raises(UpstreamError) as exc_info:
            await provider.generate(sample_request)

        assert exc_info.value.status_code == 429
        assert exc_info.value.message == "rate limited"

    @pytest.mark.asyncio
    async def test_upstream_error_ignores_top_level_message(self, openai_settings, sample_request):
        """Test the Responses error shape falls through to the serialized body."""
        provider = OpenAIResponsesProvider(
            openai_settings,
            transport=json_response({"message": "nope"}, status_code=400)
        )

        with pytest.raises(UpstreamError) as exc_info:
            await provider.generate(sample_request)

        assert exc_info.value.message == "{\"message\":\"nope\"}"

    @pytest.mark.asyncio
    async def test_upstream_error_non_json_body(self, openai_settings, sample_request):
        provider = OpenAIResponsesProvider(openai_settings, transport=text_response("upstream down", 503))

        with pytest.raises(UpstreamError) as exc_info:
            await provider.generate(sample_request)

        assert exc_info.value.status_code == 503
        assert exc_info.value.message == "upstream down"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        {"output": []},
        {"output": None},
        {"output": [{"type": "reasoning", "summary": []}]},
        {"output": [{"content": [{"type": "output_text", "text": "   "}]}]},
        {"output": [{"content": [{"type": "refusal", "refusal": "no"}]}]},
    ])
    async def test_empty_content(self, openai_settings, sample_request, body):
        """Test a reply without text is rejected, matching the DeepSeek rule."""
        provider = OpenAIResponsesProvider(openai_settings, transport=json_response(body))

        with pytest.raises(EmptyUpstreamContent) as exc_info:
            await provider.generate(sample_request)

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "OpenAI returned empty content"

    @pytest.mark.asyncio
    async def test_timeout(self, sample_request):
        settings = OpenAIResponsesSettings(api_key="test-openai-key", timeout_ms=20)
        provider = OpenAIResponsesProvider(settings, transport=slow_response(1.0, responses_body("late")))

        with pytest.raises(ProviderTimeoutError) as exc_info:
            await provider.generate(sample_request)

        assert exc_info.value.message == "Request timed out (OPENAI_TIMEOUT_MS)"

        await asyncio.sleep(0.05)

    def test_provider_name(self, openai_settings):
        provider = OpenAIResponsesProvider(openai_settings)

        assert provider.get_provider_name() == "openai"
        assert provider.is_available() is True
