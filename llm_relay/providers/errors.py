"""
Error mapping utilities for provider adapters.

This module turns whatever a provider sends back on failure into a
human-readable message, and converts httpx transport failures into
standardized ProviderError instances.
"""

import json
from typing import Any, Optional

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .base import ProviderError, ProviderTimeoutError


def _text_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


class UpstreamErrorDetail(BaseModel):
    """The nested ``error`` object most providers return."""
    model_config = ConfigDict(extra="ignore")

    message: Optional[str] = None

    @field_validator("message", mode="before")
    @classmethod
    def text_or_none(cls, v: Any) -> Optional[str]:
        return _text_or_none(v)


class UpstreamErrorBody(BaseModel):
    """Decoded error body: ``{"error": {"message": ...}}`` or ``{"message": ...}``."""
    model_config = ConfigDict(extra="ignore")

    error: Optional[UpstreamErrorDetail] = None
    message: Optional[str] = None

    @field_validator("error", mode="before")
    @classmethod
    def object_or_none(cls, v: Any) -> Any:
        return v if isinstance(v, dict) else None

    @field_validator("message", mode="before")
    @classmethod
    def text_or_none(cls, v: Any) -> Optional[str]:
        return _text_or_none(v)

    @classmethod
    def decode(cls, body: Any) -> "UpstreamErrorBody":
        if not isinstance(body, dict):
            return cls()
        try:
            return cls.model_validate(body)
        except ValidationError:
            return cls()


class ErrorMapper:
    """Maps provider failures to standardized messages and ProviderError."""

    @staticmethod
    def serialize_body(body: Any, raw_text: str = "") -> Optional[str]:
        """Compact JSON form of a decoded body, or the raw text when undecodable."""
        if body is not None:
            try:
                return json.dumps(body, ensure_ascii=False, separators=(",", ":"))
            except (TypeError, ValueError):
                pass
        raw_text = (raw_text or "").strip()
        return raw_text or None

    @staticmethod
    def extract_error_message(
        body: Any,
        status_code: int,
        raw_text: str = "",
        use_top_level_message: bool = True
    ) -> str:
        """
        Extract a human-readable message from an upstream error body.

        Tries, in order: ``error.message``, top-level ``message`` (when
        ``use_top_level_message``), the serialized body, then ``HTTP {status}``.

        Args:
            body: Decoded JSON body, or None if it could not be decoded
            status_code: Upstream HTTP status
            raw_text: Undecoded response text
            use_top_level_message: Whether the provider's error shape includes
                a bare top-level ``message`` field

        Returns:
            str: Never empty
        """
        decoded = UpstreamErrorBody.decode(body)
        if decoded.error is not None and decoded.error.message:
            return decoded.error.message
        if use_top_level_message and decoded.message:
            return decoded.message
        return ErrorMapper.serialize_body(body, raw_text) or f"HTTP {status_code}"

    @staticmethod
    def map_transport_error(error: Exception, provider: str, timeout_env: str = "") -> ProviderError:
        """
        Map an httpx transport failure to ProviderError.

        Args:
            error: The httpx exception
            provider: Provider name
            timeout_env: Name of the timeout setting, quoted in timeout messages

        Returns:
            ProviderError (ProviderTimeoutError for httpx timeouts)
        """
        if isinstance(error, httpx.TimeoutException):
            return ProviderTimeoutError(timeout_message(timeout_env), provider=provider)
        return ProviderError(str(error) or type(error).__name__, provider=provider)

    @staticmethod
    def categorize_error(error: Exception) -> str:
        """Categorize error for logging."""
        if isinstance(error, ProviderTimeoutError):
            return 'timeout'
        status_code = getattr(error, 'status_code', None)
        if status_code:
            if status_code == 401:
                return 'authentication'
            elif status_code == 429:
                return 'rate_limit'
            elif status_code >= 500:
                return 'server_error'
            elif status_code >= 400:
                return 'client_error'
        return 'unknown'


def timeout_message(timeout_env: str) -> str:
    if timeout_env:
        return f"Request timed out ({timeout_env})"
    return "Request timed out"
