"""
Base Provider Adapter Interface

This module defines the abstract base class for the relay's provider adapters
and the error hierarchy they raise. Every failure an adapter can produce is a
``ProviderError`` carrying the HTTP status the caller should see.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..config.settings import ProviderSettings
from ..models.generation import NormalizedResponse, RelayRequest


class ProviderAdapter(ABC):
    """
    Abstract base class for LLM provider adapters.

    The adapter is responsible for:
    - Translating a ``RelayRequest`` into the provider's request body
    - Making exactly one API call, bounded by the configured timeout
    - Surfacing upstream HTTP errors with the upstream status code
    - Flattening the provider's response into a ``NormalizedResponse``

    Adapters hold no mutable state between invocations; concurrent calls
    on the same instance are independent.
    """

    settings: ProviderSettings

    @abstractmethod
    async def generate(self, request: RelayRequest) -> NormalizedResponse:
        """
        Forward a request to the provider and normalize its reply.

        Args:
            request: Validated request (non-empty messages plus opaque meta)

        Returns:
            NormalizedResponse with non-empty ``content``, the caller's
            ``meta``, the provider id and the model that served the request.

        Raises:
            ConfigurationError: The provider API key is not configured
            ProviderTimeoutError: The upstream did not answer in time
            UpstreamError: The upstream answered with a non-success status
            EmptyUpstreamContent: The upstream answered without usable text
            ProviderError: Transport failures
        """
        pass

    def is_available(self) -> bool:
        """Check if the provider API key is configured."""
        return bool(self.settings.api_key)

    def require_api_key(self) -> str:
        """Return the API key or raise ``ConfigurationError`` naming the missing variable."""
        api_key = self.settings.api_key
        if not api_key:
            raise ConfigurationError(
                f"Server misconfigured: {self.settings.api_key_env} is missing",
                provider=self.get_provider_name()
            )
        return api_key

    def get_provider_name(self) -> str:
        """
        Get the name of this provider.

        By default, returns the class name without 'Provider' suffix.
        """
        class_name = self.__class__.__name__
        if class_name.endswith("Provider"):
            return class_name[:-8].lower()
        return class_name.lower()


class ProviderError(Exception):
    """
    Base exception for relay failures.

    Attributes:
        message: Error message shown to the caller
        provider: Provider name, when the failure is tied to one
        status_code: HTTP status the caller should receive
    """

    default_status_code = 500

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        status_code: Optional[int] = None
    ):
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.status_code = status_code if status_code is not None else self.default_status_code


class InvalidRequest(ProviderError):
    """Malformed request from the caller. No upstream call is made."""
    default_status_code = 400


class MethodNotAllowed(InvalidRequest):
    """Invocation with an HTTP method other than POST."""
    default_status_code = 405


class ConfigurationError(ProviderError):
    """Operator misconfiguration, such as a missing API key."""


class ProviderTimeoutError(ProviderError):
    """The upstream call did not complete before the configured timeout."""


class UpstreamError(ProviderError):
    """The provider rejected or failed the call; status mirrors the provider's."""


class EmptyUpstreamContent(ProviderError):
    """The provider accepted the call but returned no usable text."""
