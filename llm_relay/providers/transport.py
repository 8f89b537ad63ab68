"""
Single-shot JSON POST shared by the provider adapters.

Each call opens its own ``httpx.AsyncClient`` and closes it before returning,
so no connection state is shared between invocations. The only time bound is
the per-call deadline: it is armed just before the request is sent and
disarmed when the ``asyncio.timeout`` block exits, on every exit path.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from .base import ProviderTimeoutError
from .errors import ErrorMapper, timeout_message


@dataclass(frozen=True)
class UpstreamReply:
    """Status and body of one upstream response."""
    status_code: int
    body: Optional[Any]
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


def decode_json(response: httpx.Response) -> Optional[Any]:
    """Decode the response body as JSON; undecodable bodies yield None."""
    try:
        return response.json()
    except ValueError:
        return None


async def post_json(
    url: str,
    api_key: str,
    payload: Dict[str, Any],
    timeout_seconds: float,
    provider: str,
    timeout_env: str = "",
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> UpstreamReply:
    """
    POST ``payload`` as JSON with bearer auth, bounded by ``timeout_seconds``.

    Args:
        url: Full endpoint URL
        api_key: Bearer token
        payload: JSON request body
        timeout_seconds: Deadline for the whole call
        provider: Provider name for error attribution
        timeout_env: Setting name quoted in the timeout message
        transport: Optional httpx transport (tests inject a mock here)

    Returns:
        UpstreamReply, whatever the HTTP status

    Raises:
        ProviderTimeoutError: The deadline fired before the response arrived
        ProviderError: Connection-level failures
    """
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }
    try:
        async with httpx.AsyncClient(transport=transport, timeout=None) as client:
            async with asyncio.timeout(timeout_seconds):
                response = await client.post(url, json=payload, headers=headers)
    except TimeoutError as e:
        raise ProviderTimeoutError(timeout_message(timeout_env), provider=provider) from e
    except httpx.HTTPError as e:
        raise ErrorMapper.map_transport_error(e, provider, timeout_env) from e

    return UpstreamReply(
        status_code=response.status_code,
        body=decode_json(response),
        text=response.text,
    )
