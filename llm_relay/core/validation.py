"""
Request validation shared by every provider.

The checks here run before any upstream call. They never modify their input;
a valid body is repackaged into a ``RelayRequest``.
"""

from typing import Any

from pydantic import ValidationError

from ..models.generation import RelayRequest
from ..providers.base import InvalidRequest, MethodNotAllowed

ALLOWED_METHOD = "POST"
BAD_REQUEST_MESSAGE = "Bad Request: messages must be a non-empty array"


def validate_method(method: str) -> None:
    """Reject anything but POST. Runs before the body is read."""
    if (method or "").upper() != ALLOWED_METHOD:
        raise MethodNotAllowed("Method Not Allowed")


def validate_request(body: Any) -> RelayRequest:
    """
    Validate a decoded request body.

    Args:
        body: Decoded JSON body (anything; non-objects are treated as empty)

    Returns:
        RelayRequest with the messages in their original order and ``meta``
        untouched

    Raises:
        InvalidRequest: ``messages`` is missing, not a list, empty, or holds
            an entry that is not a ``{role, content}`` message
    """
    if not isinstance(body, dict):
        body = {}

    messages = body.get("messages")
    if not isinstance(messages, list) or len(messages) < 1:
        raise InvalidRequest(BAD_REQUEST_MESSAGE)

    try:
        return RelayRequest.model_validate({"messages": messages, "meta": body.get("meta")})
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        raise InvalidRequest(f"Bad Request: {location}: {first.get('msg')}") from e
