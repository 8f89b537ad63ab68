"""Core request handling shared by all providers."""

from .validation import validate_method, validate_request

__all__ = ["validate_method", "validate_request"]
