"""Logging helpers for LLM Relay."""

from .logging import ProviderLogger

__all__ = ["ProviderLogger"]
