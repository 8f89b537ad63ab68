from .adapter import OpenAIResponsesProvider

__all__ = ["OpenAIResponsesProvider"]
