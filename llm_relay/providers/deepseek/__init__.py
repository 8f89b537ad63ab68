from .adapter import DeepSeekProvider

__all__ = ["DeepSeekProvider"]
