from .anthropic import AnthropicProvider
from .base import DetectionProvider
from .huggingface import HuggingFaceProvider
from .openai import OpenAIProvider

__all__ = [
    "AnthropicProvider",
    "DetectionProvider",
    "HuggingFaceProvider",
    "OpenAIProvider",
]
