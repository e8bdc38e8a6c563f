"""Text generation helpers."""

from .base import ConfigurationError, GenerationError, GeneratorError
from .text import GeminiTextGenerator, TextGenerationInput, generate_text

__all__ = [
    "ConfigurationError",
    "GenerationError",
    "GeneratorError",
    "GeminiTextGenerator",
    "TextGenerationInput",
    "generate_text",
]
