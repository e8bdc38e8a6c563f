"""
Text generation using the Google Gemini API.
"""

import os

from google import genai
from pydantic import BaseModel, Field

from ..config import settings
from ..logging import get_logger
from .base import ConfigurationError, GenerationError

logger = get_logger(__name__)

API_KEY_ENV_VAR = "GEMINI_API_KEY"


class TextGenerationInput(BaseModel):
    """Input schema for text generation."""

    prompt: str = Field(min_length=1, description="Prompt sent to the model")


async def generate_text(
    prompt: str,
    *,
    model: str | None = None,
    api_key: str | None = None,
) -> str:
    """
    Send a prompt to Gemini and return the generated text.

    Args:
        prompt: Prompt text
        model: Model name (defaults to the configured gemini_model)
        api_key: API key (defaults to the GEMINI_API_KEY environment variable)

    Returns:
        Generated text

    Raises:
        ConfigurationError: If no API key is available
        GenerationError: If the API call fails or returns no text
    """
    api_key = api_key or os.getenv(API_KEY_ENV_VAR)
    if not api_key:
        raise ConfigurationError("API key is not set in environment variables")

    target_model = model or settings.gemini_model
    client = genai.Client(api_key=api_key)

    logger.debug("Gemini generate request", model=target_model, prompt_length=len(prompt))
    try:
        response = await client.aio.models.generate_content(
            model=target_model,
            contents=prompt,
        )
    except Exception as e:
        logger.error("Error generating text", model=target_model, error=str(e))
        raise GenerationError(f"Text generation failed: {e}") from e
    finally:
        await client.aio.aclose()

    if not response.text:
        logger.error("Gemini returned no text", model=target_model)
        raise GenerationError("No text generated")

    return response.text


class GeminiTextGenerator:
    """Gemini text generator bound to one model."""

    name = "gemini-text"
    description = "Google: Gemini - text generation from a prompt"

    def __init__(self, model: str | None = None):
        self.model = model or settings.gemini_model

    def get_input_schema(self) -> type[TextGenerationInput]:
        return TextGenerationInput

    async def generate(self, inputs: TextGenerationInput) -> str:
        return await generate_text(inputs.prompt, model=self.model)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(name='{self.name}', model='{self.model}')>"
