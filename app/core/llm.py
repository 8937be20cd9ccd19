"""
Language Model (LLM) client configuration.

This module provides:
- The GenAI SDK client, created once per process
- GeminiTextGenerator, the single text-completion call used by the generation endpoint
"""
import asyncio
import logging
from functools import lru_cache
from typing import Optional

from google import genai

from app.core.config import settings
from app.core.exceptions import ConfigurationError
from app.core.logger import log_async_execution_time

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_genai_client() -> genai.Client:
    """Get the GenAI SDK client instance. Fails fast if the key is missing."""
    if not settings.GEMINI_API_KEY:
        raise ConfigurationError("GEMINI_API_KEY is not configured")
    try:
        return genai.Client(api_key=settings.GEMINI_API_KEY)
    except Exception as e:
        logger.error(f"Failed to initialize GenAI client: {e}")
        raise


class GeminiTextGenerator:
    """
    Text-completion client over Gemini.

    The call is awaited without timeout or retry: a slow upstream stalls the
    request for its full duration.
    """

    def __init__(self, client: Optional[genai.Client] = None, model: Optional[str] = None):
        self._client = client
        self.model = model or settings.GEMINI_MODEL

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            self._client = get_genai_client()
        return self._client

    @log_async_execution_time
    async def generate_text(self, prompt: str) -> str:
        # The SDK call is synchronous; keep it off the event loop
        response = await asyncio.to_thread(
            self.client.models.generate_content,
            model=self.model,
            contents=prompt,
        )
        text = response.text or ""
        logger.debug(f"Gemini response preview: {text[:200]}")
        return text
