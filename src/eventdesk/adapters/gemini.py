"""Gemini adapter - Google generative text API."""

import logging

from google import genai
from google.genai import types

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"


class GeminiService:
    """
    Gemini API adapter.

    Implements TextGenerationService protocol. One request per call; no
    retry, no streaming.
    """

    def __init__(self, api_key: str, model: str = DEFAULT_MODEL):
        self.model = model
        self._client = genai.Client(api_key=api_key)

    def generate(
        self,
        prompt: str,
        *,
        system_instruction: str | None = None,
        temperature: float | None = None,
        top_k: int | None = None,
    ) -> str:
        """Generate text from a prompt. Returns complete response."""
        logger.debug(f"Calling {self.model} ({len(prompt)} chars)")
        response = self._client.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                system_instruction=system_instruction,
                temperature=temperature,
                top_k=top_k,
            ),
        )
        return response.text or ""
