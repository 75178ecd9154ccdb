"""Text generation service interface."""

from typing import Protocol


class TextGenerationService(Protocol):
    """Interface for a generative text model."""

    model: str

    def generate(
        self,
        prompt: str,
        *,
        system_instruction: str | None = None,
        temperature: float | None = None,
        top_k: int | None = None,
    ) -> str:
        """Generate text from a prompt. Returns complete response."""
        ...
