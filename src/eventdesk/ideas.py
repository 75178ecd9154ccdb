"""Event idea generation - sentinel-string wrapper around a text model.

Nothing raised by the model crosses this boundary: failures come back as
text starting with ERROR_PREFIX.
"""

import logging

from .ports.text_generation import TextGenerationService

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error:"

SYSTEM_INSTRUCTION = "You are a creative event planner assistant. Provide concise and inspiring ideas."

PROMPT_TEMPLATE = (
    'Generate 3 creative and brief event ideas for the following theme: "{theme}". '
    "Focus on decorations, activities, and a unique food idea. "
    "Format the response as a simple list."
)

TEMPERATURE = 0.8
TOP_K = 40

EMPTY_THEME_MESSAGE = f"{ERROR_PREFIX} Please enter an event theme."
MISSING_KEY_MESSAGE = (
    f"{ERROR_PREFIX} API key is not configured. Please set the GEMINI_API_KEY environment variable."
)
UNKNOWN_FAILURE_MESSAGE = f"{ERROR_PREFIX} An unknown error occurred while generating ideas."


def is_error(text: str) -> bool:
    """True if text is an error sentinel rather than generated ideas."""
    return text.startswith(ERROR_PREFIX)


def build_prompt(theme: str) -> str:
    return PROMPT_TEMPLATE.format(theme=theme.strip())


class EventIdeaGenerator:
    """
    Generates event ideas for a theme.

    service is None when no API credential is configured; generate() then
    returns MISSING_KEY_MESSAGE without calling out.
    """

    def __init__(self, service: TextGenerationService | None):
        self.service = service
        if service is None:
            logger.warning("Gemini API key not set. Event idea generation will fail.")

    def generate(self, theme: str) -> str:
        """Return generated ideas, or an error sentinel string."""
        if not theme or not theme.strip():
            return EMPTY_THEME_MESSAGE

        if self.service is None:
            return MISSING_KEY_MESSAGE

        try:
            return self.service.generate(
                build_prompt(theme),
                system_instruction=SYSTEM_INSTRUCTION,
                temperature=TEMPERATURE,
                top_k=TOP_K,
            )
        except Exception as e:
            logger.error(f"Error generating event ideas: {e}")
            message = str(e)
            if message:
                return f"{ERROR_PREFIX} An error occurred while generating ideas: {message}"
            return UNKNOWN_FAILURE_MESSAGE
