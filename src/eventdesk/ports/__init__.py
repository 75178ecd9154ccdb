"""Ports - interfaces/protocols for external dependencies."""

from .booking_store import BookingStore
from .text_generation import TextGenerationService

__all__ = [
    "BookingStore",
    "TextGenerationService",
]
