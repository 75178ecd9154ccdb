"""Adapters - I/O implementations of ports."""

from .memory_store import InMemoryBookingStore
from .file_store import FileBookingStore
from .http_store import HttpBookingStore
from .gemini import GeminiService

__all__ = [
    "InMemoryBookingStore",
    "FileBookingStore",
    "HttpBookingStore",
    "GeminiService",
]
