"""Shared workflow layer between the CLI and the adapters.

Resolves adapters from config and runs the async session for one-shot
commands.
"""

import asyncio
from pathlib import Path

from .adapters.file_store import FileBookingStore
from .adapters.gemini import GeminiService
from .adapters.http_store import HttpBookingStore
from .adapters.memory_store import InMemoryBookingStore
from .config import DATA_DIR, Config
from .core.bookings import Booking, BookingStatus, CampRegistration, StallRegistration
from .ideas import EventIdeaGenerator
from .ports.booking_store import BookingStore
from .session import BookingSession, fetch_registrations


def get_store(config: Config) -> BookingStore:
    """Resolve the booking store backend from config."""
    match config.store_backend:
        case "http":
            if not config.store_url:
                raise RuntimeError("STORE_URL must be set when STORE_BACKEND is http")
            return HttpBookingStore(config.store_url, token=config.store_token)
        case "file":
            if config.store_file:
                return FileBookingStore(Path(config.store_file).expanduser())
            return FileBookingStore(DATA_DIR / "bookings.json")
        case _:
            return InMemoryBookingStore()


def get_idea_generator(config: Config) -> EventIdeaGenerator:
    """Build the idea generator; without an API key it only returns sentinels."""
    if not config.gemini_api_key:
        return EventIdeaGenerator(None)
    return EventIdeaGenerator(GeminiService(config.gemini_api_key, model=config.gemini_model))


def change_booking_status(store: BookingStore, booking_id: str, status: BookingStatus | str) -> Booking:
    """
    Load bookings, apply a status change and wait for it to persist.

    Raises RuntimeError if the store rejected the change.
    """

    async def _run() -> Booking:
        session = BookingSession(store)
        await session.refresh()
        await session.change_status(booking_id, status)
        if session.failed_updates:
            failed = session.failed_updates[0]
            raise RuntimeError(f"Status change was not saved: {failed.error}")
        return session.board.get(booking_id)

    return asyncio.run(_run())


def load_registrations(store: BookingStore) -> tuple[list[StallRegistration], list[CampRegistration]]:
    """Fetch stall and camp registrations."""
    return asyncio.run(fetch_registrations(store))
