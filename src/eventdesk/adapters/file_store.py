"""File-based booking store adapter."""

import json
import logging
from pathlib import Path

from eventdesk.core.bookings import (
    Booking,
    BookingStatus,
    CampRegistration,
    StallRegistration,
    find_booking,
)

from .memory_store import DEMO_BOOKINGS, DEMO_CAMPS, DEMO_STALLS

logger = logging.getLogger(__name__)


class FileBookingStore:
    """
    JSON file booking store.

    Implements BookingStore protocol. All records live in a single JSON
    document with "bookings", "stalls" and "camps" lists. A missing file is
    created from the demo data on first use.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def _read(self) -> dict:
        if not self.path.exists():
            logger.info(f"Seeding booking store at {self.path}")
            data = {"bookings": DEMO_BOOKINGS, "stalls": DEMO_STALLS, "camps": DEMO_CAMPS}
            self._write(data)
            return data
        return json.loads(self.path.read_text())

    def _write(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2))

    def fetch_bookings(self) -> list[Booking]:
        return [Booking.from_api(d) for d in self._read().get("bookings", [])]

    def fetch_stalls(self) -> list[StallRegistration]:
        return [StallRegistration.from_api(d) for d in self._read().get("stalls", [])]

    def fetch_camps(self) -> list[CampRegistration]:
        return [CampRegistration.from_api(d) for d in self._read().get("camps", [])]

    def update_booking_status(self, booking_id: str, status: BookingStatus) -> Booking:
        """Rewrite the file with the booking's new status."""
        data = self._read()
        bookings = [Booking.from_api(d) for d in data.get("bookings", [])]
        updated = find_booking(bookings, booking_id).with_status(status)
        data["bookings"] = [(updated if b.id == booking_id else b).to_api() for b in bookings]
        self._write(data)
        return updated
