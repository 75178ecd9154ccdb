"""Booking store interface."""

from typing import Protocol

from eventdesk.core.bookings import Booking, BookingStatus, CampRegistration, StallRegistration


class BookingStore(Protocol):
    """Interface for reading bookings and registrations from any backend."""

    def fetch_bookings(self) -> list[Booking]:
        """Fetch all bookings in store order."""
        ...

    def fetch_stalls(self) -> list[StallRegistration]:
        """Fetch all stall registrations."""
        ...

    def fetch_camps(self) -> list[CampRegistration]:
        """Fetch all camp registrations."""
        ...

    def update_booking_status(self, booking_id: str, status: BookingStatus) -> Booking | None:
        """Persist a status change. Returns the updated booking, or None if the store only acknowledges it."""
        ...
