"""In-memory booking store seeded with demo data."""

import copy
import logging

from eventdesk.core.bookings import (
    Booking,
    BookingStatus,
    CampRegistration,
    StallRegistration,
    find_booking,
)

logger = logging.getLogger(__name__)

DEMO_BOOKINGS = [
    {"id": "b1", "clientName": "Alice Johnson", "eventType": "Birthday Party", "date": "2024-06-01", "guests": 25, "payment": 500, "status": "Confirmed"},
    {"id": "b2", "clientName": "Brian Smith", "eventType": "Wedding Reception", "date": "2024-06-02", "guests": 120, "payment": 0, "status": "Pending"},
    {"id": "b3", "clientName": "Carla Gomez", "eventType": "Corporate Retreat", "date": "2024-06-15", "guests": 60, "payment": 3200, "status": "Completed"},
    {"id": "b4", "clientName": "David Lee", "eventType": "Anniversary Dinner", "date": "2024-06-15", "guests": 12, "payment": 450, "status": "Cancelled"},
    {"id": "b5", "clientName": "Emma Brown", "eventType": "Baby Shower", "date": "2024-07-04", "guests": 30, "payment": 750, "status": "Confirmed"},
    {"id": "b6", "clientName": "Frank Miller", "eventType": "Graduation Party", "date": "2024-07-20", "guests": 45, "payment": 0, "status": "Pending"},
]

DEMO_STALLS = [
    {"id": "s1", "vendorName": "Sweet Treats Bakery", "stallSize": "Medium", "paymentStatus": "Paid"},
    {"id": "s2", "vendorName": "Handmade Crafts Co.", "stallSize": "Small", "paymentStatus": "Unpaid"},
    {"id": "s3", "vendorName": "Street Tacos", "stallSize": "Large", "paymentStatus": "Paid"},
]

DEMO_CAMPS = [
    {"id": "c1", "childName": "Liam Carter", "age": 9, "paymentStatus": "Paid"},
    {"id": "c2", "childName": "Mia Wong", "age": 11, "paymentStatus": "Unpaid"},
]


class InMemoryBookingStore:
    """
    In-memory booking store.

    Implements BookingStore protocol. Records live only as long as the
    process; each instance starts from its own copy of the seed data.
    """

    def __init__(
        self,
        bookings: list[dict] | None = None,
        stalls: list[dict] | None = None,
        camps: list[dict] | None = None,
    ):
        self._bookings = [Booking.from_api(d) for d in copy.deepcopy(bookings if bookings is not None else DEMO_BOOKINGS)]
        self._stalls = [StallRegistration.from_api(d) for d in (stalls if stalls is not None else DEMO_STALLS)]
        self._camps = [CampRegistration.from_api(d) for d in (camps if camps is not None else DEMO_CAMPS)]

    def fetch_bookings(self) -> list[Booking]:
        return list(self._bookings)

    def fetch_stalls(self) -> list[StallRegistration]:
        return list(self._stalls)

    def fetch_camps(self) -> list[CampRegistration]:
        return list(self._camps)

    def update_booking_status(self, booking_id: str, status: BookingStatus) -> Booking:
        """Replace the stored booking with one carrying the new status."""
        updated = find_booking(self._bookings, booking_id).with_status(status)
        self._bookings = [updated if b.id == booking_id else b for b in self._bookings]
        logger.debug(f"Booking {booking_id} set to {updated.status.value}")
        return updated
