"""Shared fixtures."""

from datetime import date
from decimal import Decimal

import pytest

from eventdesk.core.bookings import Booking, BookingStatus


@pytest.fixture
def make_booking():
    """Factory for creating bookings."""
    def _make(
        id: str,
        status: BookingStatus = BookingStatus.PENDING,
        payment: int | str = 0,
        day: date = date(2024, 6, 1),
        guests: int = 10,
        client_name: str = "Client",
        event_type: str = "Party",
    ) -> Booking:
        return Booking(
            id=id,
            client_name=client_name,
            event_type=event_type,
            date=day,
            guests=guests,
            payment=Decimal(str(payment)),
            status=status,
        )
    return _make


@pytest.fixture
def sample_bookings(make_booking):
    return [
        make_booking("b1", BookingStatus.CONFIRMED, 500, date(2024, 6, 1)),
        make_booking("b2", BookingStatus.PENDING, 0, date(2024, 6, 2)),
        make_booking("b3", BookingStatus.COMPLETED, 3200, date(2024, 6, 15)),
        make_booking("b4", BookingStatus.CANCELLED, 450, date(2024, 6, 15)),
        make_booking("b5", BookingStatus.CONFIRMED, 750, date(2024, 7, 4)),
        make_booking("b6", BookingStatus.CONFIRMED, 100, date(2024, 5, 20)),
    ]
