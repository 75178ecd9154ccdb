"""Pure booking domain logic - no I/O dependencies."""

from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import assert_never


class InvalidStatusError(ValueError):
    """Raised when a value is not one of the BookingStatus values."""

    pass


class BookingNotFoundError(LookupError):
    """Raised when no booking has the requested id."""

    def __init__(self, booking_id: str):
        super().__init__(f"Booking not found: {booking_id}")
        self.booking_id = booking_id


class BookingStatus(str, Enum):
    """Lifecycle status of a booking."""

    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"

    @classmethod
    def parse(cls, value: "BookingStatus | str") -> "BookingStatus":
        """Return the status for a member or its exact string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(s.value for s in cls)
            raise InvalidStatusError(f"Invalid booking status {value!r} (expected one of: {valid})") from None


class PaymentStatus(str, Enum):
    PAID = "Paid"
    UNPAID = "Unpaid"


# Statuses whose payment counts as revenue
REVENUE_STATUSES = frozenset({BookingStatus.COMPLETED, BookingStatus.CONFIRMED})


@dataclass(frozen=True)
class Booking:
    """A reserved event engagement with a client."""

    id: str
    client_name: str
    event_type: str
    date: date
    guests: int
    payment: Decimal
    status: BookingStatus

    def __post_init__(self):
        object.__setattr__(self, "status", BookingStatus.parse(self.status))
        if not isinstance(self.payment, Decimal):
            object.__setattr__(self, "payment", Decimal(str(self.payment)))
        if self.guests < 0:
            raise ValueError(f"Booking {self.id}: guests must be non-negative")
        if self.payment < 0:
            raise ValueError(f"Booking {self.id}: payment must be non-negative")

    @property
    def day_key(self) -> str:
        """Canonical ISO day string used for date buckets."""
        return self.date.isoformat()

    def is_revenue(self) -> bool:
        return self.status in REVENUE_STATUSES

    def with_status(self, status: BookingStatus | str) -> "Booking":
        """Copy of this booking with a new status. id and date are retained."""
        return replace(self, status=BookingStatus.parse(status))

    @classmethod
    def from_api(cls, data: dict) -> "Booking":
        """Create Booking from a store record (camelCase keys)."""
        return cls(
            id=str(data["id"]),
            client_name=data.get("clientName", ""),
            event_type=data.get("eventType", ""),
            date=date.fromisoformat(data["date"].split("T")[0]),
            guests=int(data.get("guests", 0)),
            payment=Decimal(str(data.get("payment", 0))),
            status=BookingStatus.parse(data["status"]),
        )

    def to_api(self) -> dict:
        return {
            "id": self.id,
            "clientName": self.client_name,
            "eventType": self.event_type,
            "date": self.date.isoformat(),
            "guests": self.guests,
            "payment": float(self.payment) if self.payment % 1 else int(self.payment),
            "status": self.status.value,
        }


@dataclass(frozen=True)
class StallRegistration:
    """A vendor stall booked at an event."""

    id: str
    vendor_name: str
    stall_size: str
    payment_status: PaymentStatus

    @property
    def is_paid(self) -> bool:
        return self.payment_status is PaymentStatus.PAID

    @classmethod
    def from_api(cls, data: dict) -> "StallRegistration":
        return cls(
            id=str(data["id"]),
            vendor_name=data.get("vendorName", ""),
            stall_size=data.get("stallSize", ""),
            payment_status=PaymentStatus(data.get("paymentStatus", "Unpaid")),
        )

    def to_api(self) -> dict:
        return {
            "id": self.id,
            "vendorName": self.vendor_name,
            "stallSize": self.stall_size,
            "paymentStatus": self.payment_status.value,
        }


@dataclass(frozen=True)
class CampRegistration:
    """A child registered for summer camp."""

    id: str
    child_name: str
    age: int
    payment_status: PaymentStatus

    @property
    def is_paid(self) -> bool:
        return self.payment_status is PaymentStatus.PAID

    @classmethod
    def from_api(cls, data: dict) -> "CampRegistration":
        return cls(
            id=str(data["id"]),
            child_name=data.get("childName", ""),
            age=int(data.get("age", 0)),
            payment_status=PaymentStatus(data.get("paymentStatus", "Unpaid")),
        )

    def to_api(self) -> dict:
        return {
            "id": self.id,
            "childName": self.child_name,
            "age": self.age,
            "paymentStatus": self.payment_status.value,
        }


@dataclass(frozen=True)
class StatusStyle:
    """Display metadata for a booking status."""

    label: str
    color: str
    marker: str


def status_style(status: BookingStatus) -> StatusStyle:
    """
    Display metadata for a status.

    Every status must be handled here; type checkers flag a missing case
    through assert_never.
    """
    match status:
        case BookingStatus.PENDING:
            return StatusStyle(label="Pending", color="yellow", marker="?")
        case BookingStatus.CONFIRMED:
            return StatusStyle(label="Confirmed", color="blue", marker="+")
        case BookingStatus.COMPLETED:
            return StatusStyle(label="Completed", color="green", marker="*")
        case BookingStatus.CANCELLED:
            return StatusStyle(label="Cancelled", color="red", marker="x")
        case _:
            assert_never(status)


def find_booking(bookings: list[Booking], booking_id: str) -> Booking:
    """Return the booking with the given id or raise BookingNotFoundError."""
    for b in bookings:
        if b.id == booking_id:
            return b
    raise BookingNotFoundError(booking_id)
