"""Pure booking aggregation logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable

from .bookings import Booking, BookingStatus


@dataclass(frozen=True)
class DashboardStats:
    """Summary figures shown on the dashboard."""

    total_revenue: Decimal
    pending_requests: int
    upcoming_events: int
    total_bookings: int


@dataclass(frozen=True)
class FinancialSummary:
    """Revenue-bearing bookings and their total."""

    transactions: list[Booking]
    total_revenue: Decimal


def revenue_bookings(bookings: Iterable[Booking]) -> list[Booking]:
    """
    Filter to Completed or Confirmed bookings, preserving order.

    Pure function - no I/O.
    """
    return [b for b in bookings if b.is_revenue()]


def total_payment(bookings: Iterable[Booking]) -> Decimal:
    """Sum of payments."""
    return sum((b.payment for b in bookings), Decimal(0))


def compute_stats(bookings: Iterable[Booking], as_of: date | None = None) -> DashboardStats:
    """
    Derive dashboard statistics from a booking sequence.

    Pure function - no I/O. Upcoming events are Confirmed bookings dated
    on or after as_of (defaults to today).
    """
    as_of = as_of or date.today()
    bookings = list(bookings)

    return DashboardStats(
        total_revenue=total_payment(revenue_bookings(bookings)),
        pending_requests=sum(1 for b in bookings if b.status is BookingStatus.PENDING),
        upcoming_events=sum(
            1 for b in bookings if b.status is BookingStatus.CONFIRMED and b.date >= as_of
        ),
        total_bookings=len(bookings),
    )


def summarize_financials(bookings: Iterable[Booking]) -> FinancialSummary:
    """
    Build the transaction history and its revenue total.

    The total is summed over exactly the listed transactions.
    """
    transactions = revenue_bookings(bookings)
    return FinancialSummary(transactions=transactions, total_revenue=total_payment(transactions))


def group_by_date(bookings: Iterable[Booking]) -> dict[str, list[Booking]]:
    """
    Bucket bookings by ISO day string.

    Pure function - no I/O. Order within a bucket follows source order.
    """
    buckets: dict[str, list[Booking]] = {}
    for b in bookings:
        buckets.setdefault(b.day_key, []).append(b)
    return buckets


def recent_bookings(bookings: Iterable[Booking], limit: int = 5) -> list[Booking]:
    """First N bookings in source order. A limit below 1 yields none."""
    return list(bookings)[: max(limit, 0)]


def count_by_status(bookings: Iterable[Booking]) -> dict[BookingStatus, int]:
    """Booking count for every status, including zero counts."""
    counts = {status: 0 for status in BookingStatus}
    for b in bookings:
        counts[b.status] += 1
    return counts
