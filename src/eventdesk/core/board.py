"""Booking working set and status transitions - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable

from .bookings import Booking, BookingNotFoundError, BookingStatus
from .stats import DashboardStats, FinancialSummary, compute_stats, group_by_date, summarize_financials


@dataclass(frozen=True)
class BookingBoard:
    """
    Immutable booking working set.

    Every transition returns a new board with a higher version. Derived
    views are memoized per board, so they are recomputed only after a
    transition.
    """

    bookings: tuple[Booking, ...] = ()
    version: int = 0
    _cache: dict = field(default_factory=dict, compare=False, repr=False)

    def _memo(self, key, compute):
        if key not in self._cache:
            self._cache[key] = compute()
        return self._cache[key]

    def stats(self, as_of: date | None = None) -> DashboardStats:
        as_of = as_of or date.today()
        return self._memo(("stats", as_of), lambda: compute_stats(self.bookings, as_of))

    def financials(self) -> FinancialSummary:
        return self._memo(("financials",), lambda: summarize_financials(self.bookings))

    def buckets(self) -> dict[str, list[Booking]]:
        return self._memo(("buckets",), lambda: group_by_date(self.bookings))

    def get(self, booking_id: str) -> Booking:
        for b in self.bookings:
            if b.id == booking_id:
                return b
        raise BookingNotFoundError(booking_id)


def load_bookings(board: BookingBoard, bookings: Iterable[Booking]) -> BookingBoard:
    """Replace the working set with freshly fetched bookings."""
    return BookingBoard(bookings=tuple(bookings), version=board.version + 1)


def apply_status_change(
    board: BookingBoard,
    booking_id: str,
    status: BookingStatus | str,
) -> BookingBoard:
    """
    Set one booking's status.

    Raises InvalidStatusError for values outside BookingStatus and
    BookingNotFoundError for unknown ids. Order of bookings is preserved.
    """
    new_status = BookingStatus.parse(status)
    target = board.get(booking_id)
    updated = target.with_status(new_status)
    return BookingBoard(
        bookings=tuple(updated if b.id == booking_id else b for b in board.bookings),
        version=board.version + 1,
    )
