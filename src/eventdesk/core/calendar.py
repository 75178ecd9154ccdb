"""Pure calendar binning logic - no I/O dependencies."""

import calendar
from dataclasses import dataclass, field
from datetime import date

from .bookings import Booking

# Weeks start on Sunday unless configured otherwise
DEFAULT_WEEK_START = calendar.SUNDAY


@dataclass(frozen=True)
class MonthGrid:
    """Padded sequence of calendar cells for one month."""

    year: int
    month: int
    first_weekday: int
    days_in_month: int
    cells: list[date | None]

    def days(self) -> list[date]:
        """Non-empty cells only."""
        return [c for c in self.cells if c is not None]

    def weeks(self) -> list[list[date | None]]:
        """Split cells into rows of 7, padding the last row with None."""
        rows = []
        for i in range(0, len(self.cells), 7):
            row = self.cells[i : i + 7]
            rows.append(row + [None] * (7 - len(row)))
        return rows


@dataclass(frozen=True)
class DayCell:
    """A grid cell with the bookings on that day."""

    day: date | None
    bookings: list[Booking] = field(default_factory=list)

    @property
    def is_blank(self) -> bool:
        return self.day is None


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be in 1..12, got {month}")


def navigate_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """
    Shift (year, month) by delta months, carrying across year boundaries.

    Months are 1-based. navigate_month(2024, 1, -1) == (2023, 12).
    """
    _check_month(month)
    index = year * 12 + (month - 1) + delta
    new_year, new_month0 = divmod(index, 12)
    return new_year, new_month0 + 1


def first_weekday_of_month(year: int, month: int, week_start: int = DEFAULT_WEEK_START) -> int:
    """Column index (0 = first day of the week) of day 1."""
    _check_month(month)
    return (date(year, month, 1).weekday() - week_start) % 7


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month, leap years included."""
    _check_month(month)
    return calendar.monthrange(year, month)[1]


def build_month_grid(year: int, month: int, week_start: int = DEFAULT_WEEK_START) -> MonthGrid:
    """
    Compute the month grid: leading blanks, then days 1..N.

    Pure function - no I/O.
    """
    blanks = first_weekday_of_month(year, month, week_start)
    n_days = days_in_month(year, month)
    cells: list[date | None] = [None] * blanks
    cells.extend(date(year, month, d) for d in range(1, n_days + 1))
    return MonthGrid(
        year=year,
        month=month,
        first_weekday=blanks,
        days_in_month=n_days,
        cells=cells,
    )


def bookings_on(buckets: dict[str, list[Booking]], day: date) -> list[Booking]:
    """Bookings in the bucket for a day. Missing buckets yield []."""
    return list(buckets.get(day.isoformat(), []))


def bind_bookings(grid: MonthGrid, buckets: dict[str, list[Booking]]) -> list[DayCell]:
    """Pair every grid cell with its bookings."""
    return [
        DayCell(day=cell, bookings=bookings_on(buckets, cell) if cell else [])
        for cell in grid.cells
    ]


def month_label(year: int, month: int) -> str:
    """Display title such as 'June 2024'."""
    _check_month(month)
    return f"{calendar.month_name[month]} {year}"


def weekday_headers(week_start: int = DEFAULT_WEEK_START) -> list[str]:
    """Abbreviated weekday names in column order."""
    return [calendar.day_abbr[(week_start + i) % 7] for i in range(7)]
