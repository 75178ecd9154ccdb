"""Functional core - pure business logic with no I/O."""

from .bookings import (
    Booking,
    BookingNotFoundError,
    BookingStatus,
    CampRegistration,
    InvalidStatusError,
    PaymentStatus,
    StallRegistration,
    status_style,
)
from .stats import DashboardStats, FinancialSummary, compute_stats, group_by_date, summarize_financials
from .calendar import MonthGrid, DayCell, build_month_grid, bind_bookings, navigate_month
from .board import BookingBoard, apply_status_change, load_bookings

__all__ = [
    # Bookings
    "Booking",
    "BookingNotFoundError",
    "BookingStatus",
    "CampRegistration",
    "InvalidStatusError",
    "PaymentStatus",
    "StallRegistration",
    "status_style",
    # Aggregation
    "DashboardStats",
    "FinancialSummary",
    "compute_stats",
    "group_by_date",
    "summarize_financials",
    # Calendar
    "MonthGrid",
    "DayCell",
    "build_month_grid",
    "bind_bookings",
    "navigate_month",
    # Working set
    "BookingBoard",
    "apply_status_change",
    "load_bookings",
]
