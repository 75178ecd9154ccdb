"""Tests for console text formatting."""

import calendar
from datetime import date
from decimal import Decimal

from eventdesk.core.bookings import BookingStatus
from eventdesk.core.calendar import bind_bookings, build_month_grid
from eventdesk.core.display import (
    format_booking_line,
    format_currency,
    format_status,
    format_transaction_line,
    render_month,
)
from eventdesk.core.stats import group_by_date


class TestFormatCurrency:
    def test_whole_amount(self):
        assert format_currency(Decimal("1500")) == "$1,500"

    def test_cents(self):
        assert format_currency(Decimal("99.5")) == "$99.50"

    def test_zero(self):
        assert format_currency(0) == "$0"

    def test_symbol(self):
        assert format_currency(1234567, symbol="€") == "€1,234,567"


class TestLines:
    def test_format_status(self, make_booking):
        assert format_status(make_booking("b1", BookingStatus.CANCELLED)) == "[x] Cancelled"

    def test_booking_line(self, make_booking):
        line = format_booking_line(make_booking("b1", client_name="Alice", event_type="Gala", guests=40))
        assert "Alice" in line
        assert "Gala" in line
        assert "2024-06-01" in line
        assert "40" in line
        assert "Pending" in line

    def test_transaction_line(self, make_booking):
        line = format_transaction_line(make_booking("b1", BookingStatus.CONFIRMED, 2500))
        assert line.startswith("b1")
        assert line.endswith("$2,500")


class TestRenderMonth:
    def test_contains_title_headers_and_days(self, sample_bookings):
        grid = build_month_grid(2024, 6)
        cells = bind_bookings(grid, group_by_date(sample_bookings))
        text = render_month(grid, cells, calendar.SUNDAY)
        lines = text.splitlines()

        assert lines[0].strip() == "June 2024"
        assert lines[1].split() == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
        # First week has only Saturday the 1st
        assert lines[2].split() == ["1"]
        assert "Sat 15:" in text
        assert "Party (Client)" in text

    def test_month_without_bookings(self):
        grid = build_month_grid(2024, 2)
        text = render_month(grid, bind_bookings(grid, {}), calendar.SUNDAY)
        assert "29" in text
        assert ":" not in text
