"""Pure text formatting for console output - no I/O dependencies."""

from decimal import Decimal

from .bookings import Booking, status_style
from .calendar import DayCell, MonthGrid, month_label, weekday_headers


def format_currency(amount: Decimal | int | float, symbol: str = "$") -> str:
    """
    Format an amount with thousands separators.

    Whole amounts drop the cents: 1500 -> "$1,500", 99.5 -> "$99.50".
    """
    amount = Decimal(str(amount))
    if amount == amount.to_integral_value():
        return f"{symbol}{amount:,.0f}"
    return f"{symbol}{amount:,.2f}"


def format_status(booking: Booking) -> str:
    style = status_style(booking.status)
    return f"[{style.marker}] {style.label}"


def format_booking_line(booking: Booking) -> str:
    """
    Format a single booking for display.

    Pure function - no I/O.
    """
    return (
        f"{booking.id:<6} {booking.date.isoformat()}  {booking.client_name:<20} "
        f"{booking.event_type:<18} {booking.guests:>4}  {format_status(booking)}"
    )


def format_transaction_line(booking: Booking, symbol: str = "$") -> str:
    return (
        f"{booking.id:<6} {booking.client_name:<20} {booking.event_type:<18} "
        f"{booking.date.isoformat()}  {format_currency(booking.payment, symbol):>12}"
    )


def render_month(grid: MonthGrid, cells: list[DayCell], week_start: int) -> str:
    """
    Render a month as a text grid with per-day booking lines underneath.

    Blank cells print as empty columns.
    """
    lines = [month_label(grid.year, grid.month).center(7 * 5 - 1)]
    lines.append(" ".join(f"{h:>4}" for h in weekday_headers(week_start)))
    for week in grid.weeks():
        lines.append(" ".join(f"{d.day:>4}" if d else "    " for d in week))

    booked = [c for c in cells if c.bookings]
    if booked:
        lines.append("")
    for cell in booked:
        lines.append(f"{cell.day.strftime('%a %d')}:")
        for b in cell.bookings:
            lines.append(f"  {status_style(b.status).marker} {b.event_type} ({b.client_name})")
    return "\n".join(lines)
