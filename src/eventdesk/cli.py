"""eventdesk CLI - Event Booking Admin Console."""

import json
import logging
import sys
from datetime import date

import click
import requests

from .config import Config, load_config
from .core.board import BookingBoard, load_bookings
from .core.bookings import Booking, BookingNotFoundError, BookingStatus
from .core.calendar import bind_bookings, build_month_grid, navigate_month
from .core.display import (
    format_booking_line,
    format_currency,
    format_status,
    format_transaction_line,
    render_month,
)
from .core.stats import count_by_status, recent_bookings
from .ideas import is_error
from .workflows import change_booking_status, get_idea_generator, get_store, load_registrations


def _booking_json(b: Booking) -> dict:
    return {
        "id": b.id,
        "client": b.client_name,
        "event_type": b.event_type,
        "date": b.date.isoformat(),
        "guests": b.guests,
        "payment": str(b.payment),
        "status": b.status.value,
    }


def _load_board() -> tuple[BookingBoard, Config]:
    config = load_config()
    try:
        store = get_store(config)
        board = load_bookings(BookingBoard(), store.fetch_bookings())
    except (RuntimeError, OSError, ValueError, requests.RequestException) as e:
        click.echo(f"Error: failed to load bookings: {e}", err=True)
        sys.exit(1)
    return board, config


@click.group()
@click.version_option(package_name="eventdesk")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """eventdesk - Event Booking Admin Console."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if verbose else logging.WARNING,
    )


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--as-of", type=click.DateTime(formats=["%Y-%m-%d"]), help="Reference date for upcoming events")
def dashboard(as_json: bool, as_of):
    """Show summary stats and recent bookings."""
    board, config = _load_board()
    today = as_of.date() if as_of else date.today()
    stats = board.stats(today)
    recent = recent_bookings(board.bookings, config.recent_bookings_limit)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "total_revenue": str(stats.total_revenue),
                    "total_bookings": stats.total_bookings,
                    "upcoming_events": stats.upcoming_events,
                    "pending_requests": stats.pending_requests,
                    "recent_bookings": [_booking_json(b) for b in recent],
                },
                indent=2,
            )
        )
        return

    click.echo(f"Total Revenue:    {format_currency(stats.total_revenue, config.currency_symbol)}")
    click.echo(f"Total Bookings:   {stats.total_bookings}")
    click.echo(f"Upcoming Events:  {stats.upcoming_events}")
    click.echo(f"Pending Requests: {stats.pending_requests}")
    click.echo()
    click.echo("### Recent Bookings")
    if not recent:
        click.echo("No bookings yet.")
    for b in recent:
        click.echo(f"  {b.client_name:<20} {b.date.isoformat()}  {format_status(b)}")


@main.command()
@click.option("--month", "month_str", help="Month to show as YYYY-MM (default: current month)")
@click.option("--offset", type=int, default=0, help="Months to move forward (+) or back (-)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def calendar(month_str: str | None, offset: int, as_json: bool):
    """Show a month grid with the bookings on each day."""
    if month_str:
        try:
            year_s, _, month_s = month_str.partition("-")
            year, month = int(year_s), int(month_s)
            navigate_month(year, month, 0)
        except ValueError:
            click.echo(f"Error: invalid month {month_str!r}, expected YYYY-MM", err=True)
            sys.exit(1)
    else:
        today = date.today()
        year, month = today.year, today.month
    year, month = navigate_month(year, month, offset)

    board, config = _load_board()
    grid = build_month_grid(year, month, config.week_start)
    cells = bind_bookings(grid, board.buckets())

    if as_json:
        click.echo(
            json.dumps(
                {
                    "year": grid.year,
                    "month": grid.month,
                    "first_weekday": grid.first_weekday,
                    "days_in_month": grid.days_in_month,
                    "cells": [
                        None
                        if c.is_blank
                        else {"date": c.day.isoformat(), "bookings": [_booking_json(b) for b in c.bookings]}
                        for c in cells
                    ],
                },
                indent=2,
            )
        )
        return

    click.echo(render_month(grid, cells, config.week_start))


@main.command()
@click.option("--status", "status_filter", type=click.Choice([s.value for s in BookingStatus]), help="Only show this status")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def bookings(status_filter: str | None, as_json: bool):
    """List all bookings."""
    board, _ = _load_board()
    rows = list(board.bookings)
    if status_filter:
        rows = [b for b in rows if b.status.value == status_filter]

    if as_json:
        click.echo(json.dumps([_booking_json(b) for b in rows], indent=2))
        return

    if not rows:
        click.echo("No bookings.")
        return

    for b in rows:
        click.echo(format_booking_line(b))
    click.echo()
    counts = count_by_status(board.bookings)
    click.echo("  ".join(f"{s.value}: {n}" for s, n in counts.items()))


@main.command("set-status")
@click.argument("booking_id")
@click.argument("status", type=click.Choice([s.value for s in BookingStatus]))
def set_status(booking_id: str, status: str):
    """Change a booking's status."""
    config = load_config()
    try:
        updated = change_booking_status(get_store(config), booking_id, status)
    except (BookingNotFoundError, RuntimeError, OSError, ValueError, requests.RequestException) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(f"{updated.id} ({updated.client_name}) is now {updated.status.value}")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def registrations(as_json: bool):
    """List stall and summer camp registrations."""
    config = load_config()
    try:
        stalls, camps = load_registrations(get_store(config))
    except (RuntimeError, OSError, ValueError, requests.RequestException) as e:
        click.echo(f"Error: failed to load registrations: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(
            json.dumps(
                {"stalls": [s.to_api() for s in stalls], "camps": [c.to_api() for c in camps]},
                indent=2,
            )
        )
        return

    click.echo("### Stall Registrations")
    for s in stalls:
        click.echo(f"  {s.vendor_name:<24} {s.stall_size:<8} {s.payment_status.value}")
    if not stalls:
        click.echo("  None")
    click.echo()
    click.echo("### Summer Camp Registrations")
    for c in camps:
        click.echo(f"  {c.child_name:<24} {c.age:<8} {c.payment_status.value}")
    if not camps:
        click.echo("  None")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def financials(as_json: bool):
    """Show confirmed/completed revenue and transaction history."""
    board, config = _load_board()
    summary = board.financials()

    if as_json:
        click.echo(
            json.dumps(
                {
                    "total_revenue": str(summary.total_revenue),
                    "transactions": [_booking_json(b) for b in summary.transactions],
                },
                indent=2,
            )
        )
        return

    click.echo(
        f"Total Confirmed/Completed Revenue: {format_currency(summary.total_revenue, config.currency_symbol)}"
    )
    click.echo()
    click.echo("### Transaction History")
    if not summary.transactions:
        click.echo("No transactions.")
    for b in summary.transactions:
        click.echo(format_transaction_line(b, config.currency_symbol))


@main.command()
@click.argument("theme", nargs=-1)
def ideas(theme: tuple[str, ...]):
    """Generate event ideas for a theme, e.g. "Tropical Luau"."""
    config = load_config()
    generator = get_idea_generator(config)
    result = generator.generate(" ".join(theme))
    if is_error(result):
        click.echo(result, err=True)
        sys.exit(1)
    click.echo("Here are a few ideas:")
    click.echo(result.strip())


if __name__ == "__main__":
    main()
