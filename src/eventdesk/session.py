"""Async console session - fetches, optimistic status changes, persistence."""

import asyncio
import logging
from dataclasses import dataclass

from .core.board import BookingBoard, apply_status_change, load_bookings
from .core.bookings import BookingStatus, CampRegistration, StallRegistration
from .ports.booking_store import BookingStore

logger = logging.getLogger(__name__)


class CancelToken:
    """Set by the owner of a view when its pending results are no longer wanted."""

    def __init__(self):
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class FailedUpdate:
    """A status change applied locally that the store did not accept."""

    booking_id: str
    previous: BookingStatus
    requested: BookingStatus
    error: str


class BookingSession:
    """
    Holds the booking working set for one console.

    Store calls run in worker threads; the board is only replaced on the
    event loop. There is no retry or timeout on store calls.
    """

    def __init__(self, store: BookingStore, board: BookingBoard | None = None):
        self.store = store
        self.board = board or BookingBoard()
        self.failed_updates: list[FailedUpdate] = []
        self._pending: set[asyncio.Task] = set()

    async def refresh(self, token: CancelToken | None = None) -> bool:
        """
        Fetch bookings and replace the board.

        Returns False without touching the board if token was cancelled
        while the fetch was in flight.
        """
        bookings = await asyncio.to_thread(self.store.fetch_bookings)
        if token is not None and token.cancelled:
            logger.debug("Discarding bookings fetched for a cancelled view")
            return False
        self.board = load_bookings(self.board, bookings)
        return True

    def change_status(self, booking_id: str, status: BookingStatus | str) -> asyncio.Task:
        """
        Apply a status change now and persist it in the background.

        Must be called from a running event loop. Invalid statuses and
        unknown ids raise before anything changes. The returned task never
        raises; store failures land in failed_updates.
        """
        previous = self.board.get(booking_id).status
        self.board = apply_status_change(self.board, booking_id, status)
        requested = self.board.get(booking_id).status
        task = asyncio.create_task(self._persist(booking_id, previous, requested))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _persist(self, booking_id: str, previous: BookingStatus, requested: BookingStatus) -> None:
        try:
            await asyncio.to_thread(self.store.update_booking_status, booking_id, requested)
        except Exception as e:
            logger.error(f"Failed to persist status {requested.value} for booking {booking_id}: {e}")
            self.failed_updates.append(
                FailedUpdate(booking_id=booking_id, previous=previous, requested=requested, error=str(e))
            )

    def _is_current(self, failed: FailedUpdate) -> bool:
        return self.board.get(failed.booking_id).status is failed.requested

    async def retry(self, failed: FailedUpdate) -> None:
        """
        Send a failed status change to the store again.

        A record superseded by a later change is dropped without a call.
        """
        self.failed_updates.remove(failed)
        if not self._is_current(failed):
            logger.debug(f"Dropping superseded status change for booking {failed.booking_id}")
            return
        await self._persist(failed.booking_id, failed.previous, failed.requested)

    def rollback(self, failed: FailedUpdate) -> None:
        """
        Restore the status the booking had before a failed change.

        Only reverts while the booking still shows the failed status; a
        record superseded by a later change is just dropped.
        """
        self.failed_updates.remove(failed)
        if not self._is_current(failed):
            logger.debug(f"Dropping superseded status change for booking {failed.booking_id}")
            return
        self.board = apply_status_change(self.board, failed.booking_id, failed.previous)


async def fetch_registrations(
    store: BookingStore,
) -> tuple[list[StallRegistration], list[CampRegistration]]:
    """Fetch stall and camp registrations concurrently."""
    stalls, camps = await asyncio.gather(
        asyncio.to_thread(store.fetch_stalls),
        asyncio.to_thread(store.fetch_camps),
    )
    return stalls, camps
