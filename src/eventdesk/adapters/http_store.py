"""HTTP booking store adapter - REST client for a remote booking API."""

import logging

import requests

from eventdesk.core.bookings import (
    Booking,
    BookingNotFoundError,
    BookingStatus,
    CampRegistration,
    StallRegistration,
)

logger = logging.getLogger(__name__)


class HttpBookingStore:
    """
    Remote booking API adapter.

    Implements BookingStore protocol. Expects JSON endpoints
    GET /bookings, GET /stalls, GET /camps and PATCH /bookings/<id>.
    No business logic - just I/O.
    """

    def __init__(self, base_url: str, token: str = "", session: requests.Session | None = None):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self._session = session or requests.Session()

    def _headers(self) -> dict:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    def _get(self, endpoint: str) -> list[dict]:
        resp = self._session.get(f"{self.base_url}{endpoint}", headers=self._headers())
        resp.raise_for_status()
        return resp.json()

    def fetch_bookings(self) -> list[Booking]:
        return [Booking.from_api(d) for d in self._get("/bookings")]

    def fetch_stalls(self) -> list[StallRegistration]:
        return [StallRegistration.from_api(d) for d in self._get("/stalls")]

    def fetch_camps(self) -> list[CampRegistration]:
        return [CampRegistration.from_api(d) for d in self._get("/camps")]

    def update_booking_status(self, booking_id: str, status: BookingStatus) -> Booking | None:
        status = BookingStatus.parse(status)
        resp = self._session.patch(
            f"{self.base_url}/bookings/{booking_id}",
            json={"status": status.value},
            headers=self._headers(),
        )
        if resp.status_code == 404:
            raise BookingNotFoundError(booking_id)
        if not resp.ok:
            logger.error(f"Status update for {booking_id} failed: {resp.status_code} {resp.text}")
        resp.raise_for_status()
        # 204 or an empty body acknowledges the change without a record
        if resp.status_code == 204 or not resp.content:
            return None
        return Booking.from_api(resp.json())
