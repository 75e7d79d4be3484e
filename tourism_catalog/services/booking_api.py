import logging
import secrets
from datetime import datetime, timezone

import httpx

from tourism_catalog.exceptions.custom import BookingApiError, RateLimitError
from tourism_catalog.schemas.booking import BookingConfirmation, BookingDraft

logger = logging.getLogger(__name__)

BOOKINGS_PATH = "/bookings"


def generate_booking_id(now: datetime | None = None) -> str:
    """`BK` + last six digits of the millisecond clock + eight hex chars."""
    now = now or datetime.now(timezone.utc)
    millis = str(int(now.timestamp() * 1000))
    return f"BK{millis[-6:]}{secrets.token_hex(4).upper()}"


class BookingApiService:
    def __init__(
        self,
        client: httpx.AsyncClient | None,
        base_url: str = "",
        api_key: str = "",
    ):
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._headers = {"Content-Type": "application/json"}
        if api_key:
            self._headers["Authorization"] = f"Bearer {api_key}"

    @property
    def is_remote(self) -> bool:
        return bool(self._base_url)

    async def submit(self, draft: BookingDraft) -> BookingConfirmation:
        if not self.is_remote:
            booking_id = generate_booking_id()
            logger.info(
                "Accepted %s booking %s for item %s locally",
                draft.item_type.value, booking_id, draft.item_id,
            )
            return BookingConfirmation(booking_id=booking_id, status="pending", draft=draft)

        resp = await self._client.post(
            f"{self._base_url}{BOOKINGS_PATH}",
            json=draft.model_dump(mode="json", by_alias=True),
            headers=self._headers,
        )

        if resp.status_code == 429:
            raise RateLimitError("Booking API")
        if resp.status_code >= 400:
            raise BookingApiError(resp.text, status_code=resp.status_code)

        data = resp.json()
        # Some deployments wrap the record as {"message": ..., "booking": {...}}
        payload = data.get("booking", data) if isinstance(data, dict) else None
        if not isinstance(payload, dict):
            raise BookingApiError(f"Unexpected booking payload: {payload!r}")
        booking_id = payload.get("bookingId")
        if not booking_id:
            raise BookingApiError("Booking API response missing bookingId")

        logger.info("Submitted booking %s for item %s", booking_id, draft.item_id)
        return BookingConfirmation(
            booking_id=booking_id,
            status=payload.get("status", "pending"),
            draft=draft,
        )
