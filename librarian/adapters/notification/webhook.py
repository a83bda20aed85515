"""Webhook notification adapter.

Implements NotificationPort by POSTing each borrow or return as a JSON
event to an HTTP endpoint.
"""

import logging

import httpx

from librarian.core.models import LendingAction, LendingEvent
from librarian.core.ports import NotificationPort

logger = logging.getLogger(__name__)


class WebhookNotificationAdapter(NotificationPort):
    """Sends lending events to a webhook URL."""

    def __init__(
        self,
        url: str,
        timeout_seconds: float = 5.0,
        headers: dict[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize webhook notification adapter.

        Args:
            url: Endpoint that receives the events.
            timeout_seconds: Per-request timeout.
            headers: Extra headers sent with every request (e.g. auth).
            transport: Optional httpx transport, mainly for tests.
        """
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.headers = headers or {}
        self._transport = transport
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.timeout_seconds,
                headers={"Content-Type": "application/json", **self.headers},
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def notify_borrow(self, member_id: int, title: str) -> None:
        """Send a borrow event."""
        self._send(LendingEvent.now(LendingAction.BORROW, member_id, title))

    def notify_return(self, member_id: int, title: str) -> None:
        """Send a return event."""
        self._send(LendingEvent.now(LendingAction.RETURN, member_id, title))

    def _send(self, event: LendingEvent) -> None:
        """POST the event.

        Raises:
            httpx.RequestError: If the endpoint cannot be reached.
            httpx.HTTPStatusError: If the endpoint answers with a non-2xx status.
        """
        try:
            response = self._get_client().post(self.url, json=event.to_dict())
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Webhook rejected {event.action.value} event: {e.response.status_code}",
                extra={
                    "member_id": event.member_id,
                    "title": event.title,
                    "response": e.response.text,
                },
            )
            raise
        except httpx.RequestError as e:
            logger.error(
                f"Failed to deliver {event.action.value} event: {e}",
                extra={"member_id": event.member_id, "title": event.title},
            )
            raise

        logger.debug(
            f"Delivered {event.action.value} event",
            extra={"member_id": event.member_id, "title": event.title},
        )
