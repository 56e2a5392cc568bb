"""Notification dispatching helpers."""
from __future__ import annotations

import logging
from typing import Any, Iterable

import httpx

from app.config import Settings, get_settings
from app.models.schemas import NotificationKind


logger = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = "Notification API failure"


class NotificationDeliveryError(RuntimeError):
    """Raised when a notification could not be handed to the delivery endpoint."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotificationDispatcher:
    """Forwards broadcast and assignment notices to the notification endpoint.

    The dispatcher keeps no per-call state. Each ``send`` issues at most one
    POST; there is no queueing and no retry. Callers that dispatch many
    notifications can pass a shared ``httpx.AsyncClient`` to reuse pooled
    connections, otherwise a short-lived client is opened per call.
    """

    def __init__(
        self,
        endpoint_url: str,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.endpoint_url = endpoint_url
        self.timeout = timeout
        self._client = client

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> "NotificationDispatcher":
        """Build a dispatcher from application settings."""

        settings = settings or get_settings()
        return cls(
            settings.notification_endpoint_url,
            timeout=settings.notification_timeout_seconds,
            client=client,
        )

    async def dispatch_broadcast(self, recipients: Iterable[str], subject: str) -> bool:
        """Announce a newly posted task to every matching worker."""

        return await self.send(recipients, subject, NotificationKind.BROADCAST)

    async def dispatch_assignment(self, recipients: Iterable[str], subject: str) -> bool:
        """Tell the given workers they have been assigned a task."""

        return await self.send(recipients, subject, NotificationKind.ASSIGNMENT)

    async def send(
        self,
        recipients: Iterable[str],
        subject: str,
        kind: NotificationKind | str,
    ) -> bool:
        """
        Send a single notification request.

        Args:
            recipients: Recipient email addresses, in order
            subject: Task title the notification refers to
            kind: ``broadcast`` or ``assignment``

        Returns:
            True once the endpoint accepted the request, False when there
            was nobody to notify and no request was made.

        Raises:
            NotificationDeliveryError: endpoint answered with a non-2xx status
                or the request could not be completed.
        """
        emails = list(recipients)
        if not emails:
            return False

        kind = NotificationKind(kind)
        payload = {"emails": emails, "taskTitle": subject, "type": kind.value}
        logger.info(
            "Sending %s notification to %d recipients for: %s",
            kind.value,
            len(emails),
            subject,
        )

        try:
            response = await self._post(payload)
        except httpx.HTTPError as exc:
            logger.error("Failed to trigger %s notification: %s", kind.value, exc)
            raise NotificationDeliveryError(str(exc) or FALLBACK_ERROR_MESSAGE) from exc

        if not response.is_success:
            message = self._error_message(response)
            logger.error(
                "Notification endpoint rejected %s notification | status=%d | message=%s",
                kind.value,
                response.status_code,
                message,
            )
            raise NotificationDeliveryError(message, status_code=response.status_code)

        logger.info("%s notification trigger successful", kind.value.capitalize())
        return True

    async def _post(self, payload: dict[str, Any]) -> httpx.Response:
        if self._client is not None:
            return await self._client.post(self.endpoint_url, json=payload)

        client_kwargs: dict[str, Any] = {}
        if self.timeout is not None:
            client_kwargs["timeout"] = self.timeout
        async with httpx.AsyncClient(**client_kwargs) as client:
            return await client.post(self.endpoint_url, json=payload)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Pull ``message`` out of an error payload, falling back to a generic text."""

        try:
            data = response.json()
        except ValueError:
            return FALLBACK_ERROR_MESSAGE
        if isinstance(data, dict) and data.get("message"):
            return str(data["message"])
        return FALLBACK_ERROR_MESSAGE
