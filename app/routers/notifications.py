"""Endpoint that turns notification requests into outbound emails."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.models.schemas import MessageResponse, NotificationRequest
from app.services.mail_service import Mailer


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["notifications"])


def get_mailer() -> Mailer:
    """FastAPI dependency providing the SMTP mailer."""
    return Mailer()


def _bad_request(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": message})


@router.post("/send-broadcast-email", response_model=MessageResponse)
async def send_broadcast_email(request: Request, mailer: Mailer = Depends(get_mailer)):
    """
    Email a broadcast or assignment notice to a list of workers.

    Body:
        {"emails": [...], "taskTitle": "...", "type": "broadcast" | "assignment"}

    Recipients are BCC'd so workers never see each other's addresses.
    """
    try:
        body: Any = await request.json()
    except ValueError:
        return _bad_request("Request body must be JSON")
    if not isinstance(body, dict):
        return _bad_request("Request body must be a JSON object")

    emails = body.get("emails")
    if not emails or not isinstance(emails, list):
        return _bad_request("No recipients provided")
    if body.get("taskTitle") is None:
        return _bad_request("Task title is required")

    try:
        notification = NotificationRequest.model_validate(body)
    except ValidationError as err:
        return _bad_request(f"Invalid notification request: {err.errors()[0]['msg']}")

    try:
        message_id = await mailer.send_notification(
            notification.emails,
            notification.task_title,
            notification.type,
        )
    except Exception as exc:
        logger.exception("Failed to send %s emails for %s", notification.type.value, notification.task_title)
        return JSONResponse(
            status_code=500,
            content={"message": "Failed to send emails", "error": str(exc)},
        )

    logger.info("Notification emails sent | id=%s", message_id)
    return {"message": "Emails sent successfully"}
