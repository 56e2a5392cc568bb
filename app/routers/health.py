"""Router exposing basic system endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from app.config import Settings, get_settings


router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/status")
async def get_status() -> dict[str, str]:
    """Return a minimal status payload."""
    return {"status": "online"}


@router.get("/integrations")
async def get_integrations(settings: Settings = Depends(get_settings)) -> dict:
    """
    Report which external integrations have credentials configured.

    Returns:
        dict: {
            "smtp": bool,
            "gemini": bool,
            "firestore": bool,
            "notification_endpoint": str
        }
    """
    return {
        "smtp": bool(settings.smtp_user and settings.smtp_password),
        "gemini": bool(settings.gemini_api_key),
        "firestore": bool(settings.firestore_project_id),
        "notification_endpoint": settings.notification_endpoint_url,
    }
