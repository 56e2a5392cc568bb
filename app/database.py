"""Firestore client setup."""
from functools import lru_cache

from google.cloud import firestore

from app.config import get_settings


@lru_cache()
def get_firestore_client() -> firestore.Client:
    """Return a process-wide Firestore client for the configured project."""

    settings = get_settings()
    return firestore.Client(project=settings.firestore_project_id)


def get_db() -> firestore.Client:
    """FastAPI dependency yielding the shared Firestore client."""
    return get_firestore_client()
