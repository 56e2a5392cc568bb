"""Admin endpoint for resetting the skill-domain catalog."""
from __future__ import annotations

import asyncio
import logging
import secrets

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.config import Settings, get_settings
from app.database import get_db
from app.models.schemas import SeedResponse
from app.services.domain_seeder import DomainSeeder, load_domain_catalog


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["domains"])


class SeedKeyRejected(Exception):
    """Raised when the seed-domains key is missing, wrong, or seeding is disabled."""


async def seed_key_rejected_handler(request: Request, exc: SeedKeyRejected) -> JSONResponse:
    return JSONResponse(status_code=401, content={"message": "Unauthorized"})


def require_seed_key(key: str | None = None, settings: Settings = Depends(get_settings)) -> None:
    """Check the ``key`` query parameter before any Firestore client is created."""

    expected = settings.seed_key
    if not expected or key is None:
        raise SeedKeyRejected()
    if not secrets.compare_digest(key.encode(), expected.encode()):
        raise SeedKeyRejected()


@router.post(
    "/seed-domains",
    response_model=SeedResponse,
    dependencies=[Depends(require_seed_key)],
)
async def seed_domains(
    settings: Settings = Depends(get_settings),
    db=Depends(get_db),
):
    """Replace the domains collection with the demo catalog."""

    try:
        catalog = load_domain_catalog(settings.domain_catalog_path)
        seeder = DomainSeeder(db, settings.domains_collection)
        seeded = await asyncio.to_thread(seeder.replace, catalog)
    except Exception as exc:
        logger.exception("Seeding error")
        return JSONResponse(
            status_code=500,
            content={"message": "Failed to seed domains", "error": str(exc)},
        )

    return {
        "message": "Demo domains seeded successfully",
        "count": len(seeded),
        "domains": seeded,
    }
