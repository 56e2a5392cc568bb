"""FastAPI application entry point."""
from fastapi import FastAPI

from app.logging_config import configure_logging
from app.routers import domains, health, notifications


configure_logging()

app = FastAPI(title="Work Portal Ops API")
app.add_exception_handler(domains.SeedKeyRejected, domains.seed_key_rejected_handler)


@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Return a static payload for liveness checks."""
    return {"status": "ok"}


# Include routers
app.include_router(health.router)
app.include_router(notifications.router)
app.include_router(domains.router)
