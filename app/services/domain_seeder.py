"""Seeding of the skill-domain catalog into Firestore."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable

import yaml

from app.models.schemas import Domain, SeededDomain


logger = logging.getLogger(__name__)


def load_domain_catalog(path: str | Path) -> list[Domain]:
    """Read the domain catalog YAML file."""

    with Path(path).open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    return [Domain(**entry) for entry in data.get("domains", [])]


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class DomainSeeder:
    """Replaces the contents of the domains collection with a fixed catalog.

    Seeding is a full delete-then-insert. It is not transactional: a failure
    halfway through leaves the collection partially populated, and rerunning
    the seeder is the recovery path.
    """

    def __init__(self, client: Any, collection: str = "domains") -> None:
        self.client = client
        self.collection = collection

    def clear(self) -> int:
        """Delete every document in the collection and return how many were removed."""

        deleted = 0
        for snapshot in self.client.collection(self.collection).stream():
            snapshot.reference.delete()
            deleted += 1
        logger.info("Removed %d existing documents from %s", deleted, self.collection)
        return deleted

    def seed(self, domains: Iterable[Domain]) -> list[SeededDomain]:
        """Insert each domain with a fresh creation timestamp."""

        collection = self.client.collection(self.collection)
        seeded: list[SeededDomain] = []
        for domain in domains:
            record = {
                "name": domain.name,
                "stacks": list(domain.stacks),
                "createdAt": domain.created_at or _timestamp(),
            }
            _, ref = collection.add(record)
            logger.debug("Seeded %s (%s)", domain.name, ref.id)
            seeded.append(SeededDomain(id=ref.id, **record))
        logger.info("Seeded %d domains into %s", len(seeded), self.collection)
        return seeded

    def replace(self, domains: Iterable[Domain]) -> list[SeededDomain]:
        """Clear the collection, then seed it with ``domains``."""

        domains = list(domains)
        logger.info("Cleaning up existing %s...", self.collection)
        self.clear()
        logger.info("Seeding %d demo domains...", len(domains))
        return self.seed(domains)
