"""Reset the Firestore domains collection to the demo catalog."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import get_settings
from app.database import get_firestore_client
from app.logging_config import configure_logging
from app.services.domain_seeder import DomainSeeder, load_domain_catalog


logger = logging.getLogger("scripts.seed_domains")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Replace the Firestore domains collection with the demo catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Wipe and reseed the configured collection
  python scripts/seed_domains.py

  # Show what would be written without touching Firestore
  python scripts/seed_domains.py --dry-run
        """
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        help="Path to the domain catalog YAML. Defaults to DOMAIN_CATALOG_PATH."
    )
    parser.add_argument(
        "--collection",
        type=str,
        help="Firestore collection to replace. Defaults to DOMAINS_COLLECTION."
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the catalog and exit"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging()
    settings = get_settings()

    catalog = load_domain_catalog(args.catalog or settings.domain_catalog_path)
    if args.dry_run:
        for domain in catalog:
            print(f"{domain.name}: {', '.join(domain.stacks)}")
        return 0

    try:
        seeder = DomainSeeder(get_firestore_client(), args.collection or settings.domains_collection)
        seeded = seeder.replace(catalog)
    except Exception:
        logger.exception("Error seeding domains")
        return 1

    for domain in seeded:
        print(f"✓ Seeded: {domain.name} ({domain.id})")
    print("Done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
