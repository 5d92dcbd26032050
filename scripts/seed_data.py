#!/usr/bin/env python3
"""
Database Seed Script

Resets the catalog to the demo data set (2 authors, 5 books) without
starting the API server.

USAGE:
    # From the project root with the package installed (pip install -e .)
    python scripts/seed_data.py
    MONGO_URL=mongodb://db.internal/books python scripts/seed_data.py --yes

The same seeder runs at API startup when RESET_DATABASE=true.
"""

import argparse
import logging
import sys

from catalog_api.config import get_settings
from catalog_api.database import CatalogDatabase
from catalog_api.services.seeder import seed_database

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Delete all authors and books, then insert the demo catalog"
    )
    parser.add_argument(
        "--yes",
        action="store_true",
        help="Do not ask for confirmation before deleting existing data",
    )
    args = parser.parse_args()

    settings = get_settings()
    database = CatalogDatabase.from_settings(settings)

    if not args.yes:
        answer = input(
            f"This deletes every author and book in '{database.name}'. Continue? [y/N] "
        )
        if answer.strip().lower() not in {"y", "yes"}:
            print("Aborted.")
            database.close()
            return 1

    try:
        result = seed_database(database)
    finally:
        database.close()

    print("=" * 60)
    print("Database seeding completed successfully!")
    print("=" * 60)
    print("\nSummary:")
    print(f"  - Authors: {result.authors} (removed {result.authors_deleted})")
    print(f"  - Books: {result.books} (removed {result.books_deleted})")
    print(f"\nYou can now access the API at http://localhost:{settings.port}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
