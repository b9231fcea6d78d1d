#!/usr/bin/env python3
"""Seed product catalog script.

Writes the reference catalog (categories, products, variants) to the
configured database.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --create-tables
    python scripts/seed_catalog.py --no-clear
"""

import argparse
import asyncio

from catalog_service.catalog.seed import seed_database
from catalog_service.infrastructure.config import settings
from catalog_service.infrastructure.database import (
    Base,
    async_session_factory,
    dispose_engine,
    engine,
)
from catalog_service.infrastructure.logging import configure_logging


async def create_tables() -> None:
    """Create database tables if they don't exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the reference product catalog",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create tables from the ORM models instead of relying on migrations",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear existing catalog rows before seeding",
    )

    args = parser.parse_args()

    configure_logging(settings.log_level, settings.json_logs)

    print("=" * 60)
    print("Catalog Seeder")
    print("=" * 60)
    print(f"Clear existing: {not args.no_clear}")
    print()

    if args.create_tables:
        print("Creating database tables...")
        await create_tables()
        print("Tables ready.")
        print()

    async with async_session_factory() as session:
        result = await seed_database(session, clear_existing=not args.no_clear)

    print(f"  ✓ Deleted: {result['deleted']} existing products")
    print(f"  ✓ Categories: {result['categories_created']}")
    print(f"  ✓ Products: {result['products_created']}")
    print(f"  ✓ Variants: {result['variants_created']}")
    print()
    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)

    await dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
