#!/usr/bin/env python3
"""
Database management script.
Creates, drops, resets and seeds the listing tables.
"""

import asyncio
import sys
import argparse
import logging
import uuid
from pathlib import Path

# Add the project directory to the Python path
sys.path.insert(0, str(Path(__file__).parent))

from listings.config import settings
from listings.database import AsyncSessionLocal, create_tables, drop_tables, close_db_connection
from listings.models.enums import PropertyType, State
from listings.repositories.location import LocationRepository
from listings.repositories.property import PropertyRepository
from listings.schemas.location import LocationCreate
from listings.schemas.property import PropertyCreate
from listings.services.location import LocationService
from listings.services.property import PropertyWorkflowService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

SEED_OWNER_ID = uuid.UUID("00000000-0000-4000-8000-000000000001")

SEED_PROPERTIES = [
    PropertyCreate(
        title="2 Bigha Land",
        description="Flat land near the ring road",
        type=PropertyType.LAND,
        location=LocationCreate(address="Baneshwor-10", city="Kathmandu", state=State.BAGMATI, zipcode=44600),
        owner_id=SEED_OWNER_ID
    ),
    PropertyCreate(
        title="Two storey house",
        description="Four bedrooms with a garden",
        type=PropertyType.HOUSE,
        location=LocationCreate(address="Lakeside-6", city="Pokhara", state=State.GANDAKI, zipcode=33700),
        owner_id=SEED_OWNER_ID
    ),
]


async def seed_database() -> None:
    """Seed the database with approved sample listings."""
    logger.info("Seeding database with sample listings")

    async with AsyncSessionLocal() as session:
        service = PropertyWorkflowService(
            session,
            PropertyRepository(session),
            LocationService(LocationRepository(session))
        )

        existing = await service.list_all(page=1, size=1)
        if existing[1].total_items:
            logger.info("Listings already exist, skipping seed")
            return

        for property_data in SEED_PROPERTIES:
            created = await service.create_admin_approved_property(property_data)
            logger.info(f"  Seeded: {created.title} ({created.id})")

    logger.info("Database seeded successfully")


async def reset_database() -> None:
    """Reset the database by dropping and recreating all tables."""
    logger.warning("Resetting database - all data will be lost!")

    if not (settings.is_development or settings.is_testing):
        raise RuntimeError("Database reset is only allowed in development or test mode")

    await drop_tables()
    await create_tables()
    await seed_database()

    logger.info("Database reset completed")


async def run(command: str) -> None:
    try:
        if command == "create-tables":
            await create_tables()
        elif command == "drop-tables":
            await drop_tables()
        elif command == "seed":
            await seed_database()
        elif command == "reset":
            await reset_database()
    finally:
        await close_db_connection()


def main():
    """Main CLI interface for database management."""
    parser = argparse.ArgumentParser(description="Listing database management")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("create-tables", help="Create all tables")
    subparsers.add_parser("drop-tables", help="Drop all tables (never in production)")
    subparsers.add_parser("seed", help="Seed database with sample listings")

    reset_parser = subparsers.add_parser("reset", help="Reset database (development only)")
    reset_parser.add_argument("--confirm", action="store_true", help="Confirm database reset")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return

    if args.command == "reset" and not args.confirm:
        print("Database reset requires --confirm flag")
        return

    try:
        asyncio.run(run(args.command))
    except Exception as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
