#!/usr/bin/env python3
"""Seed database with a sample tasting.

Creates:
- Sample beers (some without price, to exercise the statistics filter)
- A handful of ratings per beer
- The settings record with names hidden

The seed is idempotent: beers are matched by name and skipped when present,
and ratings are only added to beers created in this run.

Usage:
    python -m scripts.seed
    python -m scripts.seed --create-tables   # SQLite / fresh dev DB without Alembic
"""

import argparse
import asyncio

from dotenv import load_dotenv
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from beer_tasting.models import Beer
from beer_tasting.stores import postgres
from beer_tasting.stores.beers import create_beer
from beer_tasting.stores.ratings import create_rating
from beer_tasting.stores.tasting_settings import get_or_create_settings

load_dotenv()

# ============================================================
# Sample tasting
# ============================================================

SAMPLE_BEERS = [
    {"name": "Pilsner Urquell", "price": 24.9, "alcohol_percentage": 4.4, "ratings": [4, 4, 5, 3]},
    {"name": "Guinness Draught", "price": 29.5, "alcohol_percentage": 4.2, "ratings": [3, 4, 2]},
    {"name": "Brewdog Punk IPA", "price": 32.0, "alcohol_percentage": 5.4, "ratings": [5, 4, 4, 5]},
    {"name": "Sofiero Original", "price": 12.9, "alcohol_percentage": 5.1, "ratings": [2, 3, 2]},
    {"name": "Westmalle Tripel", "price": 45.0, "alcohol_percentage": 9.5, "ratings": [5, 5, 4]},
    {"name": "Mystery Homebrew", "price": None, "alcohol_percentage": None, "ratings": [3]},
    {"name": "Unopened Bottle", "price": 19.9, "alcohol_percentage": 4.8, "ratings": []},
]


async def seed_beers(session: AsyncSession) -> None:
    """Seed sample beers and their ratings."""
    for beer_def in SAMPLE_BEERS:
        result = await session.execute(select(Beer).where(Beer.name == beer_def["name"]))
        if result.scalars().first() is not None:
            print(f"  skip {beer_def['name']} (exists)")
            continue

        beer = await create_beer(
            session,
            name=beer_def["name"],
            price=beer_def["price"],
            alcohol_percentage=beer_def["alcohol_percentage"],
        )
        for value in beer_def["ratings"]:
            await create_rating(session, beer_id=beer.beer_id, value=value)
        print(f"  + {beer.name} ({len(beer_def['ratings'])} ratings)")


async def seed_database(create_tables: bool = False) -> None:
    """Seed database with initial data."""
    await postgres.init_db()
    try:
        if create_tables:
            await postgres.create_tables()

        async with postgres.get_session() as session:
            print("Seeding database...")

            print("\nCreating beers...")
            await seed_beers(session)

            print("\nEnsuring settings...")
            settings = await get_or_create_settings(session)
            print(f"  show_beer_names={settings.show_beer_names}")

        print("\nDatabase seeded successfully!")
    finally:
        await postgres.close_db()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--create-tables", action="store_true", help="Create tables before seeding")
    args = parser.parse_args()
    asyncio.run(seed_database(create_tables=args.create_tables))
