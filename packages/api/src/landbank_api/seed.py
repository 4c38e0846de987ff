# This project was developed with assistance from AI tools.
"""CLI entrypoint for demo data seeding.

Usage:
    python -m landbank_api.seed          # Create tables and seed demo data
    python -m landbank_api.seed --force  # Clear and re-seed
    landbank-seed [--force]              # Same, via the console script
"""

import argparse
import asyncio
import json

from landbank_db import SessionLocal, create_all

from .services.seed.seeder import seed_demo_data


async def main(force: bool = False) -> None:
    """Run demo data seeding."""
    await create_all()
    async with SessionLocal() as session:
        result = await seed_demo_data(session, force=force)
        print(json.dumps(result, indent=2, default=str))


def cli() -> None:
    """Parse arguments and seed (``landbank-seed`` console script)."""
    parser = argparse.ArgumentParser(description="Seed land bank compliance demo data")
    parser.add_argument(
        "--force",
        action="store_true",
        help="Clear existing demo data and re-seed",
    )
    args = parser.parse_args()
    asyncio.run(main(force=args.force))


if __name__ == "__main__":
    cli()
