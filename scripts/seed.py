"""
Seed snapshot script.

Writes the built-in users, tools and departments to Redis.
Existing snapshots are kept unless --reset is given.
"""

import argparse
import asyncio

from nexushub.core.constants import seed_departments, seed_tools, seed_users
from nexushub.core.dependencies import get_storage
from nexushub.core.storage import COLLECTIONS
from nexushub.utils.logger import get_logger

logger = get_logger(__name__)

SEED = {
    "users": lambda: [u.to_snapshot() for u in seed_users()],
    "tools": lambda: [t.to_snapshot() for t in seed_tools()],
    "departments": seed_departments,
}


async def seed_snapshots(reset: bool = False) -> None:
    storage = get_storage()
    try:
        logger.info("Starting snapshot seed process...")

        for collection in COLLECTIONS:
            existing = await storage.load(collection)

            if existing is not None and not reset:
                logger.info(f"Snapshot '{collection}' already exists ({len(existing)} items). Skipping.")
                continue

            payload = SEED[collection]()
            if not await storage.save(collection, payload):
                raise RuntimeError(f"Could not write snapshot '{collection}'")
            logger.info(f"Seeded '{collection}' with {len(payload)} items")

        logger.info("✅ Snapshots seeded successfully!")

    except Exception as e:
        logger.error(f"❌ Failed to seed snapshots: {e}")
        raise
    finally:
        await storage.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--reset", action="store_true", help="Overwrite existing snapshots")
    args = parser.parse_args()
    asyncio.run(seed_snapshots(reset=args.reset))
