"""
Noteful API — Database Seeding
===============================

What:  Resets the configured database and loads the fixture folders, tags
       and notes from `noteful.seed_data`.
How:   Drop all tables → create all tables → insert folders, tags, notes →
       dispose the engine. Each step is logged.
Who:   Developers (`python -m noteful.seed` or the `noteful-seed` script)
       and the test fixtures (`insert_seed_data`).

WARNING: destructive. Every table in the configured DATABASE_URL is dropped.
"""

import argparse
import asyncio
import logging
from typing import Dict

from sqlalchemy.ext.asyncio import AsyncSession

from noteful import seed_data
from noteful.config import settings
from noteful.database import async_session_factory, create_schema, dispose_engine, drop_schema
from noteful.models import Folder, Note, Tag

logger = logging.getLogger(__name__)


async def insert_seed_data(session: AsyncSession) -> Dict[str, int]:
    """
    Insert the fixture documents into an open session and flush.

    The caller owns the transaction (commit or roll back).

    Returns:
        Count of inserted rows per collection.
    """
    folders = [Folder(**doc) for doc in seed_data.FOLDERS]
    tags = {doc["id"]: Tag(**doc) for doc in seed_data.TAGS}
    session.add_all(folders)
    session.add_all(tags.values())

    notes = []
    for doc in seed_data.NOTES:
        fields = {key: value for key, value in doc.items() if key != "tags"}
        notes.append(Note(**fields, tags=[tags[tag_id] for tag_id in doc["tags"]]))
    session.add_all(notes)

    await session.flush()
    return {"folders": len(folders), "tags": len(tags), "notes": len(notes)}


async def seed_database() -> Dict[str, int]:
    await drop_schema()
    logger.info("Dropped all tables")
    await create_schema()
    logger.info("Created all tables")

    async with async_session_factory() as session:
        counts = await insert_seed_data(session)
        await session.commit()

    for collection, count in counts.items():
        logger.info("Inserted %d %s", count, collection.capitalize())
    return counts


async def _main() -> None:
    try:
        await seed_database()
    finally:
        await dispose_engine()
        logger.info("Disconnected")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Drop, recreate and seed the Noteful database.",
    )
    parser.add_argument(
        "--yes",
        action="store_true",
        help="skip the confirmation prompt",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if not args.yes:
        answer = input(f"This drops every table in {settings.database_url}. Continue? [y/N] ")
        if answer.strip().lower() not in {"y", "yes"}:
            logger.info("Aborted")
            return

    asyncio.run(_main())


if __name__ == "__main__":
    main()
