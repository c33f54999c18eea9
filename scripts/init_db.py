#!/usr/bin/env python
"""Create the leave engine tables.

Usage:
    python scripts/init_db.py
    python scripts/init_db.py --database-url postgresql+asyncpg://...
"""

import argparse
import asyncio
import logging

from leave_engine.config import configure_logging, get_settings
from leave_engine.database import create_schema, get_engine
from leave_engine.models import Base

logger = logging.getLogger("init_db")


async def run(database_url: str) -> None:
    """Create every table that does not exist yet."""
    engine = get_engine(database_url)
    try:
        await create_schema(engine)
    finally:
        await engine.dispose()
    logger.info("Schema ready: %s", ", ".join(sorted(Base.metadata.tables)))


def main() -> None:
    parser = argparse.ArgumentParser(description="Create leave engine tables")
    parser.add_argument(
        "--database-url",
        default=None,
        help="Async SQLAlchemy URL (default: DATABASE_URL from the environment)",
    )
    args = parser.parse_args()

    configure_logging()
    asyncio.run(run(args.database_url or get_settings().database_url))


if __name__ == "__main__":
    main()
