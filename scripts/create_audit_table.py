# scripts/create_audit_table.py

import sys
from pathlib import Path

# Ensure project root is on the path when running this script directly
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import asyncio
import logging

from rewrite_provenance.config.logging import configure_logging
from rewrite_provenance.config.settings import get_settings
from rewrite_provenance.infrastructure.database import models  # noqa: F401  registers tables
from rewrite_provenance.infrastructure.database.session import Base, get_engine


async def create_tables():
    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()
    logging.getLogger(__name__).info("audit_table_ready")


if __name__ == "__main__":
    configure_logging(get_settings().log_level)
    asyncio.run(create_tables())
