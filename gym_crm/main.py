#!/usr/bin/env python3
"""
Creates the schema on the configured database.
Production schemas are managed with alembic; this is for local and sqlite setups.
"""

import logging

from gym_crm.database import engine, init_db
from gym_crm.logger import setup_logging

logger = logging.getLogger("gym_crm.main")


def main():
    setup_logging()
    init_db(engine)
    logger.info("Database schema is ready.")


if __name__ == "__main__":
    main()
