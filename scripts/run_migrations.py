#!/usr/bin/env python3
"""
Script to run Alembic migrations for the transactions schema.

Usage:
    python scripts/run_migrations.py upgrade head
    python scripts/run_migrations.py downgrade base
    python scripts/run_migrations.py current

DATABASE_URL (environment or .env) selects the target database.
"""

import logging
import sys
from pathlib import Path

from alembic import command
from alembic.config import Config


logger = logging.getLogger("run_migrations")

ROOT = Path(__file__).resolve().parent.parent


def main():
    """Run an Alembic command against DATABASE_URL."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    config = Config(str(ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(ROOT / "alembic"))

    if len(sys.argv) < 2:
        logger.error("Usage: python scripts/run_migrations.py [command] [args...]")
        logger.error("Commands: upgrade, downgrade, current, history")
        sys.exit(1)

    cmd = sys.argv[1]

    if cmd == "upgrade":
        target = sys.argv[2] if len(sys.argv) > 2 else "head"
        logger.info(f"Running: alembic upgrade {target}")
        command.upgrade(config, target)
        logger.info("Migration complete")

    elif cmd == "downgrade":
        target = sys.argv[2] if len(sys.argv) > 2 else "base"
        logger.info(f"Running: alembic downgrade {target}")
        command.downgrade(config, target)
        logger.info("Downgrade complete")

    elif cmd == "current":
        command.current(config)

    elif cmd == "history":
        command.history(config)

    else:
        logger.error(f"Unknown command: {cmd}")
        sys.exit(1)


if __name__ == "__main__":
    main()
