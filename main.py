"""
main.py
-------
Entry point for preparing a LightBnB database.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Optionally load the users/properties JSON fixtures.

Usage:
    python main.py
    python main.py --seed-users json/users.json --seed-properties json/properties.json
"""

import argparse
import sys

from db.connection import Database
from db.errors import DataAccessError
from db.init_db import create_tables
from db.seed import seed
from utils.logger import get_logger

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create the LightBnB schema and load fixtures.")
    parser.add_argument("--seed-users", metavar="FILE", help="users fixture (JSON)")
    parser.add_argument("--seed-properties", metavar="FILE", help="properties fixture (JSON)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run setup and return a process exit code."""
    args = parse_args(argv)
    try:
        with Database.from_config() as db:
            create_tables(db)
            if args.seed_users or args.seed_properties:
                seed(db, args.seed_users, args.seed_properties)
    except DataAccessError as e:
        logger.error(f"Database setup failed: {e}")
        return 1
    logger.info("Database ready.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
