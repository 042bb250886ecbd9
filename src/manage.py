"""Reputation database management CLI.

Creates and drops the database schema for the Reputation domain when it is
configured with an RDBMS provider (PROTEAN_ENV=production). With the
default in-memory provider both commands are no-ops.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys

import structlog

logger = structlog.get_logger(__name__)


def _domain():
    from reputation.domain import reputation

    reputation.init()
    return reputation


def setup_database():
    from reputation.utils.db import setup_db

    providers = setup_db(_domain())
    logger.info("Database schema ready", providers=providers)
    return providers


def drop_database():
    from reputation.utils.db import drop_db

    providers = drop_db(_domain())
    logger.info("Database schema dropped", providers=providers)
    return providers


def main(argv=None):
    parser = argparse.ArgumentParser(description="Reputation database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
