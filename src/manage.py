"""Wholesale database management CLI.

Provides commands to create and drop the database schema and to load the
reference catalogue.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Replace catalogue with reference data
"""

import argparse
import sys


def setup_database():
    """Create database schema for the wholesale domain."""
    from wholesale.domain import wholesale
    from wholesale.utils.db import setup_db

    print("Initializing wholesale domain...")
    wholesale.init()
    print("Creating database schema...")
    setup_db(wholesale)
    print("Done.")


def drop_database():
    """Drop database schema for the wholesale domain."""
    from wholesale.domain import wholesale
    from wholesale.utils.db import drop_db

    print("Initializing wholesale domain...")
    wholesale.init()
    print("Dropping database schema...")
    drop_db(wholesale)
    print("Done.")


def seed_database():
    """Clear the catalogue and load the reference brands and products."""
    from wholesale.domain import wholesale
    from wholesale.utils.seed import PRODUCTS, seed_catalogue

    print("Initializing wholesale domain...")
    wholesale.init()
    print("Seeding catalogue...")
    brand_ids = seed_catalogue(wholesale)
    print(f"  {len(brand_ids)} brands, {len(PRODUCTS)} products created.")
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Wholesale database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Replace the catalogue with reference data")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
