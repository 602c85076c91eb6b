#!/usr/bin/env python3
"""
Initialize the design database.

Creates the table used for storing designs (element forest, selection and
timestamps).
"""
import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from config.settings import settings
from data.database import DatabaseManager


def main():
    parser = argparse.ArgumentParser(
        description='Initialize design database'
    )
    parser.add_argument(
        '--database-url',
        type=str,
        default=None,
        help=f'Database URL (default: {settings.database_url})'
    )
    parser.add_argument(
        '--drop-existing',
        action='store_true',
        help='Drop existing tables before creating new ones (WARNING: destroys data!)'
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    db_manager = DatabaseManager(args.database_url)

    print("=" * 60)
    print("Design Database Initialization")
    print("=" * 60)
    print(f"Database URL: {db_manager.database_url}")
    print()

    if args.drop_existing:
        confirm = input("Drop existing tables? This will DELETE ALL DATA! (yes/no): ")
        if confirm.lower() == 'yes':
            db_manager.drop_tables()
            print()
        else:
            print("Aborted.")
            return

    db_manager.create_tables()

    print()
    print("Database initialized successfully!")
    print()
    print("Tables created:")
    print("  - designs")
    print()


if __name__ == '__main__':
    main()
