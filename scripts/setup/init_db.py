"""
Initialize the SQL database: create all tables and load fixture data.
Run once before first launch with STORAGE_BACKEND=sql.
Usage: python scripts/setup/init_db.py [--no-seed]
"""

import argparse
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from sqlalchemy import inspect, text

from app.config import settings
from app.database import build_engine
from app.services.seed_service import seed_storage
from app.services.storage_service import Storage
from app.storage.sql import SqlBackend


def main():
    parser = argparse.ArgumentParser(description="Create tables and seed the park database")
    parser.add_argument("--no-seed", action="store_true", help="Create tables only")
    args = parser.parse_args()

    print("Park DB Initialization")
    print("=" * 40)
    print(f"Database: {settings.DATABASE_URL}")

    engine = build_engine(settings.DATABASE_URL)
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("Database connection OK")
    except Exception as e:
        print(f"Cannot connect to database: {e}")
        sys.exit(1)

    print("\nCreating tables...")
    storage = Storage(SqlBackend(engine), issue_feedback_types=settings.ISSUE_FEEDBACK_TYPES)
    tables = inspect(engine).get_table_names()
    print(f"Tables in database ({len(tables)} total):")
    for t in sorted(tables):
        print(f"   - {t}")

    if not args.no_seed:
        if seed_storage(storage, settings):
            print(f"\nSeeded fixture data. Admin login: {settings.ADMIN_EMAIL}")
        else:
            print("\nDatabase already has users, seed skipped")

    print("\nDatabase ready! Start the API with:")
    print("   STORAGE_BACKEND=sql uvicorn app.main:app --host 0.0.0.0 --port 5000 --reload")


if __name__ == "__main__":
    main()
