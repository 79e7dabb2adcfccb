"""
Script to initialize database: create tables if they don't exist before migrations.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from src.configuration.config import settings  # noqa: E402
from src.common.repositories import Database  # noqa: E402
from src.modules.listings.entities import Listing  # noqa: E402, F401


def init_database(database: Database):
    """Create all tables if they don't exist."""
    print("Creating tables if they don't exist...")
    database.create_all()
    print("Tables created/verified successfully!")


if __name__ == "__main__":
    database = Database(settings.DATABASE_URL)
    try:
        init_database(database)
    finally:
        database.close()
