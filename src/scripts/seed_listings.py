"""
Script to fill an empty listings table with generated sample data.
"""
import logging
import random
import sys
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from pathlib import Path

from sqlalchemy.orm import Session

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from src.configuration.config import settings  # noqa: E402
from src.common.repositories import Database  # noqa: E402
from src.modules.listings.dtos.listing import ListingCreate  # noqa: E402
from src.modules.listings.services.listings_service import ListingsService  # noqa: E402

logger = logging.getLogger(__name__)

OWNER_IDS = ("owner-123", "owner-456", "owner-789")
CITIES = (
    "Springfield", "Riverside", "Fairview", "Madison", "Georgetown", "Salem",
    "Franklin", "Clinton", "Greenville", "Bristol", "Oakland", "Ashland",
    "Burlington", "Dover", "Hudson", "Kingston", "Milton", "Newport",
)
STREETS = (
    "Main St", "Oak Ave", "Maple Dr", "Cedar Ln", "Pine St", "Elm St",
    "Lakeview Rd", "Hillcrest Ave", "Sunset Blvd", "Park Pl", "River Rd",
)
MIN_PRICE = 150_000
MAX_PRICE = 2_000_000
HISTORY_DAYS = 2 * 365


def build_fake_listing(rng: random.Random, now: datetime) -> ListingCreate:
    city = rng.choice(CITIES)
    price = Decimal(str(round(rng.uniform(MIN_PRICE, MAX_PRICE), 2))).quantize(Decimal("0.01"))
    return ListingCreate(
        id_owner=rng.choice(OWNER_IDS),
        name=f"{city} Heights",
        address=f"{rng.randint(1, 9999)} {rng.choice(STREETS)}, {city}",
        price=price,
        image_url=f"https://picsum.photos/640/480?image={rng.randint(0, 1000)}",
        created_at=now - timedelta(seconds=rng.randint(0, HISTORY_DAYS * 24 * 3600)),
    )


def seed_listings(db: Session, count: int, seed: int | None = None) -> int:
    """
    Insert ``count`` generated listings when the table is empty.

    Returns the number of listings inserted (0 when data was already present).
    """
    service = ListingsService(db)
    if service.count_listings() > 0:
        logger.info("Listings already present, skipping seed")
        return 0

    rng = random.Random(seed)
    now = datetime.now(UTC)
    for _ in range(count):
        service.create_listing(build_fake_listing(rng, now))

    logger.info(f"Seeded {count} listings")
    return count


def seed_database(database: Database, count: int) -> int:
    db = database.session()
    try:
        inserted = seed_listings(db, count)
        db.commit()
        return inserted
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    database = Database(settings.DATABASE_URL, echo=settings.DEBUG)
    try:
        print(f"Seeding up to {settings.SEED_COUNT} listings...")
        inserted = seed_database(database, settings.SEED_COUNT)
        print(f"Inserted {inserted} listings.")
    finally:
        database.close()
