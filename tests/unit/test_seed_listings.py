"""Tests for the sample data seeder."""
import random
from datetime import UTC, datetime, timedelta
from decimal import Decimal

from src.modules.listings.repositories.listing_repository import ListingRepository
from src.scripts.seed_listings import (
    MAX_PRICE,
    MIN_PRICE,
    OWNER_IDS,
    build_fake_listing,
    seed_database,
    seed_listings,
)


def test_seeds_empty_table(db_session):
    inserted = seed_listings(db_session, 10, seed=42)

    total_count, items = ListingRepository(db_session).find_page(1, 100)
    assert inserted == 10
    assert total_count == 10
    for listing in items:
        assert listing.id_owner in OWNER_IDS
        assert listing.name.endswith(" Heights")
        assert Decimal(MIN_PRICE) <= listing.price <= Decimal(MAX_PRICE)
        assert listing.image_url.startswith("https://picsum.photos/")


def test_leaves_existing_data_untouched(db_session, make_listing):
    make_listing()
    assert seed_listings(db_session, 10) == 0
    assert ListingRepository(db_session).count() == 1


def test_seed_database_commits(database):
    assert seed_database(database, 3) == 3
    assert seed_database(database, 3) == 0

    session = database.session()
    try:
        assert ListingRepository(session).count() == 3
    finally:
        session.close()


def test_generated_listing_is_within_the_last_two_years():
    now = datetime.now(UTC)
    listing = build_fake_listing(random.Random(7), now)
    assert now - timedelta(days=2 * 365) <= listing.created_at <= now
    assert listing.price == listing.price.quantize(Decimal("0.01"))
