import os
from collections.abc import Callable, Iterator
from datetime import UTC, datetime, timedelta
from decimal import Decimal

# Settings() requires a database URL at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from src.common.repositories import Base, Database  # noqa: E402
from src.modules.listings.dtos.listing import ListingCreate  # noqa: E402
from src.modules.listings.entities import Listing  # noqa: E402
from src.modules.listings.repositories.listing_repository import ListingRepository  # noqa: E402

BASE_TIME = datetime(2024, 1, 15, 10, 30, tzinfo=UTC)


@pytest.fixture
def database() -> Iterator[Database]:
    """In-memory SQLite shared by every session of one test."""
    database = Database(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    database.create_all()
    yield database
    Base.metadata.drop_all(bind=database.engine)
    database.close()


@pytest.fixture
def db_session(database: Database) -> Iterator[Session]:
    session = database.session()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def make_listing(db_session: Session) -> Callable[..., Listing]:
    """Insert and commit a listing; created_at is given in minutes after BASE_TIME."""
    repository = ListingRepository(db_session)
    counter = {"value": 0}

    def _make_listing(
        name: str = "Springfield Heights",
        address: str = "742 Evergreen Terrace, Springfield",
        price: Decimal | int | str = Decimal("250000.00"),
        id_owner: str = "owner-123",
        minutes: int | None = None,
    ) -> Listing:
        counter["value"] += 1
        offset = counter["value"] if minutes is None else minutes
        listing = repository.create(
            ListingCreate(
                id_owner=id_owner,
                name=name,
                address=address,
                price=Decimal(str(price)),
                image_url=f"https://picsum.photos/640/480?image={counter['value']}",
                created_at=BASE_TIME + timedelta(minutes=offset),
            )
        )
        db_session.commit()
        return listing

    return _make_listing


@pytest.fixture
def client(database: Database) -> Iterator[TestClient]:
    from src.main import app

    app.state.database = database
    # Lifespan is not entered, so the test database stays in place
    yield TestClient(app, raise_server_exceptions=False)
