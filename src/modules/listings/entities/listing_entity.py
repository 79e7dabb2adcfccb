import secrets

from sqlalchemy import Column, Index, Integer, Numeric, String

from src.common.entities.base import BaseEntity


def generate_listing_id() -> str:
    """24 hex characters, the same shape as the identifiers already handed to clients."""
    return secrets.token_hex(12)


class ListingEntity(BaseEntity):

    __tablename__ = "listings"

    # Insertion order; breaks ties between listings created at the same instant
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(64), nullable=False, unique=True, default=generate_listing_id)
    id_owner = Column(String(64), nullable=False)
    name = Column(String(255), nullable=False)
    address = Column(String(512), nullable=False)
    price = Column(Numeric(14, 2), nullable=False)
    image_url = Column(String(2048), nullable=False)

    __table_args__ = (
        Index(
            "ix_listings_name_address_trgm",
            "name",
            "address",
            postgresql_using="gin",
            postgresql_ops={"name": "gin_trgm_ops", "address": "gin_trgm_ops"},
        ),
        Index("ix_listings_price", "price"),
        Index("ix_listings_id_owner", "id_owner"),
        Index("ix_listings_created_at", "created_at"),
    )

    def __repr__(self):
        return f"<Listing(id='{self.id}', name='{self.name}', price={self.price})>"
