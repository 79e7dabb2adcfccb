import logging

from sqlalchemy.orm import Session

from src.common.dtos.filter_pagination import PageResult
from src.modules.listings.dtos.listing import ListingCreate, ListingFilter, ListingView
from src.modules.listings.repositories.listing_repository import ListingRepository
from src.modules.listings.utils.mappers import to_listing_view
from src.modules.listings.utils.validators import ListingFilterError, normalize_listing_filter

logger = logging.getLogger(__name__)


class ListingsService:

    def __init__(self, db: Session):
        self.repository = ListingRepository(db)

    def get_listing_by_id(self, listing_id: str) -> ListingView | None:
        listing = self.repository.get_by_id(listing_id)
        if not listing:
            logger.info(f"Listing {listing_id} not found")
            return None
        return to_listing_view(listing)

    def get_listings(self, listing_filter: ListingFilter) -> PageResult[ListingView]:
        try:
            query = normalize_listing_filter(listing_filter)
        except ListingFilterError as e:
            logger.info(f"Rejected listings filter: {[kind.value for kind in e.kinds]}")
            raise

        total_count, listings = self.repository.find_page(
            query.page_number,
            query.page_size,
            name=query.name,
            address=query.address,
            min_price=query.min_price,
            max_price=query.max_price,
        )

        return PageResult[ListingView].build(
            items=[to_listing_view(listing) for listing in listings],
            total_count=total_count,
            page_number=query.page_number,
            page_size=query.page_size,
        )

    def create_listing(self, listing_data: ListingCreate) -> ListingView:
        listing = self.repository.create(listing_data)
        return to_listing_view(listing)

    def count_listings(self) -> int:
        return self.repository.count()
