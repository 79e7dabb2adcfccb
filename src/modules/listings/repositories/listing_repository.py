import logging
from decimal import Decimal

from sqlalchemy.sql.elements import ColumnElement

from src.common.dtos.filter_pagination import calculate_skip
from src.common.repositories import BaseRepository
from src.modules.listings.dtos.listing import ListingCreate
from src.modules.listings.entities import Listing

logger = logging.getLogger(__name__)


class ListingRepository(BaseRepository[Listing]):

    model = Listing

    def get_by_id(self, listing_id: str) -> Listing | None:
        return self.get_by(id=listing_id)

    def find_page(
        self,
        page_number: int,
        page_size: int,
        name: str | None = None,
        address: str | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
    ) -> tuple[int, list[Listing]]:
        """
        Return the total number of listings matching the filters and one page of them.

        The total is counted before pagination. Listings come newest first; listings
        created at the same instant keep their insertion order.
        """
        criteria = self._build_criteria(name, address, min_price, max_price)

        total_count = self.count(criteria)
        skip = calculate_skip(page_number, page_size)
        # Past the last page; huge page numbers would also overflow OFFSET
        if skip >= total_count:
            return total_count, []

        query = self._build_query(criteria).order_by(
            Listing.created_at.desc(),
            Listing.seq.asc(),
        )
        items = self._paginate(query, skip, page_size)

        logger.debug(
            f"Listings page {page_number} (size {page_size}): "
            f"{len(items)} items of {total_count} matching"
        )
        return total_count, items

    def create(self, listing_data: ListingCreate) -> Listing:
        data = listing_data.model_dump(mode="python", exclude_none=True)
        data["image_url"] = str(listing_data.image_url)
        return super().create(Listing(**data))

    def _build_criteria(
        self,
        name: str | None,
        address: str | None,
        min_price: Decimal | None,
        max_price: Decimal | None,
    ) -> list[ColumnElement[bool]]:
        criteria: list[ColumnElement[bool]] = []

        # autoescape makes % and _ in user input match literally
        if name:
            criteria.append(Listing.name.icontains(name, autoescape=True))
        if address:
            criteria.append(Listing.address.icontains(address, autoescape=True))

        if min_price is not None:
            criteria.append(Listing.price >= min_price)
        if max_price is not None:
            criteria.append(Listing.price <= max_price)

        return criteria
