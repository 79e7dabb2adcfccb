from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from src.common.dtos.filter_pagination import PageResult
from src.common.repositories import get_db
from src.modules.listings.dtos.listing import (
    DEFAULT_PAGE_NUMBER,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    ListingFilter,
    ListingView,
)
from src.modules.listings.services.listings_service import ListingsService

router = APIRouter(prefix="/listings", tags=["listings"])


def listing_filter_params(
    name: str | None = Query(None, description="Case-insensitive substring of the listing name"),
    address: str | None = Query(None, description="Case-insensitive substring of the address"),
    min_price: Decimal | None = Query(None, alias="minPrice", description="Lowest price (inclusive)"),
    max_price: Decimal | None = Query(None, alias="maxPrice", description="Highest price (inclusive)"),
    page_number: int = Query(DEFAULT_PAGE_NUMBER, alias="pageNumber", description="Page number (starts at 1)"),
    page_size: int = Query(
        DEFAULT_PAGE_SIZE,
        alias="pageSize",
        description=f"Items per page. Values above {MAX_PAGE_SIZE} are reduced to {MAX_PAGE_SIZE}",
    ),
) -> ListingFilter:
    return ListingFilter(
        name=name,
        address=address,
        min_price=min_price,
        max_price=max_price,
        page_number=page_number,
        page_size=page_size,
    )


@router.get(
    "",
    response_model=PageResult[ListingView],
    summary="List listings",
    description="Returns one page of listings, newest first, optionally filtered by name, address and price range.",
    responses={
        200: {
            "description": "Page of listings",
            "content": {
                "application/json": {
                    "example": {
                        "items": [
                            {
                                "id": "65a1f0c2e4b0a1b2c3d4e5f6",
                                "idOwner": "owner-123",
                                "name": "Springfield Heights",
                                "address": "742 Evergreen Terrace, Springfield",
                                "price": 350000.00,
                                "imageUrl": "https://picsum.photos/640/480?random=1",
                            }
                        ],
                        "pageNumber": 1,
                        "pageSize": 20,
                        "totalCount": 1,
                        "totalPages": 1,
                        "hasPreviousPage": False,
                        "hasNextPage": False,
                    }
                }
            },
        },
        400: {"description": "Invalid page number, page size or price range"},
        422: {"description": "Query parameter of the wrong type"},
    },
)
def get_listings(
    listing_filter: ListingFilter = Depends(listing_filter_params),
    db: Session = Depends(get_db),
):
    """
    List listings with pagination and filters.

    - **name** / **address**: case-insensitive "contains" filters, combined with AND
    - **minPrice** / **maxPrice**: inclusive price bounds; minPrice must be lower than maxPrice
    - **pageNumber**: page to return; pages past the end come back empty
    - **pageSize**: items per page (maximum 100)
    """
    service = ListingsService(db)
    return service.get_listings(listing_filter)


@router.get(
    "/{listing_id}",
    response_model=ListingView,
    summary="Get a listing by ID",
    responses={
        200: {"description": "Listing found"},
        404: {"description": "Listing not found"},
    },
)
def get_listing(
    listing_id: str,
    db: Session = Depends(get_db),
):
    service = ListingsService(db)
    listing = service.get_listing_by_id(listing_id)
    if not listing:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Listing with ID {listing_id} not found",
        )
    return listing
