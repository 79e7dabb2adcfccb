from src.modules.listings.dtos.listing import (
    DEFAULT_PAGE_NUMBER,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    ListingCreate,
    ListingFilter,
    ListingView,
)

__all__ = [
    "DEFAULT_PAGE_NUMBER",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "ListingCreate",
    "ListingFilter",
    "ListingView",
]
