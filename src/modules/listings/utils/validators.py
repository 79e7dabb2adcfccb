from pydantic import BaseModel

from src.common.enums.filter_error_kind import FilterErrorKind
from src.modules.listings.dtos.listing import MAX_PAGE_SIZE, ListingFilter


class FilterError(BaseModel):
    kind: FilterErrorKind
    message: str

    class Config:
        frozen = True


class ListingFilterError(ValueError):
    """Raised when a listings query is rejected before it reaches the database."""

    def __init__(self, errors: list[FilterError]):
        self.errors = errors
        super().__init__("; ".join(error.message for error in errors))

    @property
    def kinds(self) -> list[FilterErrorKind]:
        return [error.kind for error in self.errors]


def clean_text_filter(value: str | None) -> str | None:
    # An empty string means "no filter"; anything else is matched as given
    return value or None


def clamp_page_size(page_size: int) -> int:
    return min(page_size, MAX_PAGE_SIZE)


def collect_filter_errors(listing_filter: ListingFilter) -> list[FilterError]:
    errors: list[FilterError] = []

    if listing_filter.page_number <= 0:
        errors.append(
            FilterError(
                kind=FilterErrorKind.INVALID_PAGE_NUMBER,
                message="The page number must be greater than zero.",
            )
        )

    if listing_filter.page_size <= 0:
        errors.append(
            FilterError(
                kind=FilterErrorKind.INVALID_PAGE_SIZE,
                message="The page size must be greater than zero.",
            )
        )

    min_price, max_price = listing_filter.min_price, listing_filter.max_price
    if min_price is not None and max_price is not None and min_price >= max_price:
        errors.append(
            FilterError(
                kind=FilterErrorKind.INVALID_PRICE_RANGE,
                message="The minimum price must be lower than the maximum price.",
            )
        )

    return errors


def normalize_listing_filter(listing_filter: ListingFilter) -> ListingFilter:
    """
    Validate a filter and return the normalized copy used for querying.

    Page size is capped at MAX_PAGE_SIZE and empty text filters are dropped.
    The input is never modified.

    Raises:
        ListingFilterError: with every rule the filter breaks.
    """
    errors = collect_filter_errors(listing_filter)
    if errors:
        raise ListingFilterError(errors)

    return listing_filter.model_copy(
        update={
            "name": clean_text_filter(listing_filter.name),
            "address": clean_text_filter(listing_filter.address),
            "page_size": clamp_page_size(listing_filter.page_size),
        }
    )
