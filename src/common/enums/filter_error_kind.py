import enum


class FilterErrorKind(str, enum.Enum):
    INVALID_PAGE_NUMBER = "InvalidPageNumber"
    INVALID_PAGE_SIZE = "InvalidPageSize"
    INVALID_PRICE_RANGE = "InvalidPriceRange"
