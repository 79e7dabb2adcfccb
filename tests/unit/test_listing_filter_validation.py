"""Tests for listing filter validation and normalization."""
from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.common.enums.filter_error_kind import FilterErrorKind
from src.modules.listings.dtos.listing import ListingFilter
from src.modules.listings.utils.validators import (
    ListingFilterError,
    clamp_page_size,
    clean_text_filter,
    normalize_listing_filter,
)


class TestPageRules:

    def test_defaults_are_valid(self):
        result = normalize_listing_filter(ListingFilter())
        assert result.page_number == 1
        assert result.page_size == 20

    @pytest.mark.parametrize("page_number", [0, -1])
    def test_rejects_non_positive_page_number(self, page_number):
        with pytest.raises(ListingFilterError) as exc_info:
            normalize_listing_filter(ListingFilter(page_number=page_number))
        assert exc_info.value.kinds == [FilterErrorKind.INVALID_PAGE_NUMBER]

    @pytest.mark.parametrize("page_size", [0, -5])
    def test_rejects_non_positive_page_size(self, page_size):
        with pytest.raises(ListingFilterError) as exc_info:
            normalize_listing_filter(ListingFilter(page_size=page_size))
        assert exc_info.value.kinds == [FilterErrorKind.INVALID_PAGE_SIZE]

    def test_page_size_above_maximum_is_clamped(self):
        assert normalize_listing_filter(ListingFilter(page_size=500)).page_size == 100
        assert normalize_listing_filter(ListingFilter(page_size=100)).page_size == 100
        assert normalize_listing_filter(ListingFilter(page_size=99)).page_size == 99

    def test_clamped_filter_equals_maximum_filter(self):
        clamped = normalize_listing_filter(ListingFilter(page_size=500))
        maximum = normalize_listing_filter(ListingFilter(page_size=100))
        assert clamped == maximum

    def test_clamp_page_size(self):
        assert clamp_page_size(1) == 1
        assert clamp_page_size(101) == 100


class TestPriceRange:

    def test_rejects_min_price_above_max_price(self):
        with pytest.raises(ListingFilterError) as exc_info:
            normalize_listing_filter(
                ListingFilter(min_price=Decimal("500"), max_price=Decimal("100"))
            )
        assert exc_info.value.kinds == [FilterErrorKind.INVALID_PRICE_RANGE]

    def test_rejects_equal_bounds(self):
        with pytest.raises(ListingFilterError) as exc_info:
            normalize_listing_filter(
                ListingFilter(min_price=Decimal("100"), max_price=Decimal("100"))
            )
        assert exc_info.value.kinds == [FilterErrorKind.INVALID_PRICE_RANGE]

    def test_accepts_valid_range(self):
        result = normalize_listing_filter(
            ListingFilter(
                page_number=1,
                page_size=20,
                min_price=Decimal("100"),
                max_price=Decimal("200"),
            )
        )
        assert result.min_price == Decimal("100")
        assert result.max_price == Decimal("200")

    def test_single_bound_is_not_checked(self):
        assert normalize_listing_filter(ListingFilter(min_price=Decimal("500"))).min_price == 500
        assert normalize_listing_filter(ListingFilter(max_price=Decimal("1"))).max_price == 1


class TestErrorReporting:

    def test_reports_every_broken_rule(self):
        with pytest.raises(ListingFilterError) as exc_info:
            normalize_listing_filter(
                ListingFilter(
                    page_number=0,
                    page_size=0,
                    min_price=Decimal("500"),
                    max_price=Decimal("100"),
                )
            )
        assert exc_info.value.kinds == [
            FilterErrorKind.INVALID_PAGE_NUMBER,
            FilterErrorKind.INVALID_PAGE_SIZE,
            FilterErrorKind.INVALID_PRICE_RANGE,
        ]
        assert all(error.message for error in exc_info.value.errors)

    def test_errors_are_immutable(self):
        with pytest.raises(ListingFilterError) as exc_info:
            normalize_listing_filter(ListingFilter(page_number=0))
        error = exc_info.value.errors[0]
        with pytest.raises(ValidationError):
            error.message = "changed"

    def test_error_kinds_use_wire_names(self):
        assert FilterErrorKind.INVALID_PAGE_NUMBER.value == "InvalidPageNumber"
        assert FilterErrorKind.INVALID_PAGE_SIZE.value == "InvalidPageSize"
        assert FilterErrorKind.INVALID_PRICE_RANGE.value == "InvalidPriceRange"


class TestTextFilters:

    def test_empty_text_filters_become_absent(self):
        result = normalize_listing_filter(ListingFilter(name="", address=""))
        assert result.name is None
        assert result.address is None

    def test_whitespace_is_kept_as_part_of_the_filter(self):
        result = normalize_listing_filter(ListingFilter(name="Lake ", address=" "))
        assert result.name == "Lake "
        assert result.address == " "

    def test_clean_text_filter_keeps_none(self):
        assert clean_text_filter(None) is None


def test_normalization_does_not_modify_input():
    original = ListingFilter(name=" lake ", page_size=500)
    normalize_listing_filter(original)
    assert original.name == " lake "
    assert original.page_size == 500
