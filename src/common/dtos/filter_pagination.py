from typing import Generic, TypeVar

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


def calculate_total_pages(total_count: int, page_size: int) -> int:
    """Ceiling of total_count / page_size; zero when there is nothing to page."""
    if page_size <= 0 or total_count <= 0:
        return 0
    return (total_count + page_size - 1) // page_size


def calculate_skip(page_number: int, page_size: int) -> int:
    return (page_number - 1) * page_size


class PageResult(BaseModel, Generic[T]):
    """Standard paginated response DTO."""

    items: list[T] = Field(..., description="Items in the current page")
    page_number: int = Field(..., description="Requested page number (starts at 1)")
    page_size: int = Field(..., description="Requested number of items per page")
    total_count: int = Field(..., description="Total number of matching items across all pages")
    total_pages: int = Field(..., description="Total number of pages")
    has_previous_page: bool = Field(..., description="Whether a page exists before this one")
    has_next_page: bool = Field(..., description="Whether a page exists after this one")

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @classmethod
    def build(
        cls, items: list[T], total_count: int, page_number: int, page_size: int
    ) -> "PageResult[T]":
        total_pages = calculate_total_pages(total_count, page_size)
        return cls(
            items=items,
            page_number=page_number,
            page_size=page_size,
            total_count=total_count,
            total_pages=total_pages,
            has_previous_page=page_number > 1,
            has_next_page=page_number < total_pages,
        )
