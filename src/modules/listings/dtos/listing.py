from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, Field, HttpUrl, PlainSerializer
from pydantic.alias_generators import to_camel

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

# Clients read prices as JSON numbers, not strings
JsonDecimal = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class ListingFilter(BaseModel):
    """Search and pagination parameters for one listings query."""

    name: str | None = Field(None, description="Case-insensitive substring of the listing name")
    address: str | None = Field(None, description="Case-insensitive substring of the address")
    min_price: Decimal | None = Field(None, description="Lowest accepted price (inclusive)")
    max_price: Decimal | None = Field(None, description="Highest accepted price (inclusive)")
    page_number: int = Field(DEFAULT_PAGE_NUMBER, description="Page number (starts at 1)")
    page_size: int = Field(
        DEFAULT_PAGE_SIZE, description=f"Items per page, capped at {MAX_PAGE_SIZE}"
    )

    class Config:
        frozen = True


class ListingCreate(BaseModel):
    id_owner: str = Field(..., min_length=1, max_length=64)
    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=512)
    price: Decimal = Field(..., gt=0, max_digits=14, decimal_places=2)
    image_url: HttpUrl = Field(...)
    created_at: datetime | None = Field(None)

    class Config:
        json_schema_extra = {
            "example": {
                "id_owner": "owner-123",
                "name": "Springfield Heights",
                "address": "742 Evergreen Terrace, Springfield",
                "price": 350000.00,
                "image_url": "https://picsum.photos/640/480?random=1",
            }
        }


class ListingView(BaseModel):
    id: str = Field(...)
    id_owner: str = Field(...)
    name: str = Field(...)
    address: str = Field(...)
    price: JsonDecimal = Field(...)
    image_url: str = Field(...)

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": "65a1f0c2e4b0a1b2c3d4e5f6",
                "idOwner": "owner-123",
                "name": "Springfield Heights",
                "address": "742 Evergreen Terrace, Springfield",
                "price": 350000.00,
                "imageUrl": "https://picsum.photos/640/480?random=1",
            }
        }
